"""Abstract base parser with validation logic."""

from __future__ import annotations

import abc

from geo_distance.models import GeoPoint


class ParseError(ValueError):
    """Raised when a coordinate string cannot be parsed."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid coordinate format: {reason}")


class CoordinateParser(abc.ABC):
    """Abstract parser that converts a raw coordinate string → GeoPoint."""

    @abc.abstractmethod
    def parse(self, text: str) -> GeoPoint:
        """Parse free text into a point.

        Args:
            text: The raw coordinate string as typed by the user.

        Returns:
            A GeoPoint. Magnitudes are not range-checked.

        Raises:
            ParseError: if no latitude or no longitude could be found.
        """

    @staticmethod
    def validate(point: GeoPoint) -> list[str]:
        """Validate a GeoPoint. Returns list of error messages (empty = valid)."""
        errors: list[str] = []

        # Latitude: [-90, 90]
        if abs(point.lat) > 90:
            errors.append(f"latitude {point.lat} out of range [-90, 90]")

        # Longitude: [-180, 180]
        if abs(point.lng) > 180:
            errors.append(f"longitude {point.lng} out of range [-180, 180]")

        return errors
