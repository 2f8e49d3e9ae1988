"""Parse two coordinate strings, range-check them and measure the distance."""

from __future__ import annotations

import logging

from geo_distance.geo import haversine_m
from geo_distance.models import DistanceResult, GeoPoint
from geo_distance.parsers import DEFAULT_PARSER, CoordinateParser, ParseError

logger = logging.getLogger(__name__)

EXPECTED_FORMAT = "DD.DDDDD° N/S, DD.DDDDD° E/W"


class DistanceError(ValueError):
    """Base class for errors surfaced by the calculator."""


class InvalidFormatError(DistanceError):
    """One of the inputs is not a recognisable coordinate string."""

    def __init__(self):
        super().__init__(f"Please enter valid coordinates in format: {EXPECTED_FORMAT}")


class OutOfRangeError(DistanceError):
    """A parsed latitude or longitude lies outside the valid envelope."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Coordinates out of range")


class DistanceCalculator:
    """Stateless great-circle distance calculator over raw coordinate text."""

    def __init__(self, parser: CoordinateParser = DEFAULT_PARSER):
        self.parser = parser

    def measure(self, raw1: str, raw2: str) -> DistanceResult:
        """Return the distance between two coordinate strings.

        Raises:
            InvalidFormatError: either string failed to parse.
            OutOfRangeError: either point is outside ±90 / ±180.
        """
        try:
            point1 = self.parser.parse(raw1)
            point2 = self.parser.parse(raw2)
        except ParseError as exc:
            logger.warning("Rejected coordinate %r: %s", exc.text, exc.reason)
            raise InvalidFormatError() from exc

        errors = self.parser.validate(point1) + self.parser.validate(point2)
        if errors:
            logger.warning("Coordinates out of range: %s", "; ".join(errors))
            raise OutOfRangeError(errors)

        meters = round(self._haversine(point1, point2), 2)
        logger.debug("Distance %s -> %s = %.2f m", point1, point2, meters)
        return DistanceResult(meters=meters, point1=point1, point2=point2)

    def calculate(self, raw1: str, raw2: str) -> float:
        """Distance in meters, rounded to two decimals."""
        return self.measure(raw1, raw2).meters

    @staticmethod
    def _haversine(point1: GeoPoint, point2: GeoPoint) -> float:
        return haversine_m(point1.lat, point1.lng, point2.lat, point2.lng)


_DEFAULT_CALCULATOR = DistanceCalculator()


def calculate_distance(text1: str, text2: str) -> DistanceResult:
    """Measure the distance between two coordinate strings with the default parser."""
    return _DEFAULT_CALCULATOR.measure(text1, text2)
