"""Great-circle distance between two free-text coordinates."""

from geo_distance.calculator import (
    DistanceCalculator,
    DistanceError,
    InvalidFormatError,
    OutOfRangeError,
    calculate_distance,
)
from geo_distance.models import DistanceResult, GeoPoint
from geo_distance.parsers import ParseError, parse_coordinate

__all__ = [
    "DistanceCalculator",
    "DistanceError",
    "DistanceResult",
    "GeoPoint",
    "InvalidFormatError",
    "OutOfRangeError",
    "ParseError",
    "calculate_distance",
    "parse_coordinate",
]
