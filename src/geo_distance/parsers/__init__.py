"""Parsers for converting raw coordinate text to GeoPoint."""

from geo_distance.models import GeoPoint
from geo_distance.parsers.base import CoordinateParser, ParseError
from geo_distance.parsers.hemisphere import HemisphereParser

DEFAULT_PARSER = HemisphereParser()


def parse_coordinate(text: str) -> GeoPoint:
    """Parse ``text`` with the default parser. Raises ParseError on bad input."""
    return DEFAULT_PARSER.parse(text)


__all__ = ["DEFAULT_PARSER", "CoordinateParser", "HemisphereParser", "ParseError", "parse_coordinate"]
