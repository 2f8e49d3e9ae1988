"""Parser for degree/hemisphere coordinate text, e.g. ``26.86296° N, 81.04288° E``."""

from __future__ import annotations

import re

from geo_distance.models import GeoPoint
from geo_distance.parsers.base import CoordinateParser, ParseError

# A decimal magnitude, a degree sign and a hemisphere letter, with any
# amount of whitespace around the degree sign.
_LAT_RE = re.compile(r"([0-9]+\.[0-9]+)\s*°\s*([NnSs])")
_LNG_RE = re.compile(r"([0-9]+\.[0-9]+)\s*°\s*([EeWw])")


class HemisphereParser(CoordinateParser):
    """Parse ``DD.DDDDD° N/S, DD.DDDDD° E/W`` style text → GeoPoint.

    Latitude and longitude are searched for independently, so their order
    in the text does not matter and anything may separate them. When a
    hemisphere group appears more than once the leftmost match wins.
    """

    def parse(self, text: str) -> GeoPoint:
        lat_match = _LAT_RE.search(text)
        if lat_match is None:
            raise ParseError(text, "no latitude (N/S) component found")

        lng_match = _LNG_RE.search(text)
        if lng_match is None:
            raise ParseError(text, "no longitude (E/W) component found")

        lat = float(lat_match.group(1))
        if lat_match.group(2).upper() == "S":
            lat = -lat

        lng = float(lng_match.group(1))
        if lng_match.group(2).upper() == "W":
            lng = -lng

        return GeoPoint(lat=lat, lng=lng)
