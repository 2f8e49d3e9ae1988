"""Great-circle distance math. Pure Python, no external deps."""

from __future__ import annotations

import math

EARTH_RADIUS_M = 6_371_000.0

# Longest possible great-circle path: half the circumference.
MAX_DISTANCE_M = EARTH_RADIUS_M * math.pi


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points on Earth in meters.

    Uses the Haversine formula. Inputs are decimal degrees and are not
    range-checked here.
    """
    rlat1 = math.radians(lat1)
    rlat2 = math.radians(lat2)

    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2
    # Rounding can push a just past 1 for antipodal points.
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c
