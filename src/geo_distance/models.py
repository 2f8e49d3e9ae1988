"""Value types passed between the parser, the calculator and the UIs."""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in signed decimal degrees."""

    lat: float      # positive north, no range guarantee
    lng: float      # positive east, no range guarantee

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, raw: str) -> GeoPoint:
        d = json.loads(raw)
        return cls(lat=float(d["lat"]), lng=float(d["lng"]))


@dataclass(frozen=True)
class DistanceResult:
    """Great-circle distance between two points, rounded to centimeters."""

    meters: float
    point1: GeoPoint
    point2: GeoPoint

    @property
    def kilometers(self) -> float:
        return self.meters / 1000

    def to_dict(self) -> dict:
        d = asdict(self)
        d["kilometers"] = self.kilometers
        return d

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
