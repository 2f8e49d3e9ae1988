"""Runtime settings for the command line and web front ends."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Presentation settings. The core calculator takes no configuration."""

    default_coordinate1: str
    default_coordinate2: str
    web_port: int
    log_level: str


def load_settings() -> Settings:
    return Settings(
        default_coordinate1=os.getenv("GEO_DISTANCE_COORD1", "26.86296° N, 81.04288° E"),
        default_coordinate2=os.getenv("GEO_DISTANCE_COORD2", "26.86343° N, 81.04136° E"),
        web_port=int(os.getenv("GEO_DISTANCE_WEB_PORT", "8501")),
        log_level=os.getenv("GEO_DISTANCE_LOG_LEVEL", "WARNING").upper(),
    )
