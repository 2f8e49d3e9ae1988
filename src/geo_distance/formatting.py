"""Display helpers shared by the CLI and the web page."""

from __future__ import annotations


def format_meters(meters: float) -> str:
    """Meters with thousands separators and no trailing zero decimals."""
    return _trim(f"{meters:,.2f}")


def format_kilometers(meters: float) -> str:
    """Kilometers derived from meters, at most two fractional digits."""
    return _trim(f"{meters / 1000:,.2f}")


def format_coordinate(lat: float, lng: float) -> str:
    """Render signed degrees back into hemisphere notation."""
    ns = "S" if lat < 0 else "N"
    ew = "W" if lng < 0 else "E"
    return f"{abs(lat):.5f}° {ns}, {abs(lng):.5f}° {ew}"


def _trim(text: str) -> str:
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
