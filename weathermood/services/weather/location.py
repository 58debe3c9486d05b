from __future__ import annotations

from weathermood.core.config import get_settings
from weathermood.schemas.weather import Coordinates


class LocationUnavailableError(Exception):
    """No usable coordinates for this refresh."""


def resolve_location(*, lat: float | None, lon: float | None) -> Coordinates:
    if lat is not None and lon is not None:
        return Coordinates(latitude=lat, longitude=lon)
    if lat is not None or lon is not None:
        raise LocationUnavailableError("Both latitude and longitude are required")

    settings = get_settings()
    if settings.default_latitude is None or settings.default_longitude is None:
        raise LocationUnavailableError("No coordinates supplied and no default location configured")
    return Coordinates(latitude=settings.default_latitude, longitude=settings.default_longitude)
