"""HTTP clients for the Windy stations API."""

from .windy import WindyStationClient

__all__ = [
    "WindyStationClient",
]
