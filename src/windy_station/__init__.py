"""Windy Station - upload personal weather station data to windy.com.

This package registers stations and records observations through the
stations.windy.com update API:

- Station / StationVisibility: station registration payloads
- Observation: sparse measurement payloads
- WindyStationClient: async HTTP client posting both

Usage:
    from windy_station import Observation, WindyStationClient

    async with WindyStationClient.create(api_key) as client:
        await client.record_observations([Observation(temperature=-1.2)])
"""

__version__ = "0.1.0"

from .clients import WindyStationClient
from .config import Settings, WindyConfig, get_settings
from .exceptions import WindyStationError
from .schemas import Observation, Station, StationVisibility

__all__ = [
    "Observation",
    "Settings",
    "Station",
    "StationVisibility",
    "WindyConfig",
    "WindyStationClient",
    "WindyStationError",
    "get_settings",
]
