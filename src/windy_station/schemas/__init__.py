"""Windy station schemas.

Pydantic models for the station update API payloads.
"""

from .enums import StationVisibility
from .observation import Observation
from .requests import RecordObservationsRequest, RegisterStationsRequest
from .station import Station

__all__ = [
    "Observation",
    "RecordObservationsRequest",
    "RegisterStationsRequest",
    "Station",
    "StationVisibility",
]
