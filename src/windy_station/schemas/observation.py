"""Observation schema for personal weather station measurements."""

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class Observation(BaseModel):
    """One measurement sample from a station.

    Every field is optional. Fields left as None are dropped from the
    serialized payload entirely, since the service treats a missing key as
    "unknown" and a present one as a reading.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Omit to use the account's default station
    station_id: Annotated[int | None, Field(alias="station", ge=0, le=2**32 - 1)] = None
    # Omit to use the server's receipt time
    time: datetime | None = None

    temperature: Annotated[float | None, Field(alias="temp")] = None  # °C
    wind_speed: Annotated[float | None, Field(alias="wind")] = None  # m/s
    wind_direction: Annotated[int | None, Field(alias="winddir", ge=0, le=65535)] = None
    wind_gust: Annotated[float | None, Field(alias="gust")] = None  # m/s
    relative_humidity: Annotated[float | None, Field(alias="rh")] = None  # %
    dew_point: Annotated[float | None, Field(alias="dewpoint")] = None  # °C
    pressure: float | None = None  # Pa
    # Accumulated over the past hour, mm
    precipitation: Annotated[float | None, Field(alias="precip")] = None
    uv_index: Annotated[int | None, Field(alias="uv", ge=0, le=255)] = None

    @field_validator("time")
    @classmethod
    def normalize_to_utc(cls, v: datetime | None) -> datetime | None:
        """Require a timezone and convert to UTC."""
        if v is None:
            return v
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError("time must be timezone-aware")
        return v.astimezone(timezone.utc)

    @field_serializer("time")
    def serialize_time(self, v: datetime | None) -> str | None:
        """Format as RFC 3339 UTC, fraction trimmed to whole milli- or microseconds."""
        if v is None:
            return None
        if v.microsecond == 0:
            timespec = "seconds"
        elif v.microsecond % 1000 == 0:
            timespec = "milliseconds"
        else:
            timespec = "microseconds"
        return v.isoformat(timespec=timespec).replace("+00:00", "Z")

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the sparse dict sent in a recording request."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
