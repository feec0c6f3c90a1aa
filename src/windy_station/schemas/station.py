"""Station registration schema."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from .enums import StationVisibility

UInt32 = Annotated[int, Field(ge=0, le=2**32 - 1)]


class Station(BaseModel):
    """A physical weather station to register with an account.

    Field order matches the order of keys on the wire.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Annotated[UInt32, Field(alias="station")]
    visibility: StationVisibility
    name: str
    latitude: float
    longitude: float
    elevation: UInt32  # Meters above sea level
    temp_height: Annotated[UInt32, Field(alias="tempheight")]
    wind_height: Annotated[UInt32, Field(alias="windheight")]

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the dict sent in a registration request."""
        return self.model_dump(mode="json", by_alias=True)
