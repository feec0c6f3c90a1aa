"""Request bodies posted to the update endpoint.

The service tells the two requests apart by their top-level key only;
both go to the same URL.
"""

from pydantic import BaseModel, ConfigDict

from .observation import Observation
from .station import Station


class _WireRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_json(self) -> str:
        """Serialize to compact JSON using wire names, dropping unset fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class RegisterStationsRequest(_WireRequest):
    """Body of a station registration: ``{"stations": [...]}``."""

    stations: list[Station]


class RecordObservationsRequest(_WireRequest):
    """Body of an observation upload: ``{"observations": [...]}``."""

    observations: list[Observation]
