"""Enums for Windy station schemas."""

from enum import Enum


class StationVisibility(str, Enum):
    """Data sharing policy of a registered station.

    Values are the exact tokens the service expects on the wire.
    """

    OPEN = "Open"  # Shared with Windy and its partners
    ONLY_WINDY = "Only Windy"  # Shared with Windy only, still public there
    PRIVATE = "Private"
