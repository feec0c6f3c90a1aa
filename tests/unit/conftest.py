"""Unit test fixtures - sample payload data."""

from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture
def sample_station_data() -> dict:
    """Valid station data matching the Station schema."""
    return {
        "id": 0,
        "visibility": "Open",
        "name": "test-station",
        "latitude": 49.282730,
        "longitude": -123.120735,
        "elevation": 62,
        "temp_height": 1,
        "wind_height": 2,
    }


@pytest.fixture
def complete_observation_data() -> dict:
    """Observation with every field set, timestamp in UTC-4."""
    return {
        "station_id": 1,
        "time": datetime(2014, 10, 23, 20, 3, 41, 636000, tzinfo=timezone(timedelta(hours=-4))),
        "temperature": -1.2,
        "wind_speed": 25.0,
        "wind_direction": 182,
        "wind_gust": 35.0,
        "relative_humidity": 96.0,
        "dew_point": 1.0,
        "pressure": 1021000.0,
        "precipitation": 2.4,
        "uv_index": 1,
    }
