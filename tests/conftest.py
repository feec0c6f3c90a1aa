"""Shared test fixtures for all tests."""

import pytest


@pytest.fixture
def sample_api_key() -> str:
    """Sample Windy station API key for testing."""
    return "test-api-key"


@pytest.fixture
def sample_base_url() -> str:
    """Update endpoint used by the client tests."""
    return "https://stations.windy.com/pws/update"
