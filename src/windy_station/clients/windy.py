"""Windy personal weather station update API client."""

import logging
from collections.abc import Sequence
from types import TracebackType

import httpx

from ..config import DEFAULT_BASE_URL, WindyConfig
from ..exceptions import WindyStationError
from ..schemas import (
    Observation,
    RecordObservationsRequest,
    RegisterStationsRequest,
    Station,
)

logger = logging.getLogger(__name__)


class WindyStationClient:
    """HTTP client for uploading station data to stations.windy.com.

    Holds only configuration and a reusable ``httpx.AsyncClient``, so one
    instance can be shared by concurrent tasks. Every call is a single POST
    with no retries.
    """

    def __init__(
        self,
        api_key: str,
        http_client: httpx.AsyncClient | None = None,
        config: WindyConfig | None = None,
        base_url: str | None = None,
    ) -> None:
        """Initialize Windy station client.

        Args:
            api_key: Windy station API key, placed verbatim in the URL path.
            http_client: Optional shared HTTP client. When omitted a client is
                created and owned by this instance.
            config: Windy configuration settings. When omitted the built-in
                defaults are used and the environment is not read.
            base_url: Overrides ``config.base_url``. Used verbatim.
        """
        # model_construct skips BaseSettings env loading
        self.config = config or WindyConfig.model_construct()
        self._api_key = api_key
        self._base_url = base_url or self.config.base_url
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=self.config.timeout_seconds,
            headers={"User-Agent": self.config.user_agent},
        )

    @classmethod
    def create(cls, api_key: str) -> "WindyStationClient":
        """Create a client with a default transport and the default base URL."""
        return cls(api_key, base_url=DEFAULT_BASE_URL)

    @classmethod
    def create_with_transport(
        cls, api_key: str, transport: httpx.AsyncClient
    ) -> "WindyStationClient":
        """Create a client on a caller-supplied HTTP client.

        The caller keeps ownership of ``transport``; ``close()`` leaves it open.
        """
        return cls(api_key, http_client=transport, base_url=DEFAULT_BASE_URL)

    @classmethod
    def from_settings(
        cls, config: WindyConfig, http_client: httpx.AsyncClient | None = None
    ) -> "WindyStationClient":
        """Create a client from configuration, taking the API key from it."""
        return cls(config.api_key, http_client=http_client, config=config)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    @property
    def update_url(self) -> str:
        """Target URL for both operations. The key is not escaped."""
        return f"{self._base_url}/{self._api_key}"

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "WindyStationClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def register_stations(self, stations: Sequence[Station]) -> None:
        """Register stations with the account.

        Args:
            stations: Stations to register. May be empty.

        Raises:
            WindyStationError: On transport failure or a non-2xx response.
        """
        request = RegisterStationsRequest(stations=list(stations))
        await self._post(request.to_json(), "stations", len(request.stations))

    async def record_observations(self, observations: Sequence[Observation]) -> None:
        """Upload observations in a single request.

        Args:
            observations: Observations to record. May be empty.

        Raises:
            WindyStationError: On transport failure or a non-2xx response.
        """
        request = RecordObservationsRequest(observations=list(observations))
        await self._post(request.to_json(), "observations", len(request.observations))

    async def _post(self, body: str, kind: str, count: int) -> None:
        """POST a serialized body and map the outcome to success or failure."""
        logger.debug("Posting %d %s to %s", count, kind, self._redacted_url())

        try:
            response = await self._http_client.post(
                self.update_url,
                content=body,
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Windy rejected %d %s (HTTP %d)", count, kind, status)
            raise WindyStationError(
                f"Windy returned HTTP {status} for {kind} upload", status_code=status
            ) from e
        except httpx.RequestError as e:
            logger.warning("Failed to post %s (connection error): %s", kind, e)
            raise WindyStationError(f"Request to Windy failed: {e}") from e

        logger.debug("Windy accepted %d %s (HTTP %d)", count, kind, response.status_code)

    def _redacted_url(self) -> str:
        return f"{self._base_url}/***"
