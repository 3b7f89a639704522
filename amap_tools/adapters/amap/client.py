"""AMap web-service API client wrapper.

Issues a single GET per call and returns the parsed JSON body. Provider error
codes (``status``/``infocode`` in the body) are not interpreted here.
"""

from typing import Any

import httpx

from amap_config.settings import Settings
from amap_obs.logging import get_logger

from .exceptions import AmapAPIError, AmapConfigError

logger = get_logger(__name__)


class AmapClientWrapper:
    """AMap REST client.

    Provides:
    - API key injection on every request
    - Mapping of network/transport failures to AmapAPIError
    - No retries and no caching: every call is a fresh round trip
    """

    BASE_URL = "https://restapi.amap.com"

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize AMap client.

        Args:
            api_key: AMap web-service key
            base_url: API base URL (defaults to BASE_URL)
            timeout_seconds: Request timeout; None keeps the httpx default
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        if not api_key:
            raise AmapConfigError("AMAP_API_KEY environment variable is required")
        self.api_key = api_key
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "AmapClientWrapper":
        return cls(
            api_key=settings.AMAP_API_KEY,
            base_url=settings.AMAP_BASE_URL,
            timeout_seconds=settings.AMAP_TIMEOUT_SECONDS,
            **kwargs,
        )

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self.timeout_seconds is not None:
            kwargs["timeout"] = self.timeout_seconds
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    async def get(self, path: str, params: dict[str, Any]) -> Any:
        """Issue a GET against ``base_url + path``.

        Args:
            path: Endpoint path, e.g. ``/v3/place/text``
            params: Query parameters (the API key is added here)

        Returns:
            Parsed JSON body, whatever the HTTP status

        Raises:
            AmapAPIError: Connection, DNS, timeout or protocol failure, or a
                body that is not JSON
        """
        url = f"{self.base_url}{path}"
        query = {**params, "key": self.api_key}

        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as client:
                response = await client.get(url, params=query)
        except httpx.HTTPError as e:
            raise AmapAPIError(str(e) or type(e).__name__) from e

        try:
            return response.json()
        except ValueError as e:
            logger.debug(
                "upstream_body_not_json",
                path=path,
                status_code=response.status_code,
            )
            raise AmapAPIError(
                f"Invalid JSON response (HTTP {response.status_code}): {e}"
            ) from e
