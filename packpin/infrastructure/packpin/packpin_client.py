"""Packpin client implementing TrackingServiceProtocol.

Public entry point of the library. Composes the endpoint clients:
    - trackings_api.py: create/get/list/update/delete trackings
    - carriers_api.py: list carriers, detect carriers for a tracking number

Configuration loaded from settings (packpin/core/config.py):
    - api_key: Packpin-Api-Key header value (fallback when none is passed)
    - host/port: Endpoint location (port 443 selects https)
    - timeout: Request timeout in seconds
"""

from typing import Any

import structlog

from packpin.core.config import Settings, get_settings
from packpin.core.errors import PackpinError
from packpin.core.result import Result
from packpin.infrastructure.packpin.carriers_api import CarriersAPI
from packpin.infrastructure.packpin.trackings_api import TrackingsAPI

logger = structlog.get_logger(__name__)


class PackpinClient:
    """Packpin API client.

    Every operation is a coroutine returning `Success(body)` with the
    unwrapped response body, or `Failure(error)` with a PackpinError. Each
    call issues exactly one HTTP request; nothing is cached or retried.

    Example:
        >>> client = PackpinClient("your-api-key")
        >>> result = await client.create_tracking(
        ...     "058200005422993", "dpd", {"description": "mylittleshipment"}
        ... )
        >>> match result:
        ...     case Success(value=tracking):
        ...         print(tracking)
        ...     case Failure(error=error):
        ...         print(error.to_dict())
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: Settings | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize Packpin client.

        Args:
            api_key: Packpin API key. Defaults to settings.api_key.
            settings: Client settings. Defaults to environment settings.
            timeout: Request timeout in seconds. Defaults to settings.timeout;
                non-positive values fall back to the default timeout.

        Raises:
            ValueError: If no API key is given or configured.
        """
        self._settings = settings or get_settings()
        api_key = api_key or self._settings.api_key
        if not api_key:
            raise ValueError(
                "A Packpin API key is required (pass api_key or set PACKPIN_API_KEY)"
            )
        if timeout is None:
            timeout = self._settings.timeout

        self._trackings_api = TrackingsAPI(
            api_key=api_key,
            base_url=self._settings.base_url,
            timeout=timeout,
        )
        self._carriers_api = CarriersAPI(
            api_key=api_key,
            base_url=self._settings.base_url,
            timeout=timeout,
        )

        logger.debug(
            "packpin_client_initialized",
            base_url=self.base_url,
            timeout=self.timeout,
        )

    @property
    def base_url(self) -> str:
        """API base URL requests are sent to."""
        return self._trackings_api.base_url

    @property
    def timeout(self) -> float:
        """Request timeout in seconds."""
        return self._trackings_api.timeout

    async def create_tracking(
        self,
        code: str,
        carrier: str,
        params: dict[str, Any] | None = None,
    ) -> Result[Any, PackpinError]:
        """Start tracking a shipment. See TrackingsAPI.create_tracking."""
        return await self._trackings_api.create_tracking(code, carrier, params)

    async def get_tracking(self, code: str, carrier: str) -> Result[Any, PackpinError]:
        """Fetch a tracking with its checkpoints."""
        return await self._trackings_api.get_tracking(code, carrier)

    async def get_trackings(
        self, options: dict[str, Any] | None = None
    ) -> Result[Any, PackpinError]:
        """List trackings in the account."""
        return await self._trackings_api.get_trackings(options)

    async def update_tracking(
        self, code: str, carrier: str, description: str
    ) -> Result[Any, PackpinError]:
        """Change the description of a tracking."""
        return await self._trackings_api.update_tracking(code, carrier, description)

    async def delete_tracking(self, code: str, carrier: str) -> Result[Any, PackpinError]:
        """Stop tracking a shipment."""
        return await self._trackings_api.delete_tracking(code, carrier)

    async def get_carriers(self) -> Result[Any, PackpinError]:
        """List all carriers Packpin recognizes."""
        return await self._carriers_api.get_carriers()

    async def detect_carriers(self, code: str) -> Result[Any, PackpinError]:
        """Detect which carriers a tracking number may belong to."""
        return await self._carriers_api.detect_carriers(code)


def create_client(api_key: str, timeout: float | None = None) -> PackpinClient:
    """Create a Packpin client from an API key.

    Args:
        api_key: Packpin API key.
        timeout: Optional request timeout in seconds.

    Returns:
        Configured PackpinClient.

    Raises:
        ValueError: If api_key is empty.
    """
    if not api_key:
        raise ValueError("A Packpin API key is required")
    return PackpinClient(api_key, timeout=timeout)
