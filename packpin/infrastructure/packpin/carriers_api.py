"""Packpin Carriers API client.

Endpoints:
    GET  /v2/carriers         - List all carriers (200)
    POST /v2/carriers/detect/ - Detect carriers for a tracking number (200)
"""

from typing import Any

from packpin.core.enums import HttpMethod
from packpin.core.errors import PackpinError
from packpin.core.result import Failure, Result
from packpin.domain.validators import require_string
from packpin.infrastructure.base_api_client import BaseApiClient


class CarriersAPI(BaseApiClient):
    """HTTP client for Packpin carrier endpoints."""

    async def get_carriers(self) -> Result[Any, PackpinError]:
        """List all carriers Packpin recognizes.

        Returns:
            Success(Any): Carrier list.
            Failure(PackpinError): On any API error.
        """
        return await self._call(
            method=HttpMethod.GET,
            path="/carriers",
            expected_status=200,
            operation="get_carriers",
        )

    async def detect_carriers(self, code: str) -> Result[Any, PackpinError]:
        """Detect which carriers a tracking number may belong to.

        Args:
            code: Tracking number.

        Returns:
            Success(Any): Detection result (candidate carriers and total).
            Failure(PackpinError): On missing code or any API error.
        """
        missing = require_string(code, "tracking number")
        if missing is not None:
            return Failure(error=missing)

        # Packpin routes this endpoint with the trailing slash.
        return await self._call(
            method=HttpMethod.POST,
            path="/carriers/detect/",
            json_data={"code": code},
            expected_status=200,
            operation="detect_carriers",
        )
