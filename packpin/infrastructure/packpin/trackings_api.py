"""Packpin Trackings API client.

HTTP client for the trackings collection and single-tracking endpoints.

Endpoints:
    POST   /v2/trackings                   - Create a tracking (201)
    GET    /v2/trackings                   - List trackings (200)
    GET    /v2/trackings/{carrier}/{code}  - Get one tracking (200)
    PUT    /v2/trackings/{carrier}/{code}  - Update description (200)
    DELETE /v2/trackings/{carrier}/{code}  - Delete a tracking (204)

Reference:
    - https://packpin.com/docs/trackings/trackings-collection/
"""

from typing import Any
from urllib.parse import quote

from packpin.core.enums import HttpMethod
from packpin.core.errors import PackpinError
from packpin.core.result import Failure, Result
from packpin.domain.validators import first_missing, require_string
from packpin.infrastructure.base_api_client import BaseApiClient


def _tracking_path(code: str, carrier: str) -> str:
    return f"/trackings/{quote(carrier, safe='')}/{quote(code, safe='')}"


class TrackingsAPI(BaseApiClient):
    """HTTP client for Packpin tracking endpoints.

    Returns the raw `body` of each response envelope; its shape (tracking
    fields, checkpoints, pagination) is owned by Packpin.

    Example:
        >>> api = TrackingsAPI(
        ...     api_key="...",
        ...     base_url="https://api.packpin.com:443/v2",
        ... )
        >>> result = await api.get_tracking("058200005422993", "dpd")
    """

    async def create_tracking(
        self,
        code: str,
        carrier: str,
        params: dict[str, Any] | None = None,
    ) -> Result[Any, PackpinError]:
        """Start tracking a shipment.

        Args:
            code: Tracking number.
            carrier: Carrier code (e.g. "dpd").
            params: Additional tracking fields (e.g. description). The
                dict is not modified.

        Returns:
            Success(Any): Created tracking.
            Failure(MissingParameterError): If code or carrier is missing.
            Failure(PackpinError): On any request or response error.
        """
        missing = first_missing(
            require_string(code, "tracking number"),
            require_string(carrier, "carrier code"),
        )
        if missing is not None:
            return Failure(error=missing)

        payload = {**(params or {}), "code": code, "carrier": carrier}
        self._logger.debug(
            "packpin_create_tracking_payload",
            fields=sorted(payload),
        )

        return await self._call(
            method=HttpMethod.POST,
            path="/trackings",
            json_data=payload,
            expected_status=201,
            operation="create_tracking",
        )

    async def get_tracking(self, code: str, carrier: str) -> Result[Any, PackpinError]:
        """Fetch a tracking with its checkpoints.

        Args:
            code: Tracking number.
            carrier: Carrier code.

        Returns:
            Success(Any): Tracking including checkpoint history.
            Failure(PackpinError): On missing arguments or any API error.
        """
        missing = first_missing(
            require_string(code, "tracking number"),
            require_string(carrier, "carrier code"),
        )
        if missing is not None:
            return Failure(error=missing)

        return await self._call(
            method=HttpMethod.GET,
            path=_tracking_path(code, carrier),
            expected_status=200,
            operation="get_tracking",
        )

    async def get_trackings(
        self, options: dict[str, Any] | None = None
    ) -> Result[Any, PackpinError]:
        """List trackings in the account.

        Args:
            options: Query options sent as the URL query string
                (e.g. {"page": 2, "limit": 50}).

        Returns:
            Success(Any): Page of trackings.
            Failure(PackpinError): On any API error.
        """
        return await self._call(
            method=HttpMethod.GET,
            path="/trackings",
            params=options or None,
            expected_status=200,
            operation="get_trackings",
        )

    async def update_tracking(
        self, code: str, carrier: str, description: str
    ) -> Result[Any, PackpinError]:
        """Change the description of a tracking.

        Args:
            code: Tracking number.
            carrier: Carrier code.
            description: New description.

        Returns:
            Success(Any): Updated tracking.
            Failure(PackpinError): On missing arguments or any API error.
        """
        missing = first_missing(
            require_string(code, "tracking number"),
            require_string(carrier, "carrier code"),
            require_string(description, "description"),
        )
        if missing is not None:
            return Failure(error=missing)

        return await self._call(
            method=HttpMethod.PUT,
            path=_tracking_path(code, carrier),
            json_data={"description": description},
            expected_status=200,
            operation="update_tracking",
        )

    async def delete_tracking(self, code: str, carrier: str) -> Result[Any, PackpinError]:
        """Stop tracking a shipment.

        Packpin answers 204; an envelope without body is accepted.

        Args:
            code: Tracking number.
            carrier: Carrier code.

        Returns:
            Success(Any): Envelope body, or None when Packpin sends none.
            Failure(PackpinError): On missing arguments or any API error.
        """
        missing = first_missing(
            require_string(code, "tracking number"),
            require_string(carrier, "carrier code"),
        )
        if missing is not None:
            return Failure(error=missing)

        return await self._call(
            method=HttpMethod.DELETE,
            path=_tracking_path(code, carrier),
            expected_status=204,
            allow_empty_body=True,
            operation="delete_tracking",
        )
