"""Base API client for Packpin HTTP communication.

This module provides the shared request/response routine used by every
Packpin endpoint client:
- URL building (scheme, host, port, version prefix, leading slash)
- API key authentication header
- HTTP request execution with timeout/connection error handling
- Envelope parsing (`{"statusCode": ..., "body": ...}`)
- Expected-status checking and body unwrapping
- Structured logging with operation context

Endpoint clients only attach a fixed verb, path and expected status to
`_call`.

Architecture:
    - Infrastructure layer (adapter for the Packpin REST API)
    - Uses httpx for async HTTP, one client per request
    - Returns Result types (no exceptions for remote or validation errors)
"""

from typing import Any

import httpx
import structlog

from packpin.core.constants import (
    API_KEY_HEADER,
    JSON_CONTENT_TYPE,
    REQUEST_TIMEOUT_DEFAULT,
    RESPONSE_BODY_MAX_LENGTH,
)
from packpin.core.enums import HttpMethod
from packpin.core.errors import PackpinError
from packpin.core.result import Failure, Result, Success
from packpin.domain.errors import (
    ApiStatusError,
    ParseResponseError,
    TransportError,
    UnhandledError,
)


def resolve_timeout(timeout: Any) -> float:
    """Return `timeout` if it is a positive number, else the default.

    Args:
        timeout: Caller-supplied timeout in seconds (any type).

    Returns:
        Timeout in seconds to use for requests.
    """
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        return REQUEST_TIMEOUT_DEFAULT
    if timeout > 0:
        return float(timeout)
    return REQUEST_TIMEOUT_DEFAULT


def _is_missing_body(body: Any) -> bool:
    """Return True for an absent or falsy scalar body.

    Empty lists and objects count as bodies.
    """
    if body is None:
        return True
    return not body and not isinstance(body, (list, dict))


class BaseApiClient:
    """Base class for Packpin endpoint clients with shared HTTP handling.

    Attributes:
        _api_key: Account API key sent with every request.
        _base_url: API base URL including version prefix (no trailing slash).
        _timeout: HTTP request timeout in seconds.
        _logger: Structured logger.

    Example:
        >>> class CarriersAPI(BaseApiClient):
        ...     async def get_carriers(self):
        ...         return await self._call(
        ...             method=HttpMethod.GET,
        ...             path="/carriers",
        ...             expected_status=200,
        ...             operation="get_carriers",
        ...         )
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str,
        timeout: float | None = None,
    ) -> None:
        """Initialize base API client.

        Args:
            api_key: Packpin account API key.
            base_url: API base URL (e.g., "https://api.packpin.com:443/v2").
            timeout: HTTP request timeout in seconds. Non-positive or
                non-numeric values fall back to the default.

        Raises:
            ValueError: If api_key is missing or empty.
        """
        if not api_key:
            raise ValueError("A Packpin API key is required")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = resolve_timeout(timeout)
        self._logger = structlog.get_logger("packpin_api")

    @property
    def base_url(self) -> str:
        """API base URL requests are sent to."""
        return self._base_url

    @property
    def timeout(self) -> float:
        """Request timeout in seconds."""
        return self._timeout

    def _build_url(self, path: str) -> str:
        """Join an endpoint path to the base URL.

        Args:
            path: Endpoint path, with or without a leading slash.

        Returns:
            Absolute request URL.
        """
        if not path.startswith("/"):
            path = "/" + path
        return f"{self._base_url}{path}"

    def _build_headers(self) -> dict[str, str]:
        """Build HTTP headers for Packpin API requests.

        Returns:
            Headers dict with JSON content type and API key authentication.
        """
        return {
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
            API_KEY_HEADER: self._api_key,
        }

    async def _execute_request(
        self,
        *,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[httpx.Response, PackpinError]:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method.
            path: URL path relative to base_url.
            params: Optional query parameters.
            json_data: Optional JSON body for POST/PUT requests.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Raw HTTP response on success.
            Failure(TransportError): On timeout or connection error.
            Failure(UnhandledError): If the URL or request could not be encoded.
        """
        url = self._build_url(path)

        self._logger.debug(
            "packpin_api_request_started",
            operation=operation,
            method=method.value,
            path=path,
        )

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method=method.value,
                    url=url,
                    headers=self._build_headers(),
                    params=params,
                    json=json_data,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                "packpin_api_timeout",
                operation=operation,
                timeout=self._timeout,
                error=str(e),
            )
            return Failure(
                error=TransportError(
                    message=f"Packpin API request timed out: {e}",
                    is_timeout=True,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                "packpin_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=TransportError(
                    message=f"Failed to connect to Packpin API: {e}",
                )
            )

        except (httpx.InvalidURL, TypeError, ValueError) as e:
            self._logger.error(
                "packpin_api_request_encoding_failed",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=UnhandledError(
                    message=f"Could not encode request: {e}",
                )
            )

    def _parse_envelope(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Result[dict[str, Any], PackpinError]:
        """Parse the response as a Packpin envelope.

        The envelope's statusCode is authoritative; the HTTP status line of
        the transport response is only logged.

        Args:
            response: HTTP response to parse.
            operation: Operation name for logging.

        Returns:
            Success(dict): Envelope with a truthy statusCode.
            Failure(ParseResponseError): On invalid JSON or envelope shape.
        """
        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                "packpin_api_invalid_json",
                operation=operation,
                http_status=response.status_code,
                error=str(e),
            )
            return Failure(
                error=ParseResponseError(
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        if not isinstance(data, dict) or not data.get("statusCode"):
            self._logger.warning(
                "packpin_api_unexpected_format",
                operation=operation,
                http_status=response.status_code,
                data_type=type(data).__name__,
            )
            return Failure(
                error=ParseResponseError(
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        return Success(value=data)

    def _unwrap(
        self,
        envelope: dict[str, Any],
        *,
        expected_status: int,
        operation: str,
        allow_empty_body: bool = False,
    ) -> Result[Any, PackpinError]:
        """Check the envelope status and return its body.

        Args:
            envelope: Parsed envelope with a truthy statusCode.
            expected_status: statusCode the endpoint answers with on success.
            operation: Operation name for logging.
            allow_empty_body: Accept a missing body on the expected status.

        Returns:
            Success(Any): Envelope body (None only when allow_empty_body).
            Failure(ApiStatusError): On unexpected status or missing body.
        """
        status_code = envelope["statusCode"]
        body = envelope.get("body")

        if status_code != expected_status:
            self._logger.warning(
                "packpin_api_status_mismatch",
                operation=operation,
                status_code=status_code,
                expected_status=expected_status,
            )
            return Failure(
                error=ApiStatusError(
                    message=f"Packpin API returned status {status_code}, expected {expected_status}",
                    status_code=status_code,
                    body=body,
                )
            )

        if _is_missing_body(body) and not allow_empty_body:
            self._logger.warning(
                "packpin_api_missing_body",
                operation=operation,
                status_code=status_code,
            )
            return Failure(
                error=ApiStatusError(
                    message="Packpin API response has no body",
                    status_code=status_code,
                )
            )

        self._logger.debug(
            "packpin_api_succeeded",
            operation=operation,
            status_code=status_code,
        )
        return Success(value=body)

    async def _call(
        self,
        *,
        method: HttpMethod,
        path: str,
        expected_status: int,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        allow_empty_body: bool = False,
        operation: str,
    ) -> Result[Any, PackpinError]:
        """Execute a request, parse the envelope and unwrap its body.

        Combines _execute_request, _parse_envelope and _unwrap.

        Args:
            method: HTTP method.
            path: URL path relative to base_url.
            expected_status: Envelope statusCode that means success.
            params: Optional query parameters.
            json_data: Optional JSON body for POST/PUT requests.
            allow_empty_body: Accept a missing body on the expected status.
            operation: Operation name for logging.

        Returns:
            Success(Any): Envelope body.
            Failure(PackpinError): On any error.
        """
        result = await self._execute_request(
            method=method,
            path=path,
            params=params,
            json_data=json_data,
            operation=operation,
        )
        if isinstance(result, Failure):
            return result

        envelope = self._parse_envelope(result.value, operation)
        if isinstance(envelope, Failure):
            return envelope

        return self._unwrap(
            envelope.value,
            expected_status=expected_status,
            operation=operation,
            allow_empty_body=allow_empty_body,
        )
