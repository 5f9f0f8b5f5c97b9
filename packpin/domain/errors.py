"""Error kinds returned by Packpin client operations.

These errors are part of the TrackingServiceProtocol contract: every
operation returns `Result[T, PackpinError]`, and the error is always one of
the classes below.

Usage:
    from packpin.domain.errors import ApiStatusError, MissingParameterError

    match result:
        case Failure(error=ApiStatusError(status_code=404)):
            print("tracking not found")
        case Failure(error=MissingParameterError(parameter=name)):
            print(f"forgot {name}")
"""

from dataclasses import dataclass
from typing import Any

from packpin.core.enums import ErrorCode
from packpin.core.errors import PackpinError


@dataclass(frozen=True, slots=True, kw_only=True)
class UnhandledError(PackpinError):
    """The request could not be built or sent for a non-transport reason.

    Raised when:
    - Request parameters cannot be JSON-serialized
    - The configured host or port produces an invalid URL

    Attributes:
        code: ErrorCode.UNHANDLED_ERROR.
        message: Human-readable message.
    """

    code: ErrorCode = ErrorCode.UNHANDLED_ERROR


@dataclass(frozen=True, slots=True, kw_only=True)
class ParseResponseError(PackpinError):
    """The response is not a valid Packpin envelope.

    Raised when:
    - Response body is not JSON
    - Response JSON is not an object
    - Response object has no (or a falsy) statusCode

    Attributes:
        code: ErrorCode.PARSE_RESPONSE_ERROR.
        message: Human-readable message.
        response_body: Truncated raw response body for debugging.
    """

    code: ErrorCode = ErrorCode.PARSE_RESPONSE_ERROR
    message: str = "Could not parse response."
    response_body: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class MissingParameterError(PackpinError):
    """A required argument was not supplied.

    No request is made when this error is returned.

    Attributes:
        code: ErrorCode.MISSING_PARAMETER.
        message: Human-readable message naming the parameter.
        parameter: Name of the missing parameter (e.g. "tracking number").
    """

    code: ErrorCode = ErrorCode.MISSING_PARAMETER
    parameter: str


@dataclass(frozen=True, slots=True, kw_only=True)
class TransportError(PackpinError):
    """The request did not complete.

    Raised when:
    - The request timed out
    - DNS resolution, connection or TLS handshake failed

    Attributes:
        code: ErrorCode.RESPONSE_ERROR.
        message: Transport error text.
        is_timeout: Whether the failure was a timeout.
    """

    code: ErrorCode = ErrorCode.RESPONSE_ERROR
    is_timeout: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiStatusError(PackpinError):
    """Packpin answered with an envelope the endpoint does not accept.

    Raised when:
    - Envelope statusCode differs from the status the endpoint expects
    - Envelope body is missing where the endpoint requires one

    Attributes:
        code: ErrorCode.RESPONSE_ERROR.
        message: Human-readable message.
        status_code: statusCode reported in the envelope.
        body: Envelope body as returned by Packpin (may be None).
    """

    code: ErrorCode = ErrorCode.RESPONSE_ERROR
    status_code: int
    body: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize including the envelope status and body."""
        data = PackpinError.to_dict(self)
        data["statusCode"] = self.status_code
        data["body"] = self.body
        return data


__all__ = [
    "ApiStatusError",
    "MissingParameterError",
    "PackpinError",
    "ParseResponseError",
    "TransportError",
    "UnhandledError",
]
