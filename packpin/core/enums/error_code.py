"""Client error codes (machine-readable).

The Packpin client reports every failure with one of a small, fixed set of
numeric codes. Each code has a type name, which is what callers see in the
`type` field of a serialized error.

Codes:
- 600 UnhandledError: request could not be built
- 601 ParseResponseError: response is not a valid Packpin envelope
- 602 MissingParameter: a required argument was not supplied
- 603 ResponseError: transport failure or unexpected envelope status
"""

from enum import Enum


class ErrorCode(Enum):
    """Client error codes.

    Values are the numeric codes exposed to callers.
    """

    UNHANDLED_ERROR = 600
    PARSE_RESPONSE_ERROR = 601
    MISSING_PARAMETER = 602
    RESPONSE_ERROR = 603

    @property
    def error_type(self) -> str:
        """Type name reported alongside the numeric code."""
        return _ERROR_TYPES[self]


_ERROR_TYPES: dict[ErrorCode, str] = {
    ErrorCode.UNHANDLED_ERROR: "UnhandledError",
    ErrorCode.PARSE_RESPONSE_ERROR: "ParseResponseError",
    ErrorCode.MISSING_PARAMETER: "MissingParameter",
    ErrorCode.RESPONSE_ERROR: "ResponseError",
}
