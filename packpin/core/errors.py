"""Base error value for railway-oriented error handling.

Errors flow through the client as data inside `Failure`, not as exceptions.
Concrete error kinds live in `packpin.domain.errors`.

Error Hierarchy:
    PackpinError (base - does NOT inherit from Exception)
    ├── UnhandledError (600)
    ├── ParseResponseError (601)
    ├── MissingParameterError (602)
    ├── TransportError (603)
    └── ApiStatusError (603)
"""

from dataclasses import dataclass
from typing import Any

from packpin.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class PackpinError:
    """Base client error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code.
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    @property
    def type(self) -> str:
        """Type name of the error code (e.g. "ParseResponseError")."""
        return self.code.error_type

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the `{code, type, message}` error object.

        Returns:
            Plain dict suitable for JSON output.
        """
        return {
            "code": self.code.value,
            "type": self.type,
            "message": self.message,
        }

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value} {self.type}: {self.message}"
