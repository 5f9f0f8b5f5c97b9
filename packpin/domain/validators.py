"""Argument validators for client operations.

Validators return an error value instead of raising, so operations can
short-circuit with `Failure(error)` before any request is made.
"""

from typing import Any

from packpin.domain.errors import MissingParameterError


def require_string(value: Any, parameter: str) -> MissingParameterError | None:
    """Check that a required argument is a non-empty string.

    Args:
        value: Argument supplied by the caller.
        parameter: Human-readable parameter name used in the message.

    Returns:
        MissingParameterError if the value is missing, not a string or
        blank; None if the value is usable.
    """
    if isinstance(value, str) and value.strip():
        return None
    return MissingParameterError(
        message=f"Missing Required Parameter: {parameter}.",
        parameter=parameter,
    )


def first_missing(*checks: MissingParameterError | None) -> MissingParameterError | None:
    """Return the first failed check, in argument order."""
    for check in checks:
        if check is not None:
            return check
    return None
