"""Result types for railway-oriented programming.

Every public client operation returns a Result instead of raising. A call
either succeeds with the unwrapped Packpin response body or fails with a
PackpinError value describing what went wrong.

Usage:
    result = await client.get_carriers()
    match result:
        case Success(value=value):
            print(f"{len(value)} carriers")
        case Failure(error=error):
            print(f"Error {error.code.value}: {error.message}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful API call.

    Attributes:
        value: Response body returned by the Packpin API.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed API call.

    Attributes:
        error: The normalized error describing the failure.
    """

    error: E


Result = Success[T] | Failure[E]
