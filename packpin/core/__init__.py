"""Core shared kernel.

Foundational pieces used by every layer of the client:
- Result types for railway-oriented programming
- The base error value and its error-code enumeration
- Settings and fixed constants

The core package has NO dependencies on other packages of the client.
"""

from packpin.core.enums import ErrorCode
from packpin.core.errors import PackpinError
from packpin.core.result import Failure, Result, Success

__all__ = [
    "ErrorCode",
    "Failure",
    "PackpinError",
    "Result",
    "Success",
]
