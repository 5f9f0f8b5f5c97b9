"""Core enums package.

Usage:
    from packpin.core.enums import ErrorCode, Environment, HttpMethod
"""

from packpin.core.enums.environment import Environment
from packpin.core.enums.error_code import ErrorCode
from packpin.core.enums.http_method import HttpMethod

__all__ = ["Environment", "ErrorCode", "HttpMethod"]
