"""Centralized constants for internal implementation details.

These are fixed facts about the Packpin API, NOT environment-specific
configuration. For values that can be overridden through the environment,
use `packpin/core/config.py` instead.

Example:
    >>> from packpin.core.constants import API_KEY_HEADER
    >>> headers = {API_KEY_HEADER: api_key}
"""

# =============================================================================
# Endpoint
# =============================================================================

DEFAULT_HOST: str = "api.packpin.com"
"""Hostname of the Packpin API."""

DEFAULT_PORT: int = 443
"""Port of the Packpin API."""

HTTPS_PORT: int = 443
"""Port on which requests switch to the https scheme."""

API_PATH: str = "/v2"
"""Version prefix prepended to every endpoint path."""


# =============================================================================
# Timeouts
# =============================================================================

REQUEST_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for each Packpin API request in seconds."""


# =============================================================================
# Headers
# =============================================================================

API_KEY_HEADER: str = "Packpin-Api-Key"
"""Header carrying the account API key on every request."""

JSON_CONTENT_TYPE: str = "application/json"
"""Content type of request and response bodies."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length of a raw response body kept on errors (truncation limit)."""
