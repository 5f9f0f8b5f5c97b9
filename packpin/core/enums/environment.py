"""Runtime environment types.

Used by Settings to decide how logs are rendered.

Environments:
- DEVELOPMENT: Local use, human-readable console logs
- TESTING: Automated test execution
- CI: Continuous integration
- PRODUCTION: Deployed service embedding the client
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
