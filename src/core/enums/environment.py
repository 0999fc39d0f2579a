"""Application environment types.

Environments:
- DEVELOPMENT: local runs, console log rendering
- TESTING: automated test runs, JSON logs
- CI: continuous integration
- PRODUCTION: deployed scheduler/worker
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
