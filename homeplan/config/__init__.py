"""HomePlan configuration.

This package contains:
- settings: Environment variables and configuration
- errors: Custom exceptions and error codes
"""

from homeplan.config.settings import settings
from homeplan.config.errors import HomePlanError, ErrorCode

__all__ = [
    "settings",
    "HomePlanError",
    "ErrorCode",
]
