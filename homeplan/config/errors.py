"""HomePlan error handling.

Custom exceptions and error codes for the planning engine.
"""

from typing import Optional, Dict, Any


# Error Codes
class ErrorCode:
    """Error code constants."""

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FIELD = "INVALID_FIELD"

    # Configuration Errors
    CONFIGURATION_MISSING = "CONFIGURATION_MISSING"

    # Calculation Errors
    DEGENERATE_SCHEDULE = "DEGENERATE_SCHEDULE"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"

    # External Service Errors
    TEXT_GENERATION_ERROR = "TEXT_GENERATION_ERROR"
    TEXT_GENERATION_TIMEOUT = "TEXT_GENERATION_TIMEOUT"

    # Unexpected Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class HomePlanError(Exception):
    """Base exception for HomePlan errors.

    Provides structured error information for API responses.

    Attributes:
        code: Error code from ErrorCode constants
        message: Human-readable error message
        details: Additional error context
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API response.

        Returns:
            Dictionary with code, message, and details.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(HomePlanError):
    """Invalid project input (non-positive area, floors or timeline)."""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict] = None):
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            details={**(details or {}), "field": field} if field else details
        )
        self.field = field


class ConfigurationError(HomePlanError):
    """A required rate is absent and no default is available."""

    def __init__(self, message: str, missing: Optional[list] = None):
        super().__init__(
            code=ErrorCode.CONFIGURATION_MISSING,
            message=message,
            details={"missing": missing or []}
        )
        self.missing = missing or []


class DegenerateScheduleError(HomePlanError):
    """One or more phases ended up with a zero or negative duration."""

    def __init__(self, message: str, phases: Dict[str, int], timeline: Optional[int] = None):
        details: Dict[str, Any] = {"phases": phases}
        if timeline is not None:
            details["timeline"] = timeline
        super().__init__(
            code=ErrorCode.DEGENERATE_SCHEDULE,
            message=message,
            details=details
        )
        self.phases = phases


class CompressionError(HomePlanError):
    """Compression simulation cannot be computed for the given baseline."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(
            code=ErrorCode.DIVISION_BY_ZERO,
            message=message,
            details=details
        )
