"""Project input parsing and validation.

Deserializes raw request data (camelCase or snake_case) into typed
models and turns pydantic errors into HomePlan ValidationErrors so every
surface reports invalid input the same way.
"""

from typing import Any, Dict, List, Mapping

from pydantic import ValidationError as PydanticValidationError
import structlog

from homeplan.config.errors import ValidationError
from homeplan.models.project import ProjectInputs
from homeplan.services.compression import min_compressed_timeline

logger = structlog.get_logger(__name__)


def _error_fields(error: PydanticValidationError) -> List[Dict[str, Any]]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
        }
        for err in error.errors()
    ]


def parse_project_inputs(data: Mapping[str, Any]) -> ProjectInputs:
    """Parse raw data into ProjectInputs.

    Args:
        data: Mapping with builtUpArea, numberOfFloors and projectTimeline.

    Returns:
        Validated ProjectInputs.

    Raises:
        ValidationError: If a field is missing, non-numeric or not positive.
    """
    try:
        return ProjectInputs.model_validate(dict(data))
    except PydanticValidationError as e:
        errors = _error_fields(e)
        logger.warning("project_inputs_invalid", errors=errors)
        raise ValidationError(
            "Invalid project inputs: " + ", ".join(err["field"] for err in errors),
            field=errors[0]["field"] if errors else None,
            details={"errors": errors},
        )


def parse_compression_request(data: Mapping[str, Any], original_timeline: int) -> int:
    """Validate a requested compressed timeline.

    Returns:
        The new timeline in weeks.

    Raises:
        ValidationError: If newTimeline is missing, not a positive integer,
            or shorter than the minimum offered for the original timeline.
    """
    value = data.get("newTimeline", data.get("new_timeline"))
    # Whole-number floats (18.0) are accepted like projectTimeline
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(
            "newTimeline must be a positive integer number of weeks",
            field="newTimeline",
            details={"value": value},
        )

    minimum = min_compressed_timeline(original_timeline)
    if value < minimum:
        raise ValidationError(
            f"newTimeline must be at least {minimum} weeks for a "
            f"{original_timeline}-week project",
            field="newTimeline",
            details={"value": value, "minimum": minimum},
        )
    return value
