"""Project input and rate table models for HomePlan.

This module defines the per-run inputs (area, floors, timeline) and the
cost configuration (daily wages and material unit rates), including the
default rate table and the override merge used by every caller that
wants custom rates.
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from homeplan.config.errors import ConfigurationError, ValidationError
from homeplan.models.base import PlanModel


# =============================================================================
# PROJECT INPUTS
# =============================================================================


class ProjectInputs(PlanModel):
    """Inputs for a single calculation run.

    project_timeline is expressed in weeks; labour days are derived as
    weeks x 6 working days.
    """

    built_up_area: float = Field(..., gt=0, description="Built-up area per floor (sq ft)")
    number_of_floors: int = Field(..., gt=0, description="Number of floors")
    project_timeline: int = Field(..., gt=0, description="Project timeline in weeks")

    @property
    def total_area(self) -> float:
        """Total floor area across all floors (sq ft)."""
        return self.built_up_area * self.number_of_floors


# =============================================================================
# COST CONFIGURATION
# =============================================================================


class CostConfig(PlanModel):
    """Daily wages and material unit rates.

    Brick rate is per 1000 units; every other material rate is per unit
    of the material's reported quantity.
    """

    # Daily wages
    mason_wage: float = Field(..., gt=0, description="Mason daily wage")
    labor_wage: float = Field(..., gt=0, description="General labour daily wage")
    electrician_wage: float = Field(..., gt=0, description="Electrician daily wage")
    plumber_wage: float = Field(..., gt=0, description="Plumber daily wage")

    # Material rates
    cement_rate: float = Field(..., gt=0, description="Cement rate per bag")
    steel_rate: float = Field(..., gt=0, description="Steel rate per kg")
    sand_rate: float = Field(..., gt=0, description="Sand rate per m³")
    aggregate_rate: float = Field(..., gt=0, description="Aggregate rate per m³")
    brick_rate: float = Field(..., gt=0, description="Brick rate per 1000 units")

    def wage_for(self, worker_type: str) -> float:
        """Get the daily wage for a worker type.

        Raises:
            ConfigurationError: If no wage is configured for the worker type.
        """
        wages = {
            "Mason": self.mason_wage,
            "Labor": self.labor_wage,
            "Electrician": self.electrician_wage,
            "Plumber": self.plumber_wage,
        }
        if worker_type not in wages:
            raise ConfigurationError(
                f"No daily wage configured for worker type '{worker_type}'",
                missing=[worker_type],
            )
        return wages[worker_type]


DEFAULT_COST_CONFIG = CostConfig(
    mason_wage=800,
    labor_wage=600,
    electrician_wage=1000,
    plumber_wage=1000,
    cement_rate=400,
    steel_rate=60,
    sand_rate=1500,
    aggregate_rate=1800,
    brick_rate=6000,
)

# Accept both snake_case and camelCase rate names
_RATE_KEYS: Dict[str, str] = {
    **{name: name for name in CostConfig.model_fields},
    **{to_camel(name): name for name in CostConfig.model_fields},
}


def merge_cost_config(
    overrides: Optional[Mapping[str, Any]] = None,
    base: Optional[CostConfig] = DEFAULT_COST_CONFIG,
) -> CostConfig:
    """Apply rate overrides on top of a base config.

    Never mutates ``base``; always returns a new CostConfig.

    Args:
        overrides: Partial mapping of rate name to value. None values are skipped.
        base: Config supplying unspecified rates. Pass None to require a full table.

    Returns:
        New CostConfig with overrides applied.

    Raises:
        ValidationError: On non-mapping overrides, unknown rate names or
            non-positive values.
        ConfigurationError: If base is None and a rate is missing.
    """
    if overrides is not None and not isinstance(overrides, Mapping):
        raise ValidationError(
            "Rate overrides must be an object of rate name to value",
            field="config",
            details={"type": type(overrides).__name__},
        )

    merged: Dict[str, Any] = base.model_dump() if base is not None else {}

    unknown = []
    for key, value in (overrides or {}).items():
        name = _RATE_KEYS.get(key)
        if name is None:
            unknown.append(key)
            continue
        if value is not None:
            merged[name] = value

    if unknown:
        raise ValidationError(
            f"Unknown rate names: {', '.join(sorted(unknown))}",
            field=unknown[0],
            details={"unknown": sorted(unknown)},
        )

    missing = [name for name in CostConfig.model_fields if name not in merged]
    if missing:
        raise ConfigurationError(
            f"Missing required rates with no default: {', '.join(missing)}",
            missing=missing,
        )

    try:
        return CostConfig(**merged)
    except PydanticValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ValidationError(
            "Invalid rate values: " + ", ".join(fields),
            field=fields[0] if fields else None,
            details={"errors": [err["msg"] for err in e.errors()]},
        )
