"""Pydantic value objects for HomePlan."""

from homeplan.models.base import PlanModel
from homeplan.models.project import (
    CostConfig,
    DEFAULT_COST_CONFIG,
    ProjectInputs,
    merge_cost_config,
)
from homeplan.models.estimate import (
    CostBreakdown,
    LaborAllocation,
    MaterialRequirement,
    Phase,
    PhaseName,
)
from homeplan.models.schedule import LayoutConfig, LayoutSuggestion, WeeklyScheduleEntry
from homeplan.models.compression import CompressionResult
from homeplan.models.plan import ProjectPlan

__all__ = [
    "PlanModel",
    "CostConfig",
    "DEFAULT_COST_CONFIG",
    "ProjectInputs",
    "merge_cost_config",
    "CostBreakdown",
    "LaborAllocation",
    "MaterialRequirement",
    "Phase",
    "PhaseName",
    "LayoutConfig",
    "LayoutSuggestion",
    "WeeklyScheduleEntry",
    "CompressionResult",
    "ProjectPlan",
]
