"""Material, labour and phase models for HomePlan.

These are derived values produced by the material estimator and the
phase and labour planner. None of them carries an independent lifecycle.
"""

from enum import Enum
from typing import List

from pydantic import Field

from homeplan.models.base import PlanModel


# =============================================================================
# ENUMS
# =============================================================================


class PhaseName(str, Enum):
    """Construction phases, in execution order."""

    FOUNDATION = "Foundation"
    STRUCTURE = "Structure"
    ROOFING = "Roofing"
    FINISHING = "Finishing"


# =============================================================================
# MATERIAL REQUIREMENT MODEL
# =============================================================================


class MaterialRequirement(PlanModel):
    """Quantity and cost of a single material.

    ``phase`` is a label that may name several phases,
    e.g. "Foundation & Structure".
    """

    material_name: str = Field(..., description="Material name")
    quantity: int = Field(..., ge=0, description="Quantity, rounded up")
    unit: str = Field(..., description="Unit of measurement")
    cost: float = Field(..., ge=0, description="Total cost for the quantity")
    phase: str = Field(..., description="Phase label(s) the material is used in")

    def used_in(self, phase_name: str) -> bool:
        """Check whether the phase label mentions the given phase."""
        return phase_name in self.phase


# =============================================================================
# LABOUR AND PHASE MODELS
# =============================================================================


class LaborAllocation(PlanModel):
    """Crew of one worker type assigned to a phase."""

    worker_type: str = Field(..., description="Worker type (Mason, Labor, ...)")
    quantity: int = Field(..., ge=0, description="Crew size, rounded up")
    days_required: int = Field(..., ge=0, description="Working days (phase weeks x 6)")
    cost: float = Field(..., ge=0, description="Crew size x days x daily wage")


class Phase(PlanModel):
    """One of the four construction phases.

    Durations are in weeks. A duration of zero or less marks a degenerate
    phase produced by rounding on very short timelines.
    """

    phase_name: PhaseName = Field(..., description="Phase name")
    phase_order: int = Field(..., ge=1, le=4, description="Execution order (1-4)")
    start_week: int = Field(..., description="First week of the phase (1-based)")
    duration_weeks: int = Field(..., description="Phase duration in weeks")
    cost_estimate: float = Field(..., description="Sum of labour allocation costs")
    labor_allocations: List[LaborAllocation] = Field(
        default_factory=list, description="Crews assigned to the phase"
    )

    @property
    def end_week(self) -> int:
        """Last week of the phase (inclusive)."""
        return self.start_week + self.duration_weeks - 1

    @property
    def is_degenerate(self) -> bool:
        return self.duration_weeks <= 0


# =============================================================================
# COST BREAKDOWN MODEL
# =============================================================================


class CostBreakdown(PlanModel):
    """Material, labour and total cost."""

    material_cost: float = Field(..., description="Sum of material costs")
    labor_cost: float = Field(..., description="Sum of labour costs across phases")
    total_cost: float = Field(..., description="Material plus labour cost")
