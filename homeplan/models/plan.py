"""Complete project plan model for HomePlan."""

from typing import List

from pydantic import Field

from homeplan.models.base import PlanModel
from homeplan.models.estimate import CostBreakdown, MaterialRequirement, Phase
from homeplan.models.project import CostConfig, ProjectInputs
from homeplan.models.schedule import LayoutSuggestion, WeeklyScheduleEntry


class ProjectPlan(PlanModel):
    """Output of one planning run.

    Holds the inputs and rate table it was computed from, so the plan can
    be re-priced or compressed without going back to the caller.
    """

    inputs: ProjectInputs
    config: CostConfig
    materials: List[MaterialRequirement] = Field(default_factory=list)
    phases: List[Phase] = Field(default_factory=list)
    cost_breakdown: CostBreakdown
    schedule: List[WeeklyScheduleEntry] = Field(default_factory=list)
    layouts: List[LayoutSuggestion] = Field(default_factory=list)

    @property
    def total_cost(self) -> float:
        return self.cost_breakdown.total_cost

    @property
    def total_weeks(self) -> int:
        return len(self.schedule)
