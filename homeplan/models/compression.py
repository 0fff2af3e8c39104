"""Timeline compression result model for HomePlan."""

from typing import List

from pydantic import Field

from homeplan.models.base import PlanModel


class CompressionResult(PlanModel):
    """Cost and risk of running a project on a shorter timeline.

    A compression_ratio of 1 or more means no compression was requested;
    cost_increase is then zero or negative.
    """

    new_cost: float = Field(..., description="Projected cost on the new timeline")
    cost_increase: float = Field(..., description="new_cost - original cost")
    percentage_increase: float = Field(..., description="Cost increase as % of original")
    workforce_increase: float = Field(..., description="Extra workforce needed (%)")
    compression_ratio: float = Field(..., gt=0, description="new / original timeline")
    workforce_multiplier: float = Field(..., gt=0, description="1 / compression_ratio")
    risks: List[str] = Field(default_factory=list, description="Schedule risks, in order")

    @property
    def is_compressed(self) -> bool:
        return self.compression_ratio < 1
