"""Cost aggregator for HomePlan."""

from typing import List

from homeplan.models.estimate import CostBreakdown, MaterialRequirement, Phase


def compute_cost_breakdown(
    materials: List[MaterialRequirement],
    phases: List[Phase],
) -> CostBreakdown:
    """Sum material and labour costs.

    Labour cost is summed from each phase's allocations rather than its
    cost_estimate, so phases loaded without allocations contribute nothing.
    """
    material_cost = sum(material.cost for material in materials)
    labor_cost = sum(
        sum(labor.cost for labor in phase.labor_allocations)
        for phase in phases
    )

    return CostBreakdown(
        material_cost=material_cost,
        labor_cost=labor_cost,
        total_cost=material_cost + labor_cost,
    )
