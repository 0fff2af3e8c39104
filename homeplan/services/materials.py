"""Material estimator for HomePlan.

Derives material quantities and costs from total floor area using fixed
per-square-foot yield constants.
"""

import math
from typing import List, NamedTuple

import structlog

from homeplan.models.estimate import MaterialRequirement
from homeplan.models.project import CostConfig, ProjectInputs

logger = structlog.get_logger(__name__)


class MaterialSpec(NamedTuple):
    """Yield and pricing rule for one material."""

    name: str
    yield_per_sqft: float
    unit: str
    rate_field: str
    units_per_rate: int
    phase: str


# Fixed order: Cement, Steel, Sand, Aggregate, Bricks
MATERIAL_SPECS: List[MaterialSpec] = [
    MaterialSpec("Cement", 0.4, "bags", "cement_rate", 1, "Foundation & Structure"),
    MaterialSpec("Steel", 4, "kg", "steel_rate", 1, "Structure"),
    MaterialSpec("Sand", 0.05, "m³", "sand_rate", 1, "Foundation & Structure"),
    MaterialSpec("Aggregate", 0.06, "m³", "aggregate_rate", 1, "Foundation & Structure"),
    # Brick rate is quoted per 1000 units
    MaterialSpec("Bricks", 8, "units", "brick_rate", 1000, "Structure & Finishing"),
]


def compute_materials(inputs: ProjectInputs, config: CostConfig) -> List[MaterialRequirement]:
    """Compute the five material requirements for a project.

    Args:
        inputs: Project inputs.
        config: Rate table.

    Returns:
        Materials in fixed order: Cement, Steel, Sand, Aggregate, Bricks.
    """
    total_area = inputs.total_area
    materials = []

    for spec in MATERIAL_SPECS:
        quantity = math.ceil(total_area * spec.yield_per_sqft)
        rate = getattr(config, spec.rate_field)
        materials.append(
            MaterialRequirement(
                material_name=spec.name,
                quantity=quantity,
                unit=spec.unit,
                cost=(quantity / spec.units_per_rate) * rate,
                phase=spec.phase,
            )
        )

    logger.debug(
        "materials_computed",
        total_area=total_area,
        material_cost=sum(m.cost for m in materials),
    )
    return materials
