"""Project plan orchestrator for HomePlan.

Runs the calculators in data-flow order:

    inputs + config -> materials -> phases -> cost breakdown -> schedule
    inputs -> layouts

and provides re-pricing and compression on top of a finished plan.
"""

import time
from typing import Any, Mapping, Optional, Union

import structlog

from homeplan.config.errors import DegenerateScheduleError
from homeplan.models.compression import CompressionResult
from homeplan.models.plan import ProjectPlan
from homeplan.models.project import (
    DEFAULT_COST_CONFIG,
    CostConfig,
    ProjectInputs,
    merge_cost_config,
)
from homeplan.services.compression import simulate_compression
from homeplan.services.costs import compute_cost_breakdown
from homeplan.services.layouts import generate_layouts
from homeplan.services.materials import compute_materials
from homeplan.services.phases import compute_phases, find_degenerate_phases
from homeplan.services.schedule import generate_schedule

logger = structlog.get_logger(__name__)

ConfigLike = Union[CostConfig, Mapping[str, Any], None]


def resolve_config(config: ConfigLike) -> CostConfig:
    """Turn a config argument into a full CostConfig.

    Accepts a CostConfig (used as-is), a partial override mapping (merged
    over the defaults) or None (defaults).
    """
    if config is None:
        return DEFAULT_COST_CONFIG
    if isinstance(config, CostConfig):
        return config
    return merge_cost_config(config)


def plan_project(inputs: ProjectInputs, config: ConfigLike = None) -> ProjectPlan:
    """Compute the complete plan for a project.

    Args:
        inputs: Validated project inputs.
        config: CostConfig, partial overrides, or None for defaults.

    Returns:
        ProjectPlan with materials, phases, costs, schedule and layouts.

    Raises:
        DegenerateScheduleError: If the timeline is too short for every
            phase to get at least one week.
        ValidationError / ConfigurationError: On bad rate overrides.
    """
    start_time = time.time()
    cost_config = resolve_config(config)

    logger.info(
        "project_plan_started",
        built_up_area=inputs.built_up_area,
        floors=inputs.number_of_floors,
        timeline_weeks=inputs.project_timeline,
    )

    materials = compute_materials(inputs, cost_config)
    phases = compute_phases(inputs, cost_config)

    degenerate = find_degenerate_phases(phases)
    if degenerate:
        raise DegenerateScheduleError(
            f"A {inputs.project_timeline}-week timeline leaves no time for: "
            + ", ".join(p.phase_name.value for p in degenerate),
            phases={p.phase_name.value: p.duration_weeks for p in degenerate},
            timeline=inputs.project_timeline,
        )

    cost_breakdown = compute_cost_breakdown(materials, phases)
    schedule = generate_schedule(phases, materials)
    layouts = generate_layouts(inputs)

    plan = ProjectPlan(
        inputs=inputs,
        config=cost_config,
        materials=materials,
        phases=phases,
        cost_breakdown=cost_breakdown,
        schedule=schedule,
        layouts=layouts,
    )

    logger.info(
        "project_plan_completed",
        total_cost=cost_breakdown.total_cost,
        material_cost=cost_breakdown.material_cost,
        labor_cost=cost_breakdown.labor_cost,
        weeks=len(schedule),
        floors=len(layouts),
        duration_ms=int((time.time() - start_time) * 1000),
    )
    return plan


def replan_with_config(plan: ProjectPlan, overrides: Optional[Mapping[str, Any]]) -> ProjectPlan:
    """Re-price a plan after changing some rates.

    Overrides are merged over the plan's own config, not the defaults.
    """
    new_config = merge_cost_config(overrides, base=plan.config)
    logger.info("project_replanned", overrides=sorted((overrides or {}).keys()))
    return plan_project(plan.inputs, new_config)


def simulate_plan_compression(plan: ProjectPlan, new_timeline: int) -> CompressionResult:
    """Simulate compressing a plan onto a shorter timeline.

    Uses the plan's full total cost (materials and labour) as the baseline.
    """
    return simulate_compression(
        plan.inputs.project_timeline,
        new_timeline,
        plan.total_cost,
    )
