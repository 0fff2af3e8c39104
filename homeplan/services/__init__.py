"""Planning calculators and services for HomePlan."""

from homeplan.services.materials import compute_materials
from homeplan.services.phases import compute_phases, find_degenerate_phases, split_timeline
from homeplan.services.costs import compute_cost_breakdown
from homeplan.services.schedule import generate_schedule, tasks_for_week
from homeplan.services.layouts import generate_layouts
from homeplan.services.compression import min_compressed_timeline, simulate_compression
from homeplan.services.planner import (
    plan_project,
    replan_with_config,
    simulate_plan_compression,
)

__all__ = [
    "compute_materials",
    "compute_phases",
    "find_degenerate_phases",
    "split_timeline",
    "compute_cost_breakdown",
    "generate_schedule",
    "tasks_for_week",
    "generate_layouts",
    "min_compressed_timeline",
    "simulate_compression",
    "plan_project",
    "replan_with_config",
    "simulate_plan_compression",
]
