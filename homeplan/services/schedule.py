"""Weekly schedule generator for HomePlan.

Expands phases into one entry per week: three tasks from a fixed lookup
table, the phase's full crew, and each relevant material's quantity
spread evenly across the phase's weeks.
"""

import math
from typing import Dict, List

import structlog

from homeplan.config.errors import DegenerateScheduleError
from homeplan.models.estimate import MaterialRequirement, Phase
from homeplan.models.schedule import WeeklyScheduleEntry
from homeplan.services.phases import find_degenerate_phases

logger = structlog.get_logger(__name__)


# =============================================================================
# TASK TABLE
# =============================================================================

# Indexed by week position within the phase; weeks past the end reuse the last row
PHASE_TASKS: Dict[str, List[List[str]]] = {
    "Foundation": [
        ["Site preparation and marking", "Excavation work begins", "Soil testing"],
        ["Deep excavation", "Foundation layout marking", "Reinforcement preparation"],
        ["Foundation concrete pouring", "Curing process", "Foundation leveling"],
        ["Foundation waterproofing", "Backfilling", "Quality inspection"],
    ],
    "Structure": [
        ["Column reinforcement", "Formwork preparation", "First floor slab preparation"],
        ["Beam and slab reinforcement", "Concrete pouring", "Curing"],
        ["Second floor construction", "Column extension", "Wall construction"],
        ["Structural completion", "Load testing", "Quality checks"],
    ],
    "Roofing": [
        ["Roof slab preparation", "Waterproofing layer", "Insulation work"],
        ["Roof finishing", "Drainage system", "Parapet construction"],
        ["Final waterproofing", "Roof testing", "Completion checks"],
    ],
    "Finishing": [
        ["Electrical conduit installation", "Plumbing rough-in", "Window and door frames"],
        ["Plastering work", "Flooring preparation", "Electrical wiring"],
        ["Painting and finishing", "Fixture installation", "Final touches"],
        ["Quality inspection", "Cleaning", "Handover preparation"],
    ],
}

FALLBACK_TASKS: List[List[str]] = [["Work in progress"]]


def tasks_for_week(phase_name: str, week_index: int) -> List[str]:
    """Look up the tasks for a zero-based week position within a phase."""
    phase_tasks = PHASE_TASKS.get(phase_name, FALLBACK_TASKS)
    return list(phase_tasks[min(week_index, len(phase_tasks) - 1)])


# =============================================================================
# SCHEDULE GENERATION
# =============================================================================


def _weekly_materials(phase: Phase, materials: List[MaterialRequirement]) -> Dict[str, int]:
    phase_name = phase.phase_name.value
    return {
        material.material_name: math.ceil(material.quantity / phase.duration_weeks)
        for material in materials
        if material.used_in(phase_name)
    }


def generate_schedule(
    phases: List[Phase],
    materials: List[MaterialRequirement],
) -> List[WeeklyScheduleEntry]:
    """Generate the week-by-week schedule.

    Args:
        phases: Phases in execution order.
        materials: Material requirements tagged with phase labels.

    Returns:
        One entry per week, in phase order then week order.

    Raises:
        DegenerateScheduleError: If any phase has a zero or negative duration.
    """
    degenerate = find_degenerate_phases(phases)
    if degenerate:
        raise DegenerateScheduleError(
            "Timeline too short to schedule every phase: "
            + ", ".join(f"{p.phase_name.value}={p.duration_weeks}" for p in degenerate),
            phases={p.phase_name.value: p.duration_weeks for p in degenerate},
        )

    schedule: List[WeeklyScheduleEntry] = []
    for phase in phases:
        workforce = {labor.worker_type: labor.quantity for labor in phase.labor_allocations}
        weekly_materials = _weekly_materials(phase, materials)

        for week in range(phase.duration_weeks):
            schedule.append(
                WeeklyScheduleEntry(
                    week_number=phase.start_week + week,
                    phase_name=phase.phase_name.value,
                    tasks=tasks_for_week(phase.phase_name.value, week),
                    workforce_required=dict(workforce),
                    materials_needed=dict(weekly_materials),
                )
            )

    logger.debug("schedule_generated", weeks=len(schedule))
    return schedule
