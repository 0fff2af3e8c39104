"""Phase and labour planner for HomePlan.

Splits the project timeline into the four fixed construction phases,
sizes a crew for each worker type in each phase and prices the labour.

Duration split (weeks):
- Foundation: ceil(timeline x 0.25)
- Structure:  ceil(timeline x 0.35)
- Roofing:    ceil(timeline x 0.15)
- Finishing:  whatever remains, so the four always sum to the timeline

On short timelines the three ceilings can consume the whole timeline,
leaving Finishing at zero or below. Such phases are still returned and
flagged through find_degenerate_phases().
"""

import math
from typing import Dict, List, Tuple

import structlog

from homeplan.models.estimate import LaborAllocation, Phase, PhaseName
from homeplan.models.project import CostConfig, ProjectInputs

logger = structlog.get_logger(__name__)


# =============================================================================
# PHASE TABLES
# =============================================================================

WORKING_DAYS_PER_WEEK = 6

# Share of the timeline taken by each phase; Finishing takes the remainder
PHASE_TIMELINE_SHARES: Dict[PhaseName, float] = {
    PhaseName.FOUNDATION: 0.25,
    PhaseName.STRUCTURE: 0.35,
    PhaseName.ROOFING: 0.15,
}

# Square feet handled per worker, by phase and worker type (order preserved)
CREW_AREA_PER_WORKER: Dict[PhaseName, List[Tuple[str, int]]] = {
    PhaseName.FOUNDATION: [("Mason", 500), ("Labor", 300)],
    PhaseName.STRUCTURE: [("Mason", 400), ("Labor", 250)],
    PhaseName.ROOFING: [("Mason", 600), ("Labor", 400)],
    PhaseName.FINISHING: [
        ("Mason", 500),
        ("Electrician", 800),
        ("Plumber", 800),
        ("Labor", 350),
    ],
}


# =============================================================================
# CALCULATIONS
# =============================================================================


def split_timeline(timeline: int) -> List[int]:
    """Split a timeline into the four phase durations.

    Returns:
        Durations in phase order. Finishing absorbs all rounding and may
        be zero or negative for very short timelines.
    """
    leading = [
        math.ceil(timeline * PHASE_TIMELINE_SHARES[name])
        for name in (PhaseName.FOUNDATION, PhaseName.STRUCTURE, PhaseName.ROOFING)
    ]
    return leading + [timeline - sum(leading)]


def _allocate_labor(
    phase_name: PhaseName,
    total_area: float,
    duration_weeks: int,
    config: CostConfig,
) -> List[LaborAllocation]:
    # Degenerate phases get no working days
    days_required = max(duration_weeks, 0) * WORKING_DAYS_PER_WEEK
    allocations = []
    for worker_type, area_per_worker in CREW_AREA_PER_WORKER[phase_name]:
        quantity = math.ceil(total_area / area_per_worker)
        allocations.append(
            LaborAllocation(
                worker_type=worker_type,
                quantity=quantity,
                days_required=days_required,
                cost=quantity * days_required * config.wage_for(worker_type),
            )
        )
    return allocations


def compute_phases(inputs: ProjectInputs, config: CostConfig) -> List[Phase]:
    """Compute the four construction phases with labour allocations.

    Args:
        inputs: Project inputs (timeline in weeks).
        config: Rate table supplying daily wages.

    Returns:
        Phases in order Foundation, Structure, Roofing, Finishing with
        contiguous start weeks.
    """
    total_area = inputs.total_area
    durations = split_timeline(inputs.project_timeline)

    phases = []
    start_week = 1
    for order, (phase_name, duration) in enumerate(zip(PhaseName, durations), start=1):
        allocations = _allocate_labor(phase_name, total_area, duration, config)
        phases.append(
            Phase(
                phase_name=phase_name,
                phase_order=order,
                start_week=start_week,
                duration_weeks=duration,
                cost_estimate=sum(a.cost for a in allocations),
                labor_allocations=allocations,
            )
        )
        start_week += duration

    degenerate = find_degenerate_phases(phases)
    if degenerate:
        logger.warning(
            "degenerate_phases",
            timeline=inputs.project_timeline,
            phases={p.phase_name.value: p.duration_weeks for p in degenerate},
        )

    return phases


def find_degenerate_phases(phases: List[Phase]) -> List[Phase]:
    """Return phases whose duration is zero or negative."""
    return [phase for phase in phases if phase.is_degenerate]
