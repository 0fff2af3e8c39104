"""Timeline compression simulator for HomePlan.

Estimates the extra cost and schedule risk of finishing a project on a
shorter timeline than planned.

Model:
- compression_ratio     = new / original timeline
- workforce_multiplier  = 1 / compression_ratio
- overtime cost         = original cost x 0.3 x (1 - ratio)
- extra workforce cost  = original cost x 0.4 x (multiplier - 1)
"""

import math
from typing import List

import structlog

from homeplan.config.errors import CompressionError, ValidationError
from homeplan.models.compression import CompressionResult

logger = structlog.get_logger(__name__)


OVERTIME_COST_FACTOR = 0.3
WORKFORCE_COST_FACTOR = 0.4

# Ratio thresholds for the risk buckets
SEVERE_COMPRESSION_RATIO = 0.7
MODERATE_COMPRESSION_RATIO = 0.85
CONGESTION_WORKFORCE_MULTIPLIER = 1.5

# Shortest timeline accepted by the API and CLI, as a share of the original
MIN_COMPRESSION_RATIO = 0.5

SEVERE_RISKS = [
    "Severe timeline compression may compromise quality",
    "Worker fatigue and safety concerns",
    "Material procurement challenges",
]
MODERATE_RISKS = [
    "Moderate risk of quality issues",
    "Increased overtime requirements",
    "Coordination complexity increases",
]
CONGESTION_RISKS = [
    "Significant workforce increase required",
    "Site congestion and management challenges",
]


def min_compressed_timeline(original_timeline: int) -> int:
    """Shortest candidate timeline offered for a given original timeline."""
    return math.ceil(original_timeline * MIN_COMPRESSION_RATIO)


def compression_risks(compression_ratio: float, workforce_multiplier: float) -> List[str]:
    """List risks for a compression level, ratio bucket first."""
    risks: List[str] = []

    if compression_ratio < SEVERE_COMPRESSION_RATIO:
        risks.extend(SEVERE_RISKS)
    elif compression_ratio < MODERATE_COMPRESSION_RATIO:
        risks.extend(MODERATE_RISKS)

    if workforce_multiplier > CONGESTION_WORKFORCE_MULTIPLIER:
        risks.extend(CONGESTION_RISKS)

    return risks


def simulate_compression(
    original_timeline: float,
    new_timeline: float,
    original_cost: float,
) -> CompressionResult:
    """Simulate compressing a project onto a new timeline.

    A new timeline at or above the original is not rejected; the result
    then has compression_ratio >= 1 and a non-positive cost increase.

    Args:
        original_timeline: Planned timeline (weeks).
        new_timeline: Candidate timeline (weeks).
        original_cost: Baseline total cost.

    Returns:
        CompressionResult with cost deltas and ordered risks.

    Raises:
        ValidationError: If either timeline is not positive.
        CompressionError: If original_cost is zero.
    """
    if original_timeline <= 0:
        raise ValidationError("Original timeline must be positive", field="originalTimeline")
    if new_timeline <= 0:
        raise ValidationError("New timeline must be positive", field="newTimeline")
    if original_cost == 0:
        raise CompressionError(
            "Cannot compute percentage increase for a zero baseline cost",
            details={"original_cost": original_cost},
        )

    compression_ratio = new_timeline / original_timeline
    workforce_multiplier = 1 / compression_ratio
    efficiency_loss = 1 - compression_ratio

    overtime_cost = original_cost * OVERTIME_COST_FACTOR * efficiency_loss
    additional_workforce_cost = original_cost * WORKFORCE_COST_FACTOR * (workforce_multiplier - 1)

    new_cost = original_cost + overtime_cost + additional_workforce_cost
    cost_increase = new_cost - original_cost

    result = CompressionResult(
        new_cost=new_cost,
        cost_increase=cost_increase,
        percentage_increase=cost_increase / original_cost * 100,
        workforce_increase=(workforce_multiplier - 1) * 100,
        compression_ratio=compression_ratio,
        workforce_multiplier=workforce_multiplier,
        risks=compression_risks(compression_ratio, workforce_multiplier),
    )

    logger.info(
        "compression_simulated",
        original_timeline=original_timeline,
        new_timeline=new_timeline,
        compression_ratio=round(compression_ratio, 4),
        cost_increase=round(cost_increase, 2),
        risk_count=len(result.risks),
    )
    return result
