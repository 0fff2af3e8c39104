"""Plan Output Logger for HomePlan.

Configures structlog and prints banner-style summaries of plans and
compression results for the command line.
"""

import logging
import sys
from typing import Optional

import structlog

from homeplan.config.settings import settings
from homeplan.models.compression import CompressionResult
from homeplan.models.plan import ProjectPlan

logger = structlog.get_logger(__name__)

BANNER_WIDTH = 80
PLAN_BANNER_CHAR = "═"
COMPRESSION_BANNER_CHAR = "─"


def _stderr_logger_factory(*args) -> structlog.PrintLogger:
    # Look up sys.stderr per logger so redirected streams are picked up
    return structlog.PrintLogger(sys.stderr)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog once for console output.

    Args:
        level: Log level name (default from settings).
    """
    level_name = (level or settings.log_level).upper()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level_name, logging.INFO)),
        logger_factory=_stderr_logger_factory,
    )


def _create_banner(char: str, text: str, width: int = BANNER_WIDTH) -> str:
    """Create a centered banner with given character."""
    text_with_spaces = f" {text} "
    padding = (width - len(text_with_spaces)) // 2
    return char * padding + text_with_spaces + char * (width - padding - len(text_with_spaces))


def log_plan_summary(plan: ProjectPlan) -> None:
    """Print a plan summary banner to stderr."""
    inputs = plan.inputs
    costs = plan.cost_breakdown
    out = sys.stderr

    print(PLAN_BANNER_CHAR * BANNER_WIDTH, file=out)
    print(_create_banner(PLAN_BANNER_CHAR, "PROJECT PLAN"), file=out)
    print(PLAN_BANNER_CHAR * BANNER_WIDTH, file=out)
    print(f"║ Area          : {inputs.built_up_area:,.0f} sq ft x {inputs.number_of_floors} floors", file=out)
    print(f"║ Timeline      : {inputs.project_timeline} weeks", file=out)
    print(f"║ Material cost : {costs.material_cost:,.2f}", file=out)
    print(f"║ Labour cost   : {costs.labor_cost:,.2f}", file=out)
    print(f"║ Total cost    : {costs.total_cost:,.2f}", file=out)
    for phase in plan.phases:
        crew = sum(labor.quantity for labor in phase.labor_allocations)
        print(
            f"║ {phase.phase_name.value:<13} : weeks {phase.start_week}-{phase.end_week}, "
            f"crew {crew}, {phase.cost_estimate:,.2f}",
            file=out,
        )
    print(PLAN_BANNER_CHAR * BANNER_WIDTH, file=out)

    logger.info(
        "plan_summary_logged",
        total_cost=costs.total_cost,
        weeks=plan.total_weeks,
    )


def log_compression_summary(result: CompressionResult) -> None:
    """Print a compression summary banner to stderr."""
    out = sys.stderr

    print(COMPRESSION_BANNER_CHAR * BANNER_WIDTH, file=out)
    print(_create_banner(COMPRESSION_BANNER_CHAR, "TIMELINE COMPRESSION"), file=out)
    print(COMPRESSION_BANNER_CHAR * BANNER_WIDTH, file=out)
    print(f"║ Ratio              : {result.compression_ratio:.2f}", file=out)
    print(f"║ New cost           : {result.new_cost:,.2f}", file=out)
    print(f"║ Cost increase      : {result.cost_increase:,.2f} ({result.percentage_increase:.1f}%)", file=out)
    print(f"║ Workforce increase : {result.workforce_increase:.1f}%", file=out)
    for risk in result.risks:
        print(f"║ ! {risk}", file=out)
    print(COMPRESSION_BANNER_CHAR * BANNER_WIDTH, file=out)
