"""Utility modules for HomePlan."""

from homeplan.utils.plan_logger import (
    configure_logging,
    log_plan_summary,
    log_compression_summary,
)

__all__ = [
    "configure_logging",
    "log_plan_summary",
    "log_compression_summary",
]
