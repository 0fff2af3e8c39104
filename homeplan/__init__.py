"""HomePlan - residential construction planning engine.

This package estimates material quantities, labour crews, phase costs,
weekly schedules and per-floor layouts for residential building projects,
and simulates the cost and risk of compressing a project timeline.

Architecture:
- models: Immutable pydantic value objects (inputs, rate table, outputs)
- services: Pure calculators plus the plan orchestrator
- api / cli: Thin stateless surfaces over the calculators
"""

__version__ = "1.0.0"
