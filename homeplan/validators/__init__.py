"""Boundary validation for HomePlan requests."""

from homeplan.validators.input_validator import (
    parse_compression_request,
    parse_project_inputs,
)

__all__ = ["parse_compression_request", "parse_project_inputs"]
