"""Pytest configuration and shared fixtures for HomePlan tests."""

import os
import sys

import pytest


# ============================================================================
# Ensure the repository root is importable without an editable install
# ============================================================================
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from homeplan.models.project import DEFAULT_COST_CONFIG, ProjectInputs


# ============================================================================
# Project Inputs
# ============================================================================

@pytest.fixture
def sample_inputs():
    """1000 sq ft x 2 floors over 24 weeks (total area 2000 sq ft)."""
    return ProjectInputs(built_up_area=1000, number_of_floors=2, project_timeline=24)


@pytest.fixture
def single_floor_inputs():
    """Small single-storey house."""
    return ProjectInputs(built_up_area=750, number_of_floors=1, project_timeline=16)


@pytest.fixture
def tall_inputs():
    """Large four-storey building."""
    return ProjectInputs(built_up_area=3000, number_of_floors=4, project_timeline=52)


@pytest.fixture
def default_config():
    """Default rate table."""
    return DEFAULT_COST_CONFIG


# ============================================================================
# Derived Values
# ============================================================================

@pytest.fixture
def sample_materials(sample_inputs, default_config):
    from homeplan.services.materials import compute_materials

    return compute_materials(sample_inputs, default_config)


@pytest.fixture
def sample_phases(sample_inputs, default_config):
    from homeplan.services.phases import compute_phases

    return compute_phases(sample_inputs, default_config)


@pytest.fixture
def sample_plan(sample_inputs):
    from homeplan.services.planner import plan_project

    return plan_project(sample_inputs)


# ============================================================================
# Raw Request Data
# ============================================================================

@pytest.fixture
def sample_request_data():
    """camelCase request body as sent by the frontend."""
    return {
        "builtUpArea": 1000,
        "numberOfFloors": 2,
        "projectTimeline": 24,
    }
