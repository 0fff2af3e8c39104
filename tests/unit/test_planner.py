"""Unit tests for the plan orchestrator."""

import pytest

from homeplan.config.errors import DegenerateScheduleError, ValidationError
from homeplan.models.project import DEFAULT_COST_CONFIG, ProjectInputs, merge_cost_config
from homeplan.services.compression import MODERATE_RISKS
from homeplan.services.planner import (
    plan_project,
    replan_with_config,
    resolve_config,
    simulate_plan_compression,
)


class TestResolveConfig:
    """Tests for resolve_config()."""

    def test_none_gives_defaults(self):
        assert resolve_config(None) is DEFAULT_COST_CONFIG

    def test_config_used_as_is(self):
        config = merge_cost_config({"steelRate": 70})
        assert resolve_config(config) is config

    def test_mapping_merged_over_defaults(self):
        config = resolve_config({"steelRate": 70})
        assert config.steel_rate == 70
        assert config.cement_rate == DEFAULT_COST_CONFIG.cement_rate


class TestPlanProject:
    """Tests for plan_project()."""

    def test_sample_plan(self, sample_plan):
        assert len(sample_plan.materials) == 5
        assert len(sample_plan.phases) == 4
        assert len(sample_plan.schedule) == 24
        assert len(sample_plan.layouts) == 2
        assert sample_plan.total_cost == 2536400
        assert sample_plan.config == DEFAULT_COST_CONFIG

    def test_schedule_covers_timeline(self, tall_inputs):
        plan = plan_project(tall_inputs)
        assert plan.total_weeks == tall_inputs.project_timeline
        assert plan.schedule[-1].week_number == tall_inputs.project_timeline

    def test_overrides_mapping(self, sample_inputs):
        plan = plan_project(sample_inputs, {"cementRate": 500})
        assert plan.config.cement_rate == 500
        assert plan.cost_breakdown.material_cost == 1262000 + 800 * 100

    def test_bad_override_rejected(self, sample_inputs):
        with pytest.raises(ValidationError):
            plan_project(sample_inputs, {"cementRate": -1})

    def test_degenerate_timeline_reported(self):
        inputs = ProjectInputs(built_up_area=1000, number_of_floors=2, project_timeline=4)

        with pytest.raises(DegenerateScheduleError) as exc_info:
            plan_project(inputs)

        assert exc_info.value.details["timeline"] == 4
        assert exc_info.value.phases == {"Finishing": 0}

    def test_plan_serializes(self, sample_plan):
        data = sample_plan.to_dict()

        assert data["inputs"]["builtUpArea"] == 1000
        assert data["costBreakdown"]["totalCost"] == 2536400
        assert data["phases"][0]["phaseName"] == "Foundation"
        assert data["phases"][0]["laborAllocations"][0]["workerType"] == "Mason"
        assert data["materials"][0]["materialName"] == "Cement"
        assert data["schedule"][0]["weekNumber"] == 1


class TestReplanWithConfig:
    """Tests for replan_with_config()."""

    def test_reprices_plan(self, sample_plan):
        replanned = replan_with_config(sample_plan, {"masonWage": 900})

        assert replanned.config.mason_wage == 900
        assert replanned.cost_breakdown.labor_cost > sample_plan.cost_breakdown.labor_cost
        assert replanned.cost_breakdown.material_cost == sample_plan.cost_breakdown.material_cost

    def test_keeps_previous_overrides(self, sample_inputs):
        plan = plan_project(sample_inputs, {"laborWage": 650})
        replanned = replan_with_config(plan, {"steelRate": 65})

        assert replanned.config.labor_wage == 650
        assert replanned.config.steel_rate == 65

    def test_original_plan_untouched(self, sample_plan):
        replan_with_config(sample_plan, {"brickRate": 9000})
        assert sample_plan.config.brick_rate == 6000
        assert sample_plan.total_cost == 2536400


class TestSimulatePlanCompression:
    """Tests for simulate_plan_compression()."""

    def test_uses_full_plan_cost(self, sample_plan):
        result = simulate_plan_compression(sample_plan, 18)

        assert result.compression_ratio == pytest.approx(0.75)
        assert result.percentage_increase == pytest.approx(20.8333333, rel=1e-6)
        assert result.new_cost == pytest.approx(2536400 * (1 + 0.075 + 0.4 / 3))
        assert result.risks == MODERATE_RISKS


class TestSingleFloorPlan:
    """Tests for single-storey projects."""

    def test_single_floor(self, single_floor_inputs):
        plan = plan_project(single_floor_inputs)

        assert len(plan.layouts) == 1
        assert plan.layouts[0].total_rooms == 6
        assert plan.materials[0].quantity == 300
        assert plan.total_weeks == 16
