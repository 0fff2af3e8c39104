"""Unit tests for the timeline compression simulator."""

import pytest

from homeplan.config.errors import CompressionError, ValidationError
from homeplan.services.compression import (
    CONGESTION_RISKS,
    MODERATE_RISKS,
    SEVERE_RISKS,
    min_compressed_timeline,
    simulate_compression,
)


class TestSimulateCompression:
    """Tests for simulate_compression()."""

    def test_moderate_compression(self):
        result = simulate_compression(24, 18, 1_000_000)

        assert result.compression_ratio == pytest.approx(0.75)
        assert result.workforce_multiplier == pytest.approx(4 / 3)
        assert result.new_cost == pytest.approx(1_000_000 + 75_000 + 400_000 / 3)
        assert result.cost_increase == pytest.approx(75_000 + 400_000 / 3)
        assert result.percentage_increase == pytest.approx(20.8333333, rel=1e-6)
        assert result.workforce_increase == pytest.approx(33.3333333, rel=1e-6)
        assert result.risks == MODERATE_RISKS

    def test_severe_compression_adds_congestion(self):
        result = simulate_compression(24, 12, 1_000_000)

        assert result.workforce_multiplier == pytest.approx(2)
        assert result.risks == SEVERE_RISKS + CONGESTION_RISKS

    def test_mild_compression_has_no_risks(self):
        result = simulate_compression(24, 21, 500_000)
        assert result.cost_increase > 0
        assert result.risks == []

    def test_bucket_boundaries(self):
        assert simulate_compression(10, 7, 100).risks == MODERATE_RISKS
        assert simulate_compression(20, 17, 100).risks == []

    def test_no_change(self):
        result = simulate_compression(24, 24, 2_536_400)

        assert result.cost_increase == 0
        assert result.workforce_increase == 0
        assert result.new_cost == 2_536_400
        assert result.risks == []
        assert not result.is_compressed

    def test_extension_is_not_rejected(self):
        result = simulate_compression(24, 30, 1_000_000)

        assert result.compression_ratio >= 1
        assert result.cost_increase <= 0
        assert result.risks == []

    @pytest.mark.parametrize("new_timeline", [23, 20, 16, 12])
    def test_shortening_always_costs_more(self, new_timeline):
        result = simulate_compression(24, new_timeline, 1_000_000)
        assert result.cost_increase > 0
        assert result.is_compressed

    def test_zero_cost_raises(self):
        with pytest.raises(CompressionError) as exc_info:
            simulate_compression(24, 18, 0)

        assert exc_info.value.code == "DIVISION_BY_ZERO"

    @pytest.mark.parametrize("original,new", [(24, 0), (24, -3), (0, 12)])
    def test_non_positive_timelines_raise(self, original, new):
        with pytest.raises(ValidationError):
            simulate_compression(original, new, 1_000_000)

    def test_serializes_camel_case(self):
        data = simulate_compression(24, 18, 1_000_000).to_dict()
        for key in ("newCost", "costIncrease", "percentageIncrease", "workforceIncrease", "risks"):
            assert key in data


class TestMinCompressedTimeline:
    """Tests for min_compressed_timeline()."""

    @pytest.mark.parametrize("original,minimum", [(24, 12), (25, 13), (1, 1), (7, 4)])
    def test_half_rounded_up(self, original, minimum):
        assert min_compressed_timeline(original) == minimum
