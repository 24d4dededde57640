"""Tests for the stress pipeline."""

import json
import math

import pytest

from svb_stress.config import StressConfig
from svb_stress.pipeline.engine import StressPipeline
from svb_stress.presets.library import get_preset
from svb_stress.types import StressInputs, StressStatus


class TestStressPipelineProcess:
    @pytest.fixture
    def pipeline(self):
        return StressPipeline()

    def test_svb_scenario(self, pipeline, svb_inputs):
        result = pipeline.process(svb_inputs)
        assert result.score == pytest.approx(67.55)
        assert result.status == StressStatus.AT_RISK
        assert result.duration_loss_pct == pytest.approx(16.25)
        assert "confidence shock" in result.narrative

    def test_calm_scenario(self, pipeline, calm_inputs):
        result = pipeline.process(calm_inputs)
        assert result.score == pytest.approx(22.5)
        assert result.status == StressStatus.STABLE
        assert result.duration_loss_pct == pytest.approx(3.0)

    def test_max_scenario_is_critical(self, pipeline, max_inputs):
        result = pipeline.process(max_inputs)
        assert result.status == StressStatus.CRITICAL
        assert result.duration_loss_pct == pytest.approx(60.0)

    def test_empty_inputs(self, pipeline, zero_inputs):
        result = pipeline.process(zero_inputs)
        assert result.score == 0.0
        assert result.status == StressStatus.STABLE
        assert result.driver_notes == ["No active stress drivers"]

    def test_idempotent(self, pipeline, svb_inputs):
        first = pipeline.process(svb_inputs)
        second = pipeline.process(svb_inputs)
        assert first == second

    def test_duration_loss_independent_of_score(self, pipeline):
        """Losses input moves the score, not the duration estimate."""
        low = pipeline.process(StressInputs(duration_years=5, rate_shock_pct=2, unrealized_loss_pct_cap=0))
        high = pipeline.process(StressInputs(duration_years=5, rate_shock_pct=2, unrealized_loss_pct_cap=120))
        assert low.duration_loss_pct == high.duration_loss_pct == pytest.approx(10.0)
        assert high.score == pytest.approx(low.score + 18.0)

    def test_out_of_range_inputs_clamped(self, pipeline, out_of_range_inputs):
        result = pipeline.process(out_of_range_inputs)
        assert 0.0 <= result.score <= 100.0
        assert result.duration_loss_pct == 100.0

    def test_malformed_mapping_clamped(self, pipeline):
        inputs = StressInputs.from_mapping({"rateShockPct": "abc", "uninsuredPct": "50"})
        assert math.isnan(inputs.rate_shock_pct)
        result = pipeline.process(inputs)
        assert result.normalized.rate_shock == 0.0
        assert result.score == pytest.approx(11.0)
        assert result.duration_loss_pct == 0.0

    def test_to_dict_format(self, pipeline, svb_inputs):
        d = pipeline.process(svb_inputs).to_dict()
        assert d["stress_score"] == pytest.approx(67.5, abs=0.1)
        assert d["status"] == "At Risk"
        assert d["duration_loss_pct"] == pytest.approx(16.2, abs=0.1)
        assert set(d["inputs"]) == {
            "rate_shock_pct",
            "uninsured_pct",
            "duration_years",
            "unrealized_loss_pct_cap",
            "withdrawal_speed",
            "concentration",
        }
        assert len(d["drivers"]) == 6

    def test_to_json(self, pipeline, calm_inputs):
        payload = json.loads(pipeline.process(calm_inputs).to_json())
        assert payload["status"] == "Stable"

    def test_custom_config(self, svb_inputs):
        config = StressConfig()
        pipeline = StressPipeline(config)
        assert pipeline.config is config


class TestApplyPreset:
    @pytest.fixture
    def pipeline(self):
        return StressPipeline()

    @pytest.mark.parametrize(
        "name,score,status,loss",
        [
            ("svb", 67.55, StressStatus.AT_RISK, 16.25),
            ("stable", 22.5, StressStatus.STABLE, 3.0),
            ("rateShock", 54.2, StressStatus.AT_RISK, 33.75),
            ("run", 60.05, StressStatus.AT_RISK, 11.0),
        ],
    )
    def test_preset_results(self, pipeline, name, score, status, loss):
        result = pipeline.apply_preset(name)
        assert result.score == pytest.approx(score)
        assert result.status == status
        assert result.duration_loss_pct == pytest.approx(loss)

    def test_preset_matches_manual_inputs(self, pipeline):
        assert pipeline.apply_preset("run") == pipeline.process(get_preset("run"))

    def test_preset_replaces_all_inputs(self, pipeline):
        result = pipeline.apply_preset("stable")
        assert result.inputs == get_preset("stable")

    def test_unknown_preset(self, pipeline):
        with pytest.raises(KeyError):
            pipeline.apply_preset("nope")
