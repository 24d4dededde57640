"""Tests for the preset library."""

import pytest

from svb_stress.presets.library import PRESETS, get_preset, list_presets
from svb_stress.types import StressInputs


class TestPresets:
    def test_four_presets(self):
        assert list(PRESETS) == ["svb", "stable", "rateShock", "run"]

    def test_svb_values(self, svb_inputs):
        assert get_preset("svb") == svb_inputs

    def test_stable_values(self, calm_inputs):
        assert get_preset("stable") == calm_inputs

    def test_rate_shock_values(self):
        assert get_preset("rateShock") == StressInputs(
            rate_shock_pct=4.5,
            uninsured_pct=45,
            duration_years=7.5,
            unrealized_loss_pct_cap=55,
            withdrawal_speed=40,
            concentration=45,
        )

    def test_run_values(self):
        preset = get_preset("run")
        assert preset.withdrawal_speed == 95
        assert preset.concentration == 90
        assert preset.rate_shock_pct == 2.0

    def test_unknown_preset_raises(self):
        with pytest.raises(KeyError, match="Available: svb, stable, rateShock, run"):
            get_preset("lehman")

    def test_presets_are_immutable(self):
        with pytest.raises(AttributeError):
            get_preset("svb").uninsured_pct = 10  # type: ignore[misc]

    def test_list_presets_order(self):
        assert list_presets() == [
            ("svb", "SVB-like"),
            ("stable", "Stable bank"),
            ("rateShock", "Rate shock"),
            ("run", "Bank run"),
        ]
