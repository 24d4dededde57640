"""Shared fixtures for SVB STRESS LAB tests."""

import sys
from pathlib import Path

import pytest

# Ensure svb_stress is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svb_stress.config import StressConfig
from svb_stress.types import StressInputs


@pytest.fixture
def config() -> StressConfig:
    return StressConfig()


@pytest.fixture
def svb_inputs() -> StressInputs:
    """SVB-like balance sheet: long duration, flighty uninsured deposits."""
    return StressInputs(
        rate_shock_pct=2.5,
        uninsured_pct=80,
        duration_years=6.5,
        unrealized_loss_pct_cap=65,
        withdrawal_speed=85,
        concentration=85,
    )


@pytest.fixture
def calm_inputs() -> StressInputs:
    return StressInputs(
        rate_shock_pct=1.0,
        uninsured_pct=25,
        duration_years=3.0,
        unrealized_loss_pct_cap=15,
        withdrawal_speed=25,
        concentration=30,
    )


@pytest.fixture
def zero_inputs() -> StressInputs:
    return StressInputs()


@pytest.fixture
def max_inputs() -> StressInputs:
    """Every input at its nominal ceiling."""
    return StressInputs(
        rate_shock_pct=6.0,
        uninsured_pct=100,
        duration_years=10.0,
        unrealized_loss_pct_cap=120,
        withdrawal_speed=100,
        concentration=100,
    )


@pytest.fixture
def out_of_range_inputs() -> StressInputs:
    return StressInputs(
        rate_shock_pct=12.0,
        uninsured_pct=-20,
        duration_years=25.0,
        unrealized_loss_pct_cap=300,
        withdrawal_speed=-5,
        concentration=150,
    )
