"""
SVB STRESS LAB - Preset Scenarios

Named canonical input sets. Applying a preset replaces all six
inputs; there is no merging with prior values.
"""

from __future__ import annotations

from svb_stress.types import StressInputs

PRESETS: dict[str, StressInputs] = {
    "svb": StressInputs(
        rate_shock_pct=2.5,
        uninsured_pct=80,
        duration_years=6.5,
        unrealized_loss_pct_cap=65,
        withdrawal_speed=85,
        concentration=85,
    ),
    "stable": StressInputs(
        rate_shock_pct=1.0,
        uninsured_pct=25,
        duration_years=3.0,
        unrealized_loss_pct_cap=15,
        withdrawal_speed=25,
        concentration=30,
    ),
    "rateShock": StressInputs(
        rate_shock_pct=4.5,
        uninsured_pct=45,
        duration_years=7.5,
        unrealized_loss_pct_cap=55,
        withdrawal_speed=40,
        concentration=45,
    ),
    "run": StressInputs(
        rate_shock_pct=2.0,
        uninsured_pct=70,
        duration_years=5.5,
        unrealized_loss_pct_cap=35,
        withdrawal_speed=95,
        concentration=90,
    ),
}

PRESET_TITLES = {
    "svb": "SVB-like",
    "stable": "Stable bank",
    "rateShock": "Rate shock",
    "run": "Bank run",
}


def get_preset(name: str) -> StressInputs:
    """Look up a preset by name. Raises KeyError for unknown names."""
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(
            f"Unknown preset '{name}'. Available: {', '.join(PRESETS)}"
        ) from None


def list_presets() -> list[tuple[str, str]]:
    """(name, title) pairs in display order."""
    return [(name, PRESET_TITLES[name]) for name in PRESETS]
