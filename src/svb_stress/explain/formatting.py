"""
SVB STRESS LAB - Display Formatting

Value labels shared by the dashboard and the CLI.
"""

from __future__ import annotations

from svb_stress.types import StressInputs


def fmt(value: float, digits: int = 1) -> str:
    return f"{value:.{digits}f}"


def format_score(score: float) -> str:
    return fmt(score, 1)


def format_duration_loss(loss_pct: float) -> str:
    return f"~{fmt(loss_pct, 1)}% estimated price impact"


def format_input_labels(inputs: StressInputs) -> dict[str, str]:
    """Slider value labels keyed by StressInputs field name."""
    return {
        "rate_shock_pct": fmt(inputs.rate_shock_pct, 2) + "%",
        "uninsured_pct": fmt(inputs.uninsured_pct, 0) + "%",
        "duration_years": fmt(inputs.duration_years, 1),
        "unrealized_loss_pct_cap": fmt(inputs.unrealized_loss_pct_cap, 0) + "%",
        "withdrawal_speed": fmt(inputs.withdrawal_speed, 0),
        "concentration": fmt(inputs.concentration, 0),
    }
