"""
SVB STRESS LAB - Duration-Based Loss Approximation

Simplified bond price sensitivity:
    price impact (%) ~= duration (years) x rate shock (pp)

Secondary illustrative metric. Not an input to the stress score.
"""

from __future__ import annotations

from svb_stress.config import DurationLossConfig
from svb_stress.normalization.normalizer import clamp


def estimate_duration_loss_pct(
    duration_years: float,
    rate_shock_pct: float,
    config: DurationLossConfig,
) -> float:
    """
    Estimate the asset price impact of a parallel rate shock.

    Args:
        duration_years: Raw asset duration.
        rate_shock_pct: Raw rate shock in percentage points.
        config: Floor and cap for the estimate.

    Returns:
        Estimated price impact in percent, within [floor, cap].
    """
    return clamp(config.floor, config.cap, duration_years * rate_shock_pct)
