"""
SVB STRESS LAB - Input Normalization

Maps each raw input onto 0-1 by dividing by its fixed ceiling.
Out-of-range values are clamped, never rejected. No side effects.
"""

from __future__ import annotations

import math

from svb_stress.config import NormalizationCeilings
from svb_stress.types import NormalizedInputs, StressInputs


def clamp(lo: float, hi: float, x: float) -> float:
    """Bound x to [lo, hi]. NaN maps to lo."""
    if math.isnan(x):
        return lo
    return max(lo, min(hi, x))


def normalize_inputs(inputs: StressInputs, ceilings: NormalizationCeilings) -> NormalizedInputs:
    """
    Convert raw inputs to normalized driver intensities.

    Args:
        inputs: Raw slider values.
        ceilings: Divisor per field.

    Returns:
        NormalizedInputs with every field in [0, 1].
    """
    return NormalizedInputs(
        rate_shock=clamp(0.0, 1.0, inputs.rate_shock_pct / ceilings.rate_shock_pct),
        uninsured=clamp(0.0, 1.0, inputs.uninsured_pct / ceilings.uninsured_pct),
        duration=clamp(0.0, 1.0, inputs.duration_years / ceilings.duration_years),
        losses=clamp(0.0, 1.0, inputs.unrealized_loss_pct_cap / ceilings.unrealized_loss_pct_cap),
        withdrawal=clamp(0.0, 1.0, inputs.withdrawal_speed / ceilings.withdrawal_speed),
        concentration=clamp(0.0, 1.0, inputs.concentration / ceilings.concentration),
    )
