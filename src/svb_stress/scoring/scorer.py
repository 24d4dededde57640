"""
SVB STRESS LAB - Weighted Stress Scorer

score = sum(weight_i * normalized_i), clamped to [0, 100].

Weights sum to 100, so nominal inputs already land in range;
the clamp bounds anything else. Deterministic, no side effects.
"""

from __future__ import annotations

from svb_stress.config import ScoreWeights
from svb_stress.normalization.normalizer import clamp
from svb_stress.types import DRIVER_NAMES, DriverContribution, NormalizedInputs


def compute_stress_score(normalized: NormalizedInputs, weights: ScoreWeights) -> float:
    """
    Weighted sum of normalized driver intensities.

    Args:
        normalized: Driver intensities in [0, 1].
        weights: Per-driver weights.

    Returns:
        Stress score in [0, 100].
    """
    raw = sum(w * x for w, x in zip(weights.as_list(), normalized.as_list()))
    return clamp(0.0, 100.0, raw)


def driver_contributions(
    normalized: NormalizedInputs, weights: ScoreWeights
) -> list[DriverContribution]:
    """Per-driver score points, in fixed driver order."""
    return [
        DriverContribution(name=name, intensity=x, weight=w, points=w * x)
        for name, w, x in zip(DRIVER_NAMES, weights.as_list(), normalized.as_list())
    ]
