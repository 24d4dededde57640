"""
SVB STRESS LAB - Stress Band Classifier

Rules (evaluated in order):
1. CRITICAL if score >= 70
2. AT RISK if score >= 40
3. STABLE otherwise

Band lower bounds are inclusive. No hysteresis; each score is independent.
"""

from __future__ import annotations

from svb_stress.config import ClassifierThresholds
from svb_stress.types import StressStatus


def classify_status(score: float, thresholds: ClassifierThresholds) -> StressStatus:
    """
    Map a stress score to its qualitative band.

    Args:
        score: Stress score, 0-100.
        thresholds: Band lower bounds.

    Returns:
        StressStatus.STABLE, StressStatus.AT_RISK, or StressStatus.CRITICAL
    """
    if score >= thresholds.critical:
        return StressStatus.CRITICAL

    if score >= thresholds.at_risk:
        return StressStatus.AT_RISK

    return StressStatus.STABLE
