"""
SVB STRESS LAB - Explanation Generator

Produces the band narrative and a ranked list of score drivers.
Narratives are fixed texts, one per band. No predictions.
"""

from __future__ import annotations

from svb_stress.types import DriverContribution, StressStatus

NARRATIVES = {
    StressStatus.STABLE: (
        "Balance-sheet and deposit dynamics remain resilient under this scenario. "
        "Risk factors do not compound rapidly enough to generate acute stress."
    ),
    StressStatus.AT_RISK: (
        "Multiple vulnerabilities are present. A confidence shock or acceleration "
        "in withdrawals could trigger reinforcing liquidity pressure."
    ),
    StressStatus.CRITICAL: (
        "Systemic fragility is elevated. Rate sensitivity and deposit flight dynamics "
        "can amplify each other, rapidly constraining liquidity."
    ),
}


def interpretation_text(status: StressStatus) -> str:
    """Fixed narrative for a stress band."""
    return NARRATIVES[status]


def generate_explanation(
    status: StressStatus,
    contributions: list[DriverContribution],
    top_n: int = 3,
) -> tuple[str, list[str]]:
    """
    Generate narrative and driver statements.

    Args:
        status: Classified stress band.
        contributions: Per-driver score points.
        top_n: Maximum number of driver statements.

    Returns:
        (narrative: str, drivers: list[str]) with drivers ranked by points.
    """
    ranked = sorted(contributions, key=lambda c: c.points, reverse=True)
    drivers = [
        f"{c.name}: {c.points:.1f} of {c.weight:.0f} pts (intensity {c.intensity:.2f})"
        for c in ranked[:top_n]
        if c.points > 0
    ]

    if not drivers:
        drivers.append("No active stress drivers")

    return interpretation_text(status), drivers
