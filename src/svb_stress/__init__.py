"""
SVB STRESS LAB - Bank Balance-Sheet Stress Demonstrator

Shows how six balance-sheet and deposit risk factors combine into
a single 0-100 stress score, loosely modeled on the Silicon Valley
Bank collapse.

Design Principles:
- Teaching tool, not a prediction engine
- Hand-chosen weights, no calibration
- Deterministic, pure scoring core
- Out-of-range inputs are clamped, never rejected
- Three qualitative bands (Stable / At Risk / Critical)
"""

__version__ = "1.0.0"
