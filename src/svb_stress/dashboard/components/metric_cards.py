"""
SVB STRESS LAB - Metric Cards Component

One card per driver: raw value, score points, and intensity bar.
"""

import streamlit as st

from svb_stress.explain.formatting import format_input_labels
from svb_stress.types import DriverContribution, StressInputs

INTENSITY_COLORS = [(0.4, "#22c55e"), (0.7, "#eab308"), (1.01, "#ef4444")]


def _intensity_color(intensity: float) -> str:
    for upper, color in INTENSITY_COLORS:
        if intensity < upper:
            return color
    return "#6b7280"


def render_metric_cards(inputs: StressInputs, drivers: list[DriverContribution]) -> None:
    """Render per-driver cards in a row."""
    cols = st.columns(len(drivers))
    labels = list(format_input_labels(inputs).values())

    for i, driver in enumerate(drivers):
        with cols[i]:
            color = _intensity_color(driver.intensity)
            st.markdown(
                f"""
                <div style="
                    background: linear-gradient(135deg, {color}20, {color}10);
                    border-left: 4px solid {color};
                    padding: 1rem; border-radius: 0.5rem;
                ">
                    <div style="font-weight:bold; font-size:0.9rem;">{driver.name}</div>
                    <div style="color:{color}; font-size:1.2rem; font-weight:bold;">{labels[i]}</div>
                    <div style="font-size:0.75rem; color:#6b7280;">{driver.points:.1f} / {driver.weight:.0f} pts</div>
                    <div style="font-size:0.75rem; color:#9ca3af;">Intensity: {driver.intensity:.2f}</div>
                </div>
                """,
                unsafe_allow_html=True,
            )
