"""
SVB STRESS LAB - Score Gauge Component

Semicircular gauge showing the 0-100 stress score over the three bands.
"""

import plotly.graph_objects as go
import streamlit as st

from svb_stress.config import ClassifierThresholds
from svb_stress.explain.formatting import format_duration_loss, format_score

ACCENT_COLORS = {
    "good": "#22c55e",
    "warn": "#eab308",
    "bad": "#ef4444",
}


def render_score_gauge(
    score: float,
    status: str,
    accent: str,
    duration_loss_pct: float,
    thresholds: ClassifierThresholds,
) -> None:
    """Render the stress score gauge, status pill and duration-loss estimate."""
    color = ACCENT_COLORS.get(accent, "#6b7280")

    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=round(score, 1),
            number={"valueformat": ".1f", "font": {"size": 40}},
            title={"text": "Stress Score", "font": {"size": 14}},
            gauge={
                "axis": {"range": [0, 100]},
                "bar": {"color": "#1f2937", "thickness": 0.25},
                "bgcolor": "#f3f4f6",
                "steps": [
                    {"range": [0, thresholds.at_risk], "color": ACCENT_COLORS["good"]},
                    {"range": [thresholds.at_risk, thresholds.critical], "color": ACCENT_COLORS["warn"]},
                    {"range": [thresholds.critical, 100], "color": ACCENT_COLORS["bad"]},
                ],
            },
        )
    )

    fig.update_layout(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        height=250,
        margin=dict(l=20, r=20, t=50, b=10),
    )

    st.plotly_chart(fig, use_container_width=True)

    st.markdown(
        f"<div style='text-align:center;'>"
        f"<span style='background:{color}38; color:{color}; padding:0.3rem 1rem;"
        f" border-radius:999px; font-weight:bold; font-size:1.3rem;'>{status}</span>"
        f"<p style='color:#6b7280; margin-top:0.6rem;'>Score {format_score(score)} / 100</p>"
        f"<p style='color:#6b7280;'>{format_duration_loss(duration_loss_pct)}</p>"
        f"</div>",
        unsafe_allow_html=True,
    )
