"""
SVB STRESS LAB - History Chart Component

Rolling line chart of recent stress scores.
"""

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from svb_stress.config import ClassifierThresholds


def render_history_chart(history: pd.DataFrame, thresholds: ClassifierThresholds) -> None:
    """Render stress score history with band threshold lines."""
    fig = go.Figure()

    fig.add_trace(
        go.Scatter(
            x=list(range(1, len(history) + 1)),
            y=history["stress_score"],
            customdata=history["label"],
            mode="lines+markers",
            name="Stress Score Over Time",
            line=dict(color="#2563eb", shape="spline", smoothing=0.5),
            hovertemplate="%{customdata}<br>Score: %{y:.1f}<extra></extra>",
        )
    )

    fig.add_hline(y=thresholds.at_risk, line_dash="dot", line_color="#eab308")
    fig.add_hline(y=thresholds.critical, line_dash="dot", line_color="#ef4444")

    fig.update_layout(
        yaxis=dict(range=[0, 100], title="Score"),
        xaxis=dict(
            tickvals=list(range(1, len(history) + 1)),
            ticktext=history["label"].tolist(),
        ),
        height=260,
        margin=dict(l=0, r=0, t=30, b=0),
        showlegend=False,
    )

    st.plotly_chart(fig, use_container_width=True)
