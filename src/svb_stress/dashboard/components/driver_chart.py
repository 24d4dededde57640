"""
SVB STRESS LAB - Driver Chart Component

Snapshot bar chart of the six normalized driver intensities.
"""

import plotly.graph_objects as go
import streamlit as st

from svb_stress.types import DRIVER_NAMES, NormalizedInputs


def render_driver_chart(normalized: NormalizedInputs) -> None:
    """Render normalized driver intensities (0-1 each)."""
    fig = go.Figure(
        go.Bar(
            x=DRIVER_NAMES,
            y=normalized.as_list(),
            name="Normalized Driver Intensity",
            marker_color="#6366f1",
            hovertemplate="%{x}: %{y:.2f}<extra></extra>",
        )
    )

    fig.update_layout(
        yaxis=dict(range=[0, 1], title="Intensity"),
        height=260,
        margin=dict(l=0, r=0, t=30, b=0),
        showlegend=False,
    )

    st.plotly_chart(fig, use_container_width=True)
