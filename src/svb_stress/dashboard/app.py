"""
SVB STRESS LAB Streamlit Dashboard.

Run with: streamlit run src/svb_stress/dashboard/app.py
"""

import sys
from dataclasses import fields
from pathlib import Path

# Ensure svb_stress is importable when run via `streamlit run`
_SRC_DIR = str(Path(__file__).resolve().parents[2])
if _SRC_DIR not in sys.path:
    sys.path.insert(0, _SRC_DIR)

import streamlit as st

from svb_stress.config import StressConfig
from svb_stress.dashboard.components.driver_chart import render_driver_chart
from svb_stress.dashboard.components.driver_panel import render_driver_panel
from svb_stress.dashboard.components.history_chart import render_history_chart
from svb_stress.dashboard.components.metric_cards import render_metric_cards
from svb_stress.dashboard.components.score_gauge import render_score_gauge
from svb_stress.dashboard.state import DashboardSession
from svb_stress.explain.formatting import format_input_labels
from svb_stress.presets.library import get_preset, list_presets
from svb_stress.types import StressInputs

INPUT_FIELDS = [f.name for f in fields(StressInputs)]
DEFAULT_PRESET = "svb"


def _load_preset(name: str) -> None:
    """Button callback: overwrite every slider before the next rerun."""
    preset = get_preset(name)
    for field_name in INPUT_FIELDS:
        st.session_state[field_name] = float(getattr(preset, field_name))
    st.session_state["preset_applied"] = name


def _init_state(config: StressConfig) -> DashboardSession:
    if "session" not in st.session_state:
        st.session_state["session"] = DashboardSession(config)
        _load_preset(DEFAULT_PRESET)
    return st.session_state["session"]


def _render_sliders(config: StressConfig) -> StressInputs:
    values = {}
    for field_name in INPUT_FIELDS:
        spec = getattr(config.ranges, field_name)
        label = f"{spec.label} ({spec.unit})" if spec.unit else spec.label
        values[field_name] = st.slider(
            label,
            min_value=spec.min_value,
            max_value=spec.max_value,
            step=spec.step,
            key=field_name,
        )
    return StressInputs(**values)


def main() -> None:
    st.set_page_config(
        page_title="SVB STRESS LAB",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    config = StressConfig()
    session = _init_state(config)

    st.title("SVB STRESS LAB")
    st.markdown("**How balance-sheet and deposit risks compound into bank stress**")
    st.caption(
        "A teaching prototype, not a prediction engine. Weights are hand-chosen "
        "to illustrate the dynamics behind the Silicon Valley Bank collapse."
    )

    # Sidebar
    with st.sidebar:
        st.header("Scenario Presets")
        cols = st.columns(2)
        for i, (name, title) in enumerate(list_presets()):
            with cols[i % 2]:
                st.button(
                    title,
                    key=f"preset_{name}",
                    on_click=_load_preset,
                    args=(name,),
                    use_container_width=True,
                )

        st.divider()
        st.header("Risk Factors")
        inputs = _render_sliders(config)

        st.divider()
        labels = format_input_labels(inputs)
        st.markdown(
            "\n".join(
                f"- {getattr(config.ranges, name).label}: **{value}**"
                for name, value in labels.items()
            )
        )

    # Recompute on any input change or preset click
    preset_applied = st.session_state.pop("preset_applied", None)
    if preset_applied is not None or session.latest is None or inputs != session.inputs:
        result = session.on_input_changed(inputs)
    else:
        result = session.latest

    # Row 1: Score gauge + interpretation
    col1, col2 = st.columns([1, 2])
    with col1:
        render_score_gauge(
            score=result.score,
            status=result.status.value,
            accent=result.status.accent,
            duration_loss_pct=result.duration_loss_pct,
            thresholds=config.classifier,
        )
    with col2:
        render_driver_panel(result.narrative, result.driver_notes)

    # Row 2: Driver cards
    st.markdown("### Risk Drivers")
    render_metric_cards(result.inputs, result.drivers)

    # Row 3: Charts
    col3, col4 = st.columns(2)
    with col3:
        st.markdown("### Stress Score Over Time")
        render_history_chart(session.history.to_frame(), config.classifier)
    with col4:
        st.markdown("### Normalized Driver Intensity")
        render_driver_chart(result.normalized)

    # Raw data expander
    with st.expander("Raw Data"):
        st.json(result.to_dict())
        st.dataframe(session.history.to_frame())


if __name__ == "__main__":
    main()
