"""
SVB STRESS LAB - Driver Panel Component

Displays the band narrative and the leading score drivers.
"""

import streamlit as st


def render_driver_panel(narrative: str, driver_notes: list[str]) -> None:
    """Render interpretation text and ranked drivers."""
    st.markdown("### Interpretation")
    st.info(narrative)

    st.markdown("### Leading Drivers")
    if not driver_notes or driver_notes == ["No active stress drivers"]:
        st.success("No active stress drivers. All inputs at zero.")
        return

    for note in driver_notes:
        st.markdown(f"- {note}")
