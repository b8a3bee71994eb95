"""Tab 1: Home — what each model shows."""

import streamlit as st


def render():
    """Render the home tab."""
    st.header("Policy Models")
    st.write(
        "Interactive models for thinking through housing and public health policy tradeoffs. "
        "Every chart recomputes instantly as you move the sliders."
    )

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Housing Simulation")
        st.write(
            "Project permanent supportive housing occupancy, turnover, and budget over ten years "
            "from inventory growth, monthly inflow, and average length of stay."
        )
    with col2:
        st.subheader("Allocation Tradeoffs")
        st.write(
            "See how tax rate shapes revenue and how spreading a fixed budget across more people "
            "changes the help each person receives."
        )
