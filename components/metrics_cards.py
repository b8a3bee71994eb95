"""Reusable KPI metric card widgets."""

import streamlit as st

from engine.summary import is_on_target


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            delta = m.get("delta")
            delta_color = m.get("delta_color", "normal")
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=delta,
                delta_color=delta_color,
            )


def occupancy_metric(label: str, rate_pct: float) -> dict:
    """Metric dict for an occupancy rate, flagged green when inside the target band."""
    on_target = is_on_target(rate_pct)
    return {
        "label": label,
        "value": f"{rate_pct:.1f}%",
        "delta": "On target" if on_target else "Off target",
        "delta_color": "normal" if on_target else "inverse",
    }
