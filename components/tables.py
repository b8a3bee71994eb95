"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd

from engine.summary import is_on_target


def render_trace_table(df: pd.DataFrame, rate_column: str = "occupancy_rate"):
    """Render the monthly trace with on-target occupancy rates highlighted."""
    def color_rate(val):
        try:
            if is_on_target(float(val)):
                return "color: #16a34a; font-weight: bold"
        except (ValueError, TypeError):
            pass
        return ""

    if rate_column in df.columns:
        styled = df.style.map(color_rate, subset=[rate_column]).format({rate_column: "{:.1f}"})
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
