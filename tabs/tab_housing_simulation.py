"""Tab 2: Permanent Supportive Housing simulation — occupancy and budget over a decade."""

import streamlit as st

from models.housing import SimulationParameters, SimulationResult
from components.metrics_cards import render_metric_row, occupancy_metric
from components.charts import occupancy_chart
from components.tables import render_trace_table
from engine.housing_simulator import simulate
from engine.summary import extract_summary, trace_to_frame
from engine.explainer import describe_growth, describe_inflow, describe_stay_length
from config.defaults import (
    INITIAL_UNITS, ON_TARGET_MIN_PCT, ON_TARGET_MAX_PCT,
    HOUSING_COST_SLIDER, GROWTH_RATE_SLIDER, MONTHLY_INFLOW_SLIDER, STAY_LENGTH_SLIDER,
)


@st.cache_data
def run_simulation(
    monthly_inflow: int,
    stay_length_years: float,
    annual_growth_rate_pct: float,
) -> SimulationResult:
    """Memoized on the parameter tuple; housing cost is applied afterwards and never invalidates it."""
    return simulate(SimulationParameters(
        initial_units=INITIAL_UNITS,
        monthly_inflow=monthly_inflow,
        stay_length_years=stay_length_years,
        annual_growth_rate_pct=annual_growth_rate_pct,
    ))


def _slider(label, spec, key, fmt=None):
    lo, hi, step, default = spec
    return st.slider(label, min_value=lo, max_value=hi, value=default, step=step, key=key, format=fmt)


def render():
    """Render the housing simulation tab."""
    st.header("Permanent Supportive Housing Simulation")
    st.caption(
        "Explore how changing permanent supportive housing inventory, inflow, and average length of stay "
        f"affect occupancy and budget needs over a decade. Target vacancy is 7%, so occupancy rates between "
        f"{ON_TARGET_MIN_PCT:g}% and {ON_TARGET_MAX_PCT:g}% count as on target."
    )

    col1, col2 = st.columns(2)
    with col1:
        housing_cost = _slider("Housing Cost per Unit ($)", HOUSING_COST_SLIDER, "psh_cost")
        growth = _slider("Annual Housing Growth Rate (%)", GROWTH_RATE_SLIDER, "psh_growth", "%.1f")
        st.caption(describe_growth(growth, INITIAL_UNITS))
    with col2:
        inflow = _slider("Monthly Inflow", MONTHLY_INFLOW_SLIDER, "psh_inflow")
        st.caption(describe_inflow(inflow))
        stay = _slider("Average Length of Stay (years)", STAY_LENGTH_SLIDER, "psh_stay", "%.1f")
        st.caption(describe_stay_length(stay))

    result = run_simulation(inflow, stay, growth)
    summary = extract_summary(result.trace, housing_cost, INITIAL_UNITS)
    availability = result.availability

    st.divider()

    render_metric_row([
        occupancy_metric("Month 1 Occupancy", summary.month1_occupancy_rate),
        occupancy_metric("Year 10 Occupancy", summary.year10_occupancy_rate),
        {"label": "Year 1 Budget", "value": f"${summary.year1_budget:,}"},
        {"label": "Year 10 Budget", "value": f"${summary.year10_budget:,}",
         "delta": f"{summary.year10_budget - summary.year1_budget:+,}", "delta_color": "off"},
    ])

    render_metric_row([
        {"label": "Cumulative available units (10 yrs)",
         "value": f"{availability.cumulative_available_units:,}"},
        {"label": "Month 1 gap to target",
         "value": f"{availability.month1_available_units:,}",
         "delta": f"{availability.month1_annual_available:,} annualized", "delta_color": "off"},
        {"label": "Year 10 gap to target",
         "value": f"{availability.year10_available_units:,}",
         "delta": f"{availability.year10_annual_available:,} annualized", "delta_color": "off"},
    ])

    df = trace_to_frame(result.trace)
    st.plotly_chart(occupancy_chart(df), use_container_width=True)

    with st.expander("Monthly detail"):
        render_trace_table(df)
