"""Tab 3: Public health allocation tradeoffs — Laffer curve and breadth/depth frontier."""

import streamlit as st

from components.metrics_cards import render_metric_row
from components.charts import curve_chart
from engine.tradeoffs import tradeoff
from engine.explainer import describe_breadth
from config.defaults import DEFAULT_BREADTH_PCT, DEFAULT_TAX_PCT


def render():
    """Render the tradeoffs tab."""
    st.header("Public Health Allocation Tradeoffs")
    st.caption(
        "A conceptual toy model of tradeoffs under scarcity: tax rate drives revenue along a hump-shaped "
        "Laffer curve, and breadth spreads a fixed budget across more people with less help each. "
        "Use it as a conversation aid, not a forecast."
    )

    col1, col2 = st.columns(2)
    with col1:
        breadth = st.slider("Service distribution (breadth)", 0, 100, DEFAULT_BREADTH_PCT, key="tradeoff_breadth")
        st.caption(describe_breadth(breadth))
    with col2:
        tax = st.slider("Tax rate (%)", 0, 100, DEFAULT_TAX_PCT, key="tradeoff_tax")

    result = tradeoff(breadth, tax)
    out = result.outputs

    render_metric_row([
        {"label": "Estimated tax revenue (Laffer)", "value": f"{out.tax_revenue:.2f} units"},
        {"label": "People served (relative)", "value": f"{out.people_served:.0f} people"},
        {"label": "Average help per person", "value": f"{out.help_per_person:.3f} units/person"},
        {"label": "Total impact score", "value": f"{out.impact_score:.1f} impact units"},
    ])

    col1, col2 = st.columns(2)
    with col1:
        fig = curve_chart(
            result.revenue_curve,
            marker_x=result.inputs.tax_fraction,
            marker_y=out.tax_revenue,
            title="Laffer curve: tax rate vs tax revenue",
            x_label="Tax rate",
            y_label="Tax revenue",
            marker_text=f"({tax}%, {out.tax_revenue:.2f})",
            show_peak=True,
        )
        st.plotly_chart(fig, use_container_width=True)
    with col2:
        fig = curve_chart(
            result.allocation_curve,
            marker_x=result.inputs.breadth_fraction,
            marker_y=out.help_per_person,
            title="Allocation frontier: breadth vs help per person",
            x_label="Concentrated (few, deep) → Broad (many, shallow)",
            y_label="Average help per person",
            marker_text=f"({breadth}%, {out.help_per_person:.3f})",
        )
        st.plotly_chart(fig, use_container_width=True)

    with st.expander("How is this calculated?"):
        for step in result.explanation_steps:
            st.markdown(f"- {step}")
