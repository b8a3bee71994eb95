"""Plotly chart builders for the Policy Models app."""

import plotly.graph_objects as go
import pandas as pd
from plotly.subplots import make_subplots

from models.tradeoff import CurveSample


def occupancy_chart(df: pd.DataFrame, title: str = "Units and Occupancy over 10 Years") -> go.Figure:
    """Units / occupied units on the left axis, occupancy % on the right, one point per year."""
    yearly = df.groupby("year", as_index=False).last()

    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(go.Scatter(
        x=yearly["year"], y=yearly["units"],
        name="Total units", mode="lines+markers", line_color="#4A90D9",
    ), secondary_y=False)
    fig.add_trace(go.Scatter(
        x=yearly["year"], y=yearly["occupied"],
        name="Occupied units", mode="lines+markers", line_color="#E8734A",
    ), secondary_y=False)
    fig.add_trace(go.Scatter(
        x=yearly["year"], y=yearly["occupancy_rate"],
        name="Occupancy %", mode="lines", line=dict(color="#16a34a", dash="dot"),
    ), secondary_y=True)

    fig.update_layout(
        title=title,
        height=420,
        hovermode="x unified",
        legend_title_text="",
    )
    fig.update_xaxes(title_text="Years")
    fig.update_yaxes(title_text="Units", tickformat=",", secondary_y=False)
    fig.update_yaxes(title_text="Occupancy %", secondary_y=True)
    return fig


def curve_chart(
    sample: CurveSample,
    marker_x: float,
    marker_y: float,
    title: str,
    x_label: str,
    y_label: str,
    marker_text: str = "",
    show_peak: bool = False,
) -> go.Figure:
    """Line chart of a sampled curve, normalized to its sampled peak, with the current position marked."""
    df = sample.to_frame()
    df["y_norm"] = df["y"].map(sample.normalized)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df["x"], y=df["y_norm"],
        mode="lines", line=dict(color="#4A90D9", width=2),
        customdata=df["y"],
        hovertemplate="x: %{x:.0%}<br>y: %{customdata:.3f}<extra></extra>",
        showlegend=False,
    ))

    fig.add_vline(x=marker_x, line_width=1, line_color="#aab3c2")
    fig.add_trace(go.Scatter(
        x=[marker_x], y=[sample.normalized(marker_y)],
        mode="markers+text", marker=dict(size=10, color="#E8734A"),
        text=[marker_text], textposition="top right",
        showlegend=False,
    ))

    if show_peak:
        fig.add_trace(go.Scatter(
            x=[sample.peak_x], y=[sample.normalized(sample.peak_value)],
            mode="markers+text", marker=dict(size=8, color="#aab3c2"),
            text=["Peak revenue"], textposition="top center",
            showlegend=False,
        ))

    fig.update_layout(
        title=title,
        xaxis_title=x_label,
        yaxis_title=y_label,
        height=360,
    )
    fig.update_xaxes(range=[0, 1], tickformat=".0%")
    fig.update_yaxes(range=[0, 1.1], showticklabels=False)
    return fig
