"""
Plotly chart factory functions with consistent styling for the guide.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from attribution_guide.content import GroupedBarData

DEFAULT_TEMPLATE = "plotly_white"
DEFAULT_COLOR_SEQUENCE = [
    "#ADE8F4",  # light blue for weights
    "#0077B6",  # ocean blue for revenue
    "#FB8500",  # orange accent
    "#023E8A",
]
AXIS_TEXT_COLOR = "#374151"
LEGEND_TEXT_COLOR = "#1f2937"
CATEGORY_COL = "Channel"
SERIES_COL = "Series"
VALUE_COL = "Value"


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    legend_title: Optional[str] = None,
    hovermode: str = "x unified",
    height: Optional[int] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=DEFAULT_COLOR_SEQUENCE,
        title=title,
        legend_title=legend_title,
        hovermode=hovermode,
        height=height,
        margin=dict(l=40, r=20, t=60, b=40),
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="center",
            x=0.5,
            font=dict(color=LEGEND_TEXT_COLOR),
        ),
    )
    fig.update_xaxes(title=xaxis_title, rangemode="tozero", tickfont=dict(color=AXIS_TEXT_COLOR))
    fig.update_yaxes(showgrid=False, title=None, tickfont=dict(color=AXIS_TEXT_COLOR))
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def series_frame(data: GroupedBarData) -> pd.DataFrame:
    """Long-format frame with one row per (series, category) pair."""
    rows = [
        {SERIES_COL: series.name, CATEGORY_COL: category, VALUE_COL: value}
        for series in data.series
        for category, value in zip(data.categories, series.values)
    ]
    return pd.DataFrame(rows, columns=[SERIES_COL, CATEGORY_COL, VALUE_COL])


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    color: Optional[str] = None,
    barmode: str = "group",
    orientation: str = "v",
    title: Optional[str] = None,
    category_orders: Optional[Dict[str, List[str]]] = None,
    color_discrete_map: Optional[Dict[str, str]] = None,
    height: Optional[int] = None,
) -> go.Figure:
    fig = px.bar(
        df,
        x=x,
        y=y,
        color=color,
        barmode=barmode,
        orientation=orientation,
        category_orders=category_orders,
        color_discrete_map=color_discrete_map,
    )
    hovermode = "closest" if orientation == "h" else "x unified"
    fig = _configure_layout(fig, title, hovermode=hovermode, height=height)
    return fig


def power_value_figure(data: GroupedBarData, height: int = 300) -> go.Figure:
    """Horizontal grouped bars: attribution weight next to attributed revenue per channel."""
    df = series_frame(data)
    fig = bar_chart(
        df,
        x=VALUE_COL,
        y=CATEGORY_COL,
        color=SERIES_COL,
        orientation="h",
        category_orders={
            CATEGORY_COL: list(data.categories),
            SERIES_COL: [series.name for series in data.series],
        },
        color_discrete_map={series.name: series.fill_color for series in data.series},
        height=height,
    )
    line_colors = {series.name: series.line_color for series in data.series}
    fig.for_each_trace(
        lambda trace: trace.update(
            marker_line_color=line_colors.get(trace.name),
            marker_line_width=2,
            hovertemplate="<b>%{y}</b><br>" + trace.name + ": %{x}<extra></extra>",
        )
    )
    fig.update_layout(legend_title_text="")
    # First category on top, matching reading order
    fig.update_yaxes(autorange="reversed")
    return fig
