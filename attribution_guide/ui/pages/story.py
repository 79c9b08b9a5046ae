from __future__ import annotations

import streamlit as st

from attribution_guide import content
from attribution_guide.ui.components.charts import power_value_figure, render_plotly
from attribution_guide.ui.components.journey import render_journey_flow
from attribution_guide.ui.layout import section_heading
from attribution_guide.ui.pages.context import PageContext

SUBTITLE = (
    "Structure your presentation as a compelling narrative to guide your "
    "audience from data to decision."
)


def render(context: PageContext) -> None:
    section_heading(context.section.label, SUBTITLE)

    col_chart, col_flow = st.columns(2, gap="large")
    with col_chart.container(border=True):
        st.subheader(content.POWER_VALUE_HEADING)
        st.write(content.POWER_VALUE_COPY)
        render_plotly(power_value_figure(content.POWER_VALUE_CHART))
    with col_flow.container(border=True):
        st.subheader(content.JOURNEY_HEADING)
        st.write(content.JOURNEY_COPY)
        render_journey_flow(content.JOURNEY_TITLE, content.JOURNEY_STEPS, content.JOURNEY_CAPTION)
