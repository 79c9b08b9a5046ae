from __future__ import annotations

import streamlit as st

from attribution_guide.ui.components.tabs import render_tab_switcher
from attribution_guide.ui.layout import section_heading
from attribution_guide.ui.pages.context import PageContext

SUBTITLE = "Understand the trade-offs when considering more advanced attribution models."


def render(context: PageContext) -> None:
    section_heading(context.section.label, SUBTITLE)
    with st.container(border=True):
        render_tab_switcher(context.registry, session=context.session)
