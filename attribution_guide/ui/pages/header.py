from __future__ import annotations

import html

import streamlit as st

from attribution_guide.content import PAGE_HEADLINE, PAGE_SUBTITLE
from attribution_guide.ui.layout import HEADING_COLOR
from attribution_guide.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    st.markdown(
        f'<h1 style="text-align: center; color: {HEADING_COLOR};">{html.escape(PAGE_HEADLINE)}</h1>'
        f'<p class="ag-section-subtitle">{html.escape(PAGE_SUBTITLE)}</p>',
        unsafe_allow_html=True,
    )
