from __future__ import annotations

import html

import streamlit as st

from attribution_guide.content import KEY_CONSIDERATIONS
from attribution_guide.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    st.divider()
    items = "".join(f"<p>✓ {html.escape(text)}</p>" for text in KEY_CONSIDERATIONS)
    st.markdown(
        f'<h3 style="text-align: center;">{html.escape(context.section.label)}</h3>'
        f'<div class="ag-considerations">{items}</div>',
        unsafe_allow_html=True,
    )
