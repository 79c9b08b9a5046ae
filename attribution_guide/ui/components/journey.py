from __future__ import annotations

import html
from typing import Sequence

import streamlit as st

from attribution_guide.content import JourneyStep

ARROW = "↓"


def journey_flow_html(title: str, steps: Sequence[JourneyStep], caption: str = "") -> str:
    items = []
    for idx, step in enumerate(steps):
        if idx:
            items.append(f'<div class="ag-journey-arrow">{ARROW}</div>')
        items.append(f'<div class="ag-journey-step">{html.escape(step.label)}</div>')
    body = "\n".join(items)
    caption_html = f'<p class="ag-journey-caption">{html.escape(caption)}</p>' if caption else ""
    return (
        '<div class="ag-journey">\n'
        f'<h4 class="ag-accent">{html.escape(title)}</h4>\n'
        f"{body}\n"
        f"{caption_html}\n"
        "</div>"
    )


def render_journey_flow(title: str, steps: Sequence[JourneyStep], caption: str = "") -> None:
    st.markdown(journey_flow_html(title, steps, caption), unsafe_allow_html=True)
