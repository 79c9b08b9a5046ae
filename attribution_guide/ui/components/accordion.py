"""
Expandable accordion item backed by :class:`AccordionState`.

The header is a Streamlit button; the body is HTML that animates its
``max-height`` between zero and the measured content height in both
directions.
"""

from __future__ import annotations

import html
from typing import MutableMapping, Optional, Sequence

import streamlit as st
from loguru import logger

from attribution_guide.state import AccordionState, estimate_content_height, get_accordion_state

TRANSITION_MS = 300
OPEN_MARKER = "×"
CLOSED_MARKER = "+"


def header_label(title: str, state: AccordionState) -> str:
    marker = OPEN_MARKER if state.is_open else CLOSED_MARKER
    return f"{title}  {marker}"


def accordion_body_html(
    paragraphs: Sequence[str],
    measured_height: int,
    heading: Optional[str] = None,
    expanded: bool = True,
    duration_ms: int = TRANSITION_MS,
) -> str:
    """Body markup that animates between zero and ``measured_height``.

    The measured height is only the keyframe endpoint. An expanded body rests
    uncapped (``max-height: none``) so text that wraps more than measured
    stays visible; a collapsed body rests at zero.
    """
    if expanded:
        animation = f"ag-reveal-{measured_height}"
        frames = f"from {{ max-height: 0px; }} to {{ max-height: {measured_height}px; }}"
        resting = "none"
    else:
        animation = f"ag-collapse-{measured_height}"
        frames = f"from {{ max-height: {measured_height}px; }} to {{ max-height: 0px; }}"
        resting = "0px"
    parts = [
        "<style>",
        f"@keyframes {animation} {{ {frames} }}",
        "</style>",
        (
            f'<div class="ag-accordion-body" style="overflow: hidden; max-height: {resting}; '
            f'animation: {animation} {duration_ms}ms ease-in-out;">'
        ),
    ]
    if heading:
        parts.append(f'<p class="ag-accent"><strong>{html.escape(heading)}</strong></p>')
    parts.extend(f"<p>{html.escape(text)}</p>" for text in paragraphs)
    parts.append("</div>")
    return "\n".join(parts)


def _toggle(state: AccordionState, key: str, paragraphs: Sequence[str]) -> None:
    is_open = state.toggle(measure=lambda: estimate_content_height(paragraphs))
    logger.debug("Accordion '{}' {}", key, "expanded" if is_open else "collapsed")


def render_accordion_item(
    key: str,
    title: str,
    paragraphs: Sequence[str],
    heading: Optional[str] = None,
    session: Optional[MutableMapping] = None,
) -> AccordionState:
    session = st.session_state if session is None else session
    state = get_accordion_state(session, key)
    measured = [heading, *paragraphs] if heading else list(paragraphs)

    with st.container(border=True):
        st.button(
            header_label(title, state),
            key=f"ag_accordion_btn_{key}",
            on_click=_toggle,
            args=(state, key, measured),
            use_container_width=True,
        )
        # Never-opened items have no measured height and nothing to collapse
        if state.measured_height is not None:
            st.markdown(
                accordion_body_html(
                    paragraphs,
                    state.measured_height,
                    heading=heading,
                    expanded=state.is_open,
                ),
                unsafe_allow_html=True,
            )
    return state
