"""
Tab switcher for comparing modeling approaches.

One button per registry key selects the entry; the panel below renders the
active entry's title, description and score bars.
"""

from __future__ import annotations

import html
from typing import MutableMapping, Optional

import streamlit as st

from attribution_guide.content import ContentRegistry
from attribution_guide.state import ScoreBar, TabSelection, TabView, get_tab_selection
from attribution_guide.ui.components.formatting import format_percent
from attribution_guide.ui.layout import ACCENT_COLOR, PRIMARY_COLOR

TRACK_COLOR = "#e5e7eb"


def score_bar_html(bar: ScoreBar) -> str:
    color = ACCENT_COLOR if bar.highlight else PRIMARY_COLOR
    return (
        '<div class="ag-score">'
        f'<span class="ag-score-label">{html.escape(bar.label)}</span>'
        f'<span class="ag-score-value">{format_percent(bar.width_pct)}</span>'
        f'<div class="ag-score-track" style="height: 12px; width: 100%; background: {TRACK_COLOR}; '
        'border-radius: 9999px; overflow: hidden;">'
        f'<div class="ag-score-fill" style="height: 12px; width: {bar.width_pct}%; background: {color}; '
        'border-radius: 9999px; transition: width 500ms ease-in-out;"></div>'
        "</div>"
        "</div>"
    )


def tab_panel_html(view: Optional[TabView]) -> str:
    if view is None:
        return ""
    bars = "\n".join(score_bar_html(bar) for bar in view.bars)
    return (
        f'<h4 class="ag-accent">{html.escape(view.title)}</h4>\n'
        f"<p>{html.escape(view.description)}</p>\n"
        f'<div class="ag-scores">\n{bars}\n</div>'
    )


def _select(selection: TabSelection, tab_id: str) -> None:
    selection.select(tab_id)


def render_tab_switcher(
    registry: ContentRegistry,
    session: Optional[MutableMapping] = None,
) -> TabSelection:
    session = st.session_state if session is None else session
    selection = get_tab_selection(session, registry)

    cols = st.columns(len(registry))
    for col, entry in zip(cols, registry):
        with col:
            st.button(
                entry.title,
                key=f"ag_tab_{entry.id}",
                type="primary" if entry.id == selection.active_id else "secondary",
                on_click=_select,
                args=(selection, entry.id),
                use_container_width=True,
            )

    panel = tab_panel_html(selection.view())
    if panel:
        st.markdown(panel, unsafe_allow_html=True)
    return selection
