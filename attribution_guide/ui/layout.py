"""
Layout helpers for the Streamlit application (page config, theme, section headings).
"""

from __future__ import annotations

import html
from typing import Optional

import streamlit as st

from attribution_guide.config import GuideSettings

PRIMARY_COLOR = "#0077B6"
HEADING_COLOR = "#023E8A"
ACCENT_COLOR = "#FB8500"
PAGE_BACKGROUND = "#f0f9ff"


def setup_page(settings: GuideSettings) -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title=settings.page_title,
        layout="centered",
        page_icon=":bar_chart:",
    )
    _inject_guide_styles()
    if settings.force_light_theme:
        _inject_light_theme()


def section_heading(title: str, subtitle: Optional[str] = None) -> None:
    st.markdown(
        f'<h2 class="ag-section-title">{html.escape(title)}</h2>',
        unsafe_allow_html=True,
    )
    if subtitle:
        st.markdown(
            f'<p class="ag-section-subtitle">{html.escape(subtitle)}</p>',
            unsafe_allow_html=True,
        )


def _inject_guide_styles() -> None:
    st.markdown(
        f"""
        <style>
        .ag-section-title {{ text-align: center; font-weight: 700; margin-top: 3rem; }}
        .ag-section-subtitle {{ text-align: center; color: #4b5563; margin-bottom: 2rem; }}
        .ag-accent {{ color: {PRIMARY_COLOR}; }}
        .ag-score {{ margin-bottom: 1rem; }}
        .ag-score-label {{ font-size: 0.875rem; font-weight: 600; color: #374151; }}
        .ag-score-value {{ float: right; font-size: 0.875rem; color: #6b7280; }}
        .ag-journey {{ background: #ADE8F4; padding: 1.5rem; border-radius: 0.5rem; text-align: center; }}
        .ag-journey-step {{
            font-weight: 600; background: #ffffff; padding: 0.5rem; border-radius: 0.375rem;
            width: 12rem; margin: 0 auto; color: #1f2937; box-shadow: 0 1px 3px rgba(0,0,0,0.1);
        }}
        .ag-journey-arrow {{ font-size: 1.5rem; color: {PRIMARY_COLOR}; }}
        .ag-journey-caption {{ font-size: 0.875rem; margin-top: 1rem; color: {HEADING_COLOR}; }}
        .ag-considerations {{ display: flex; flex-wrap: wrap; justify-content: center; gap: 2rem; color: #4b5563; }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def _inject_light_theme() -> None:
    """Pin the light palette even when the viewer's system prefers dark mode.

    ``.streamlit/config.toml`` sets ``base = "light"``; this override covers
    viewers who switch theme from the app menu.
    """
    st.markdown(
        f"""
        <style>
        :root {{ color-scheme: light; }}
        [data-testid="stAppViewContainer"], [data-testid="stHeader"] {{
            background-color: {PAGE_BACKGROUND} !important;
            color: #1f2937 !important;
        }}
        [data-testid="stVerticalBlockBorderWrapper"] {{ background-color: #ffffff; }}
        </style>
        """,
        unsafe_allow_html=True,
    )
