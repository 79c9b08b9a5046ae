"""
UI state for the interactive widgets: the model tab switcher and the playbook
accordion items.

State objects are plain Python so they can be driven from tests with a dict
standing in for ``st.session_state``.
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from typing import Callable, List, MutableMapping, Optional, Sequence, Tuple

from loguru import logger

from attribution_guide.content import ContentRegistry, TabEntry

HIGHLIGHT_THRESHOLD = 80
TAB_SELECTION_KEY = "ag_tab_selection"
ACCORDION_KEY_PREFIX = "ag_accordion_"


@dataclass(frozen=True)
class ScoreBar:
    label: str
    width_pct: int
    highlight: bool


@dataclass(frozen=True)
class TabView:
    title: str
    description: str
    bars: Tuple[ScoreBar, ...]


def tab_view(registry: ContentRegistry, active_id: str) -> Optional[TabView]:
    """Derive the panel view for ``active_id``; unknown identifiers yield ``None``."""
    entry = registry.get(active_id)
    if entry is None:
        return None
    bars = tuple(
        ScoreBar(
            label=score.label,
            width_pct=score.percent,
            highlight=score.percent > HIGHLIGHT_THRESHOLD,
        )
        for score in entry.scores
    )
    return TabView(title=entry.title, description=entry.description, bars=bars)


class TabSelection:
    def __init__(self, registry: ContentRegistry, active_id: Optional[str] = None):
        self.registry = registry
        self.active_id = registry.default_id
        if active_id is not None:
            self.select(active_id)

    def select(self, tab_id: str) -> bool:
        if tab_id not in self.registry:
            logger.warning("Ignoring selection of unknown tab '{}'", tab_id)
            return False
        if tab_id != self.active_id:
            logger.debug("Tab selection changed: {} -> {}", self.active_id, tab_id)
        self.active_id = tab_id
        return True

    @property
    def active_entry(self) -> TabEntry:
        # select() only admits registry keys
        return self.registry.get(self.active_id)  # type: ignore[return-value]

    def view(self) -> Optional[TabView]:
        return tab_view(self.registry, self.active_id)


class AccordionState:
    """Collapsed/expanded toggle with a measured reveal height.

    The content extent is measured once, on the first reveal, and reused for
    every later expansion. While collapsed the target height is zero.
    """

    def __init__(self, is_open: bool = False):
        self.is_open = is_open
        self.measured_height: Optional[int] = None

    def toggle(self, measure: Optional[Callable[[], int]] = None) -> bool:
        self.is_open = not self.is_open
        if self.is_open and self.measured_height is None and measure is not None:
            self.measured_height = int(measure())
        return self.is_open

    @property
    def target_height(self) -> int:
        if not self.is_open:
            return 0
        return self.measured_height or 0


def get_tab_selection(session: MutableMapping, registry: ContentRegistry) -> TabSelection:
    selection = session.get(TAB_SELECTION_KEY)
    if not isinstance(selection, TabSelection) or selection.registry is not registry:
        selection = TabSelection(registry)
        session[TAB_SELECTION_KEY] = selection
    return selection


def get_accordion_state(session: MutableMapping, key: str) -> AccordionState:
    state_key = f"{ACCORDION_KEY_PREFIX}{key}"
    state = session.get(state_key)
    if not isinstance(state, AccordionState):
        state = AccordionState()
        session[state_key] = state
    return state


def estimate_content_height(
    paragraphs: Sequence[str],
    chars_per_line: int = 80,
    line_height: int = 24,
    paragraph_gap: int = 8,
    padding: int = 20,
) -> int:
    """Natural pixel height of ``paragraphs`` once wrapped to ``chars_per_line``."""
    lines: List[str] = []
    for text in paragraphs:
        lines.extend(textwrap.wrap(text, width=chars_per_line) or [""])
    gaps = max(len(paragraphs) - 1, 0) * paragraph_gap
    return len(lines) * line_height + gaps + padding
