"""Tests for tab selection and accordion state machines."""

import pytest

from attribution_guide.content import MODEL_REGISTRY
from attribution_guide.state import (
    TAB_SELECTION_KEY,
    AccordionState,
    TabSelection,
    estimate_content_height,
    get_accordion_state,
    get_tab_selection,
    tab_view,
)


class TestTabView:
    """Test derived panel views."""

    @pytest.mark.parametrize("tab_id", MODEL_REGISTRY.keys())
    def test_view_matches_entry(self, tab_id):
        entry = MODEL_REGISTRY.get(tab_id)
        view = tab_view(MODEL_REGISTRY, tab_id)

        assert view.title == entry.title
        assert view.description == entry.description
        assert len(view.bars) == len(entry.scores)
        for bar, score in zip(view.bars, entry.scores):
            assert bar.label == score.label
            assert bar.width_pct == score.percent

    def test_highlight_above_threshold(self):
        view = tab_view(MODEL_REGISTRY, "rnn")
        assert [bar.highlight for bar in view.bars] == [True, True, True]

        view = tab_view(MODEL_REGISTRY, "first-order")
        assert not any(bar.highlight for bar in view.bars)

    def test_unknown_id_renders_nothing(self):
        assert tab_view(MODEL_REGISTRY, "does-not-exist") is None


class TestTabSelection:
    """Test the active tab state."""

    def test_defaults_to_first_entry(self):
        selection = TabSelection(MODEL_REGISTRY)
        assert selection.active_id == "first-order"
        assert selection.active_entry.title == "First-Order Markov"

    def test_select_known_id(self):
        selection = TabSelection(MODEL_REGISTRY)
        assert selection.select("higher-order") is True
        assert selection.active_id == "higher-order"
        assert selection.view().title == "Higher-Order Markov"

    def test_select_unknown_keeps_current(self):
        selection = TabSelection(MODEL_REGISTRY, active_id="rnn")
        assert selection.select("bogus") is False
        assert selection.active_id == "rnn"

    def test_session_binding_reuses_selection(self):
        session = {}
        first = get_tab_selection(session, MODEL_REGISTRY)
        first.select("rnn")

        again = get_tab_selection(session, MODEL_REGISTRY)
        assert again is first
        assert session[TAB_SELECTION_KEY].active_id == "rnn"


class TestAccordionState:
    """Test the collapse/expand toggle."""

    def test_starts_collapsed(self):
        state = AccordionState()
        assert state.is_open is False
        assert state.target_height == 0

    @pytest.mark.parametrize("toggles", range(1, 7))
    def test_toggle_parity(self, toggles):
        state = AccordionState()
        for _ in range(toggles):
            state.toggle()
        assert state.is_open is (toggles % 2 == 1)

    def test_measures_on_first_reveal_only(self):
        calls = []

        def measure():
            calls.append(1)
            return 120

        state = AccordionState()
        state.toggle(measure)
        assert state.target_height == 120

        state.toggle(measure)
        assert state.target_height == 0

        state.toggle(measure)
        assert state.target_height == 120
        assert len(calls) == 1

    def test_items_toggle_independently(self):
        session = {}
        display = get_accordion_state(session, "display")
        email = get_accordion_state(session, "email")

        display.toggle()

        assert get_accordion_state(session, "display").is_open is True
        assert get_accordion_state(session, "email").is_open is False
        assert display is not email

    def test_fresh_session_resets(self):
        session = {}
        get_accordion_state(session, "display").toggle()
        assert get_accordion_state({}, "display").is_open is False


class TestContentHeight:
    """Test natural content height measurement."""

    def test_single_line(self):
        assert estimate_content_height(["short"], line_height=24, padding=20) == 44

    def test_wrapping_adds_lines(self):
        text = "word " * 40
        one_line = estimate_content_height(["word"], chars_per_line=80)
        wrapped = estimate_content_height([text], chars_per_line=80)
        assert wrapped > one_line

    def test_paragraph_gaps(self):
        height = estimate_content_height(["a", "b"], line_height=10, paragraph_gap=5, padding=0)
        assert height == 25
