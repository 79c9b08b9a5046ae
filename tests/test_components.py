"""Tests for formatting helpers and HTML fragments rendered by components."""

import pytest

from attribution_guide.content import HEADLINE_STATS, JOURNEY_STEPS, MODEL_REGISTRY, PLAYBOOK_INSIGHTS
from attribution_guide.state import AccordionState, ScoreBar, estimate_content_height, tab_view
from attribution_guide.ui.components.accordion import accordion_body_html, header_label
from attribution_guide.ui.components.formatting import format_currency, format_number, format_percent
from attribution_guide.ui.components.journey import journey_flow_html
from attribution_guide.ui.components.kpi import StatCard, format_card_value
from attribution_guide.ui.components.tabs import score_bar_html, tab_panel_html
from attribution_guide.ui.layout import ACCENT_COLOR, PRIMARY_COLOR


class TestFormatting:
    """Test number formatting."""

    def test_plain_number(self):
        assert format_number(1234.5, decimals=1) == "1,234.5"

    def test_compact_long_suffix(self):
        assert format_number(1_200_000, decimals=1, compact=True, long_suffix=True) == "1.2 Million"

    def test_currency_symbol(self):
        assert format_currency(4_500_000, currency="$", decimals=1) == "$4.5M"

    def test_currency_code(self):
        assert format_currency(2_000, currency="USD") == "USD 2K"

    @pytest.mark.parametrize("value", [None, "n/a"])
    def test_missing_values(self, value):
        assert format_number(value) == "–"
        assert format_currency(value) == "–"

    def test_percent(self):
        assert format_percent(60) == "60%"


class TestStatCards:
    """Test stat card values."""

    def test_headline_values(self):
        values = [format_card_value(StatCard.from_figure(figure)) for figure in HEADLINE_STATS]
        assert values == ["1.2 Million", "Sales Calls", "$4.5M"]


class TestTabPanel:
    """Test the tab panel markup."""

    def test_bar_width_follows_percent(self):
        html = score_bar_html(ScoreBar("Accuracy", 60, highlight=False))
        assert "width: 60%" in html
        assert PRIMARY_COLOR in html

    def test_highlight_color(self):
        html = score_bar_html(ScoreBar("Complexity", 95, highlight=True))
        assert ACCENT_COLOR in html

    @pytest.mark.parametrize("tab_id", MODEL_REGISTRY.keys())
    def test_panel_contains_entry(self, tab_id):
        entry = MODEL_REGISTRY.get(tab_id)
        html = tab_panel_html(tab_view(MODEL_REGISTRY, tab_id))

        assert entry.title in html
        assert entry.description in html
        assert html.count('class="ag-score-fill"') == len(entry.scores)
        for score in entry.scores:
            assert f"width: {score.percent}%" in html

    def test_empty_view_renders_nothing(self):
        assert tab_panel_html(None) == ""

    def test_text_is_escaped(self):
        html = score_bar_html(ScoreBar("<b>x</b>", 10, highlight=False))
        assert "<b>x</b>" not in html


class TestAccordionMarkup:
    """Test accordion header and body markup."""

    def test_header_marker_follows_state(self):
        state = AccordionState()
        assert header_label("Insight", state).endswith("+")
        state.toggle()
        assert header_label("Insight", state).endswith("×")

    def test_body_animates_to_measured_height(self):
        html = accordion_body_html(["Body text"], measured_height=96, heading="Recommendation:")
        assert "from { max-height: 0px; } to { max-height: 96px; }" in html
        assert "300ms" in html
        assert "Recommendation:" in html
        assert "Body text" in html

    def test_expanded_body_rests_uncapped(self):
        insight = PLAYBOOK_INSIGHTS[1]
        measured = estimate_content_height(["Recommendation:", insight.recommendation])
        # A phone-width column wraps to more lines than the measurement assumed
        narrow = estimate_content_height(["Recommendation:", insight.recommendation], chars_per_line=40)
        assert narrow > measured

        html = accordion_body_html([insight.recommendation], measured_height=measured, heading="Recommendation:")
        body_style = html.split('class="ag-accordion-body" style="', 1)[1].split('"', 1)[0]
        assert "max-height: none" in body_style
        assert f"max-height: {measured}px" not in body_style

    def test_collapsed_body_animates_back_to_zero(self):
        html = accordion_body_html(["Body text"], measured_height=96, expanded=False)
        assert "@keyframes ag-collapse-96 { from { max-height: 96px; } to { max-height: 0px; } }" in html
        body_style = html.split('class="ag-accordion-body" style="', 1)[1].split('"', 1)[0]
        assert "max-height: 0px" in body_style
        assert "animation: ag-collapse-96 300ms" in body_style


class TestJourneyFlow:
    """Test the journey flow markup."""

    def test_steps_joined_by_arrows(self):
        html = journey_flow_html("Flow", JOURNEY_STEPS, caption="Caption")
        assert html.count('class="ag-journey-step"') == 3
        assert html.count('class="ag-journey-arrow"') == 2
        assert "Social (Opener)" in html
        assert "Sales Call (Closer)" in html
