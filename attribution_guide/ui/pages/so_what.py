from __future__ import annotations

from attribution_guide.content import HEADLINE_STATS
from attribution_guide.ui.components.kpi import StatCard, render_stat_cards
from attribution_guide.ui.layout import section_heading
from attribution_guide.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    section_heading(context.section.label)
    cards = [StatCard.from_figure(figure) for figure in HEADLINE_STATS]
    render_stat_cards(cards, columns=3)
