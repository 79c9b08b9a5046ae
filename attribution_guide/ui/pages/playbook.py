from __future__ import annotations

from attribution_guide.content import PLAYBOOK_INSIGHTS
from attribution_guide.ui.components.accordion import render_accordion_item
from attribution_guide.ui.layout import section_heading
from attribution_guide.ui.pages.context import PageContext

SUBTITLE = "Convert each key insight into a concrete, testable recommendation. Click to expand."


def render(context: PageContext) -> None:
    section_heading(context.section.label, SUBTITLE)
    for insight in PLAYBOOK_INSIGHTS:
        render_accordion_item(
            key=insight.key,
            title=insight.title,
            paragraphs=[insight.recommendation],
            heading="Recommendation:",
            session=context.session,
        )
