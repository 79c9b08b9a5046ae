import attribution_guide.bootstrap_env  # must be first to set env/secrets and logging
import streamlit as st
from loguru import logger

from attribution_guide.config import SECTIONS, load_settings
from attribution_guide.content import MODEL_REGISTRY
from attribution_guide.ui.layout import setup_page
from attribution_guide.ui.pages import (
    header,
    so_what,
    story,
    playbook,
    future_proofing,
    footer,
)
from attribution_guide.ui.pages.context import PageContext


SECTION_RENDERERS = {
    "header": header.render,
    "so_what": so_what.render,
    "story": story.render,
    "playbook": playbook.render,
    "future_proofing": future_proofing.render,
    "footer": footer.render,
}


def main() -> None:
    settings = load_settings()
    setup_page(settings)

    for section in SECTIONS:
        renderer = SECTION_RENDERERS.get(section.key)
        if renderer is None:
            logger.warning("No renderer registered for section '{}'", section.key)
            continue
        context = PageContext(
            settings=settings,
            registry=MODEL_REGISTRY,
            session=st.session_state,
            section=section,
        )
        renderer(context)


if __name__ == "__main__":
    main()
