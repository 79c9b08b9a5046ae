from __future__ import annotations

from dataclasses import dataclass
from typing import MutableMapping

from attribution_guide.config import GuideSettings, SectionConfig
from attribution_guide.content import ContentRegistry


@dataclass
class PageContext:
    settings: GuideSettings
    registry: ContentRegistry
    session: MutableMapping
    section: SectionConfig
