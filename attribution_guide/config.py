"""
Application-wide configuration constants and environment-driven settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Mapping, Optional

from loguru import logger

ENV_PREFIX = "ATTRIBUTION_GUIDE_"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SectionConfig:
    key: str
    label: str


# Ordered sections of the guide, rendered top to bottom
SECTIONS: List[SectionConfig] = [
    SectionConfig("header", "Header"),
    SectionConfig("so_what", "Start with the \"So What?\""),
    SectionConfig("story", "The 3-Act Story: How to Present Your Findings"),
    SectionConfig("playbook", "The Actionable Playbook"),
    SectionConfig("future_proofing", "Future-Proofing Your Strategy"),
    SectionConfig("footer", "Key Considerations"),
]


@dataclass(frozen=True)
class GuideSettings:
    page_title: str = "The Art of Attribution"
    log_level: str = "INFO"
    force_light_theme: bool = True


def _parse_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in TRUTHY


def _parse_log_level(raw: Optional[str], default: str) -> str:
    if not raw:
        return default
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Unknown log level {!r}, using {}", raw, default)
        return default
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> GuideSettings:
    """Read settings from ``environ`` (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ
    defaults = GuideSettings()
    return GuideSettings(
        page_title=env.get(f"{ENV_PREFIX}PAGE_TITLE") or defaults.page_title,
        log_level=_parse_log_level(env.get(f"{ENV_PREFIX}LOG_LEVEL"), defaults.log_level),
        force_light_theme=_parse_bool(env.get(f"{ENV_PREFIX}FORCE_LIGHT"), defaults.force_light_theme),
    )
