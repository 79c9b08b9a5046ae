"""
Bootstrap environment for Streamlit Cloud & local dev:
- Flatten st.secrets into uppercase os.environ keys (nested -> PREFIX_CHILD)
- Load .env (without overriding existing env vars)
- Configure the loguru sink from the resulting settings
"""

from __future__ import annotations

import os
import re
import sys
from typing import Iterator, Optional, Tuple

import streamlit as st
from dotenv import load_dotenv
from loguru import logger

from attribution_guide.config import GuideSettings, load_settings

_LOGGING_CONFIGURED = False


def _sanitize_key(key: str) -> str:
    # Uppercase and replace non-alphanumeric with underscores
    return re.sub(r"[^A-Za-z0-9_]", "_", key.upper())


def _flatten_secrets(prefix: str, val) -> Iterator[Tuple[str, str]]:
    if isinstance(val, dict):
        for k, v in val.items():
            yield from _flatten_secrets(f"{prefix}_{k}", v)
    else:
        yield _sanitize_key(prefix), str(val)


def _bridge_secrets_to_env() -> Optional[str]:
    """Copy secrets into os.environ; return why secrets were skipped, if they were."""
    try:
        secrets_dict = st.secrets.to_dict()
    except Exception as exc:  # StreamlitSecretNotFoundError outside Streamlit Cloud
        return f"Streamlit secrets unavailable: {exc}"

    for key, value in secrets_dict.items():
        for flat_k, flat_v in _flatten_secrets(key, value):
            os.environ.setdefault(flat_k, flat_v)
    return None


def configure_logging(level: str) -> None:
    """Replace loguru's default sink with a stderr sink at ``level``."""
    global _LOGGING_CONFIGURED
    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} | {level: <8} | {name}:{line} - {message}")
    _LOGGING_CONFIGURED = True


def ensure_env() -> GuideSettings:
    """Idempotent: make sure env vars are available and logging is configured.
    Safe to call multiple times, both inside and outside Streamlit runtime.
    """
    skipped = _bridge_secrets_to_env()
    # load_dotenv will not override existing env vars by default
    load_dotenv()
    settings = load_settings()
    if not _LOGGING_CONFIGURED:
        configure_logging(settings.log_level)
    # Logged only once the configured sink is in place
    if skipped:
        logger.debug(skipped)
    return settings


# Execute on import for Streamlit main process, but also allow explicit calls elsewhere.
ensure_env()
