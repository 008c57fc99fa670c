import json
import logging
import os
from dataclasses import dataclass

import streamlit as st

logger = logging.getLogger(__name__)

SECRETS_FILE = "secrets.json"

DEFAULTS = {
    "PAGE_TITLE": "Coming soon",
    "PAGE_ICON": "✉️",
    "HEADLINE": "We're building our new site!",
    "TAGLINE": "Come back soon.",
    "LOGO_PATH": "logo.svg",
    "LOG_LEVEL": "INFO",
}


@dataclass(frozen=True)
class Settings:
    page_title: str
    page_icon: str
    headline: str
    tagline: str
    logo_path: str
    log_level: str


def _from_streamlit_secrets(keys):
    found = {}
    for k in keys:
        # st.secrets raises when no secrets.toml exists at all
        try:
            found[k] = st.secrets.get(k)
        except Exception as e:
            logger.debug("Streamlit secrets unavailable: %s", e)
            return {}
    return {k: v for k, v in found.items() if v}


def _from_secrets_file(path):
    if not os.path.exists(path):
        return {}
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", path)
        return {}
    return data


def load_settings(secrets_path=SECRETS_FILE) -> Settings:
    """Resolve page settings: Streamlit secrets, then environment, then a local secrets.json."""
    keys = list(DEFAULTS)
    resolved = _from_streamlit_secrets(keys)

    for k in keys:
        if not resolved.get(k) and os.environ.get(k):
            resolved[k] = os.environ[k]

    missing = [k for k in keys if not resolved.get(k)]
    if missing:
        local = _from_secrets_file(secrets_path)
        for k in missing:
            if local.get(k):
                resolved[k] = str(local[k])

    values = {k: resolved.get(k) or DEFAULTS[k] for k in keys}
    return Settings(**{k.lower(): v for k, v in values.items()})
