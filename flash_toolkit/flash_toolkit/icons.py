"""Font Awesome icon labels."""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources

import yaml

from .hooks import HookRegistry

logger = logging.getLogger(__name__)

ICONS_RESOURCE = "fontawesome_icons.yaml"


@lru_cache(maxsize=1)
def _load_icons() -> dict[str, str]:
    text = resources.files(__package__).joinpath("data").joinpath(ICONS_RESOURCE).read_text(encoding="utf-8")
    icons = yaml.safe_load(text) or {}
    logger.debug(f"Loaded {len(icons)} icon label(s)")
    return icons


def get_fontawesome_icons(hooks: HookRegistry) -> dict[str, str]:
    """Icon class names mapped to human readable labels."""
    return hooks.apply_filters("flash_get_fontawesome_icons", dict(_load_icons()))
