"""Admin markup helpers."""

from __future__ import annotations

import html
import re
from typing import Mapping

from markupsafe import Markup, escape

from .hooks import HookRegistry

TOOLTIP_ALLOWED_TAGS = frozenset({"br", "em", "strong", "small", "span", "ul", "li", "ol", "p"})

DEFAULT_SUPPORTED_SCREENS = ("post", "page", "portfolio", "jetpack-portfolio")

_TAG_PATTERN = re.compile(r"<(/?)\s*([a-zA-Z][a-zA-Z0-9]*)\b[^>]*?(/?)\s*>")


def _filter_tag(match: re.Match[str]) -> str:
    closing, name, self_closing = match.groups()
    name = name.lower()
    if name not in TOOLTIP_ALLOWED_TAGS:
        return ""
    if closing:
        return f"</{name}>"
    return f"<{name} />" if self_closing or name == "br" else f"<{name}>"


def sanitize_tooltip(text: str) -> str:
    """Keep a small set of inline tags, without attributes, then escape.

    Args:
        text: Tooltip text, possibly entity encoded

    Returns:
        HTML-escaped tooltip suitable for a data attribute
    """
    decoded = html.unescape(text)
    kept = _TAG_PATTERN.sub(_filter_tag, decoded)
    return str(escape(kept))


def help_tip(tip: str, allow_html: bool = False) -> Markup:
    """Build the help tip span shown next to admin fields."""
    if allow_html:
        tip = sanitize_tooltip(tip)
    else:
        tip = str(escape(tip))

    return Markup(f'<span class="flash-toolkit-help-tip" data-tip="{tip}"></span>')


def get_layout_supported_screens(hooks: HookRegistry) -> list[str]:
    """Post types that show the layout meta box."""
    screens = hooks.apply_filters(
        "flash_toolkit_layout_supported_screens", list(DEFAULT_SUPPORTED_SCREENS)
    )
    if screens is None:
        return []
    if isinstance(screens, str):
        return [screens]
    if isinstance(screens, Mapping):
        return list(screens.values())
    return list(screens)
