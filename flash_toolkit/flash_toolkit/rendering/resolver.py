"""Template override resolution.

Load order:

    theme / template_path / template_name
    theme / template_name
    default_path / template_name

Template debug mode skips the theme lookups entirely.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..toolkit import FlashToolkit

logger = logging.getLogger(__name__)


def trailingslashit(path: str) -> str:
    return path.rstrip("/\\") + "/"


def locate_template(
    toolkit: FlashToolkit,
    template_name: str,
    template_path: str = "",
    default_path: str = "",
) -> Path:
    """Locate a template and return the path to render.

    Args:
        toolkit: Toolkit providing settings, hooks and the theme locator
        template_name: Relative template name (e.g. "portfolio/content.html")
        template_path: Theme override subdirectory (default: toolkit setting)
        default_path: Bundled template directory (default: plugin templates)

    Returns:
        Resolved template path; the bundled fallback is not checked for existence
    """
    if not template_path:
        template_path = toolkit.template_path()

    if not default_path:
        default_path = toolkit.plugin_path() + "/templates/"

    template = toolkit.locator.locate(
        [trailingslashit(template_path) + template_name, template_name]
    )

    if template is None or toolkit.template_debug_mode:
        template = Path(default_path + template_name)

    logger.debug(f"Located {template_name} at {template}")

    return Path(
        toolkit.hooks.apply_filters(
            "flash_toolkit_locate_template", template, template_name, template_path
        )
    )
