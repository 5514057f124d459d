"""Template rendering engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping, TextIO

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, select_autoescape

from ..core.models import TemplateArgs
from .resolver import locate_template

if TYPE_CHECKING:
    from ..toolkit import FlashToolkit

logger = logging.getLogger(__name__)


def load_template(template_path: Path) -> Template:
    """Load a Jinja2 template from a file path.

    Args:
        template_path: Path to the template file

    Returns:
        Compiled Jinja2 template
    """
    if not template_path.exists():
        raise FileNotFoundError(f"Template not found: {template_path}")

    # Use template's parent directory as loader search path
    loader = FileSystemLoader(str(template_path.parent))
    env = Environment(
        loader=loader,
        undefined=StrictUndefined,
        autoescape=select_autoescape(["html", "htm", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )

    return env.get_template(template_path.name)


def _coerce_args(args: TemplateArgs | Mapping[str, Any] | None) -> TemplateArgs:
    if args is None:
        return TemplateArgs()
    if isinstance(args, TemplateArgs):
        return args
    return TemplateArgs(**dict(args))


def get_template(
    toolkit: FlashToolkit,
    template_name: str,
    args: TemplateArgs | Mapping[str, Any] | None = None,
    template_path: str = "",
    default_path: str = "",
    out: TextIO | None = None,
) -> str | None:
    """Resolve and render a template part.

    Args:
        toolkit: Toolkit providing settings and hooks
        template_name: Relative template name
        args: Values exposed to the template
        template_path: Theme override subdirectory
        default_path: Bundled template directory
        out: Optional stream the rendered text is written to

    Returns:
        Rendered text, or None when the template does not exist
    """
    template_args = _coerce_args(args)
    located = locate_template(toolkit, template_name, template_path, default_path)

    if not located.is_file():
        logger.warning(f"{located} does not exist.")
        return None

    # Third parties may swap in a template file of their own
    located = Path(
        toolkit.hooks.apply_filters(
            "flash_get_template",
            located,
            template_name,
            template_args,
            template_path,
            default_path,
        )
    )

    if not located.is_file():
        logger.warning(f"{located} does not exist.")
        return None

    toolkit.hooks.do_action(
        "flash_toolkit_before_template_part",
        template_name,
        template_path,
        located,
        template_args,
    )

    logger.debug(f"Rendering template: {located}")
    rendered_text = load_template(located).render(**template_args.as_context())
    if out is not None:
        out.write(rendered_text)

    toolkit.hooks.do_action(
        "flash_toolkit_after_template_part",
        template_name,
        template_path,
        located,
        template_args,
    )

    return rendered_text
