"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from ..core.models import TemplateArgs
from ..icons import get_fontawesome_icons
from ..rendering import get_template, locate_template
from ..rendering.io import atomic_write_text
from ..settings import Settings
from ..toolkit import FlashToolkit
from .parsers import parse_arg, parse_file_mode

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="flash-toolkit",
    help="Theme companion helpers: template lookup, rendering and icon labels.",
)

Verbose = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose logging."),
]
Debug = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Template debug mode: ignore theme overrides and use bundled templates.",
    ),
]
TemplatePath = Annotated[
    str,
    typer.Option(
        "--template-path",
        help="Theme subdirectory checked for overrides (default: settings).",
        metavar="DIR",
    ),
]
DefaultPath = Annotated[
    str,
    typer.Option(
        "--default-path",
        help="Directory holding the bundled templates (default: plugin templates).",
        metavar="DIR",
    ),
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def _build_toolkit(debug: bool) -> FlashToolkit:
    settings = Settings()
    if debug:
        settings = settings.model_copy(update={"template_debug_mode": True})
    return FlashToolkit(settings=settings)


@app.command()
def locate(
    template_name: Annotated[str, typer.Argument(help="Relative template name.")],
    template_path: TemplatePath = "",
    default_path: DefaultPath = "",
    debug: Debug = False,
    verbose: Verbose = False,
) -> None:
    """Print the template file that would be rendered."""
    _configure_logging(verbose)
    toolkit = _build_toolkit(debug)

    located = locate_template(toolkit, template_name, template_path, default_path)
    if not located.exists():
        logger.warning(f"{located} does not exist.")
    typer.echo(str(located))


@app.command()
def render(
    template_name: Annotated[str, typer.Argument(help="Relative template name.")],
    args: Annotated[
        list[str],
        typer.Option(
            "--arg",
            help="Template argument (format: KEY=VALUE, JSON values allowed). Repeatable.",
            metavar="KEY=VALUE",
        ),
    ] = [],
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Write to FILE instead of stdout.",
            metavar="FILE",
        ),
    ] = "",
    file_mode: Annotated[
        str,
        typer.Option(
            "--mode",
            help="File permissions in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = "0644",
    template_path: TemplatePath = "",
    default_path: DefaultPath = "",
    debug: Debug = False,
    verbose: Verbose = False,
) -> None:
    """Render a template part with the given arguments."""
    _configure_logging(verbose)
    toolkit = _build_toolkit(debug)

    mode = parse_file_mode(file_mode)
    template_args = TemplateArgs(**dict(map(parse_arg, args)))

    rendered = get_template(
        toolkit, template_name, template_args, template_path, default_path
    )
    if rendered is None:
        raise typer.Exit(code=1)

    if output:
        written = atomic_write_text(Path(output), rendered, mode=mode)
        logger.info(f"Rendered {template_name} → {written}")
    else:
        typer.echo(rendered, nl=False)


@app.command()
def icons(
    search: Annotated[
        str,
        typer.Option("--search", "-s", help="Only list icons whose id or label contains TEXT."),
    ] = "",
    verbose: Verbose = False,
) -> None:
    """List Font Awesome icon ids and labels."""
    _configure_logging(verbose)
    toolkit = _build_toolkit(debug=False)

    needle = search.lower()
    for icon, label in get_fontawesome_icons(toolkit.hooks).items():
        if needle and needle not in icon.lower() and needle not in label.lower():
            continue
        typer.echo(f"{icon}\t{label}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
