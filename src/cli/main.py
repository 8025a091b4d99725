"""Entry point de la CLI (Typer).

Flujo de una invocación (sin reentradas):
    argumentos -> Configuration -> Manifest -> selección -> render
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.manifest_loader import load_manifest
from cli import __version__
from cli.ui_components import OutputConsole, TableLayout, print_error, print_no_scripts, render
from core.config import AppSettings
from core.domain.models import Configuration, ManifestMeta
from core.domain.output_format import OutputFormat
from core.errors import ScriptListError
from core.logging import configure_logging, get_logger
from core.services.script_selector import select_scripts

app = typer.Typer(
    name="script-list",
    help="📜 List npm scripts from package.json",
    add_completion=False,
)

logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"script-list {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Annotated[
        Optional[Path],
        typer.Option("--path", "-p", metavar="PATH", help="Path to package.json (default: ./package.json)"),
    ] = None,
    names_only: Annotated[
        bool,
        typer.Option("--names-only", "-n", help="Show only script names without commands"),
    ] = False,
    filter_: Annotated[
        Optional[str],
        typer.Option("--filter", "-f", metavar="PATTERN", help="Filter scripts by name (case-insensitive)"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-F", case_sensitive=False, help="Output format"),
    ] = OutputFormat.default(),
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Debug logging on stderr"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
) -> None:
    """List the scripts declared in a package.json manifest."""

    out = OutputConsole(highlight=False)
    err = Console(stderr=True, highlight=False)
    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(err, f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc
    configure_logging(logging.DEBUG if verbose else settings.log_level, err)

    config = Configuration(
        path=path or Path(settings.manifest_filename),
        names_only=names_only,
        filter=filter_,
        format=output_format,
        verbose=verbose,
    )
    logger.debug("Configuration: %s", config)

    cwd = Path.cwd()
    try:
        manifest = load_manifest(config.path, cwd=cwd, console=err)

        if not manifest.scripts:
            print_no_scripts(err, manifest_name=config.path.name)
            return

        entries = select_scripts(manifest, config.filter)
        render(
            config.format,
            entries,
            names_only=config.names_only,
            meta=ManifestMeta.from_manifest(manifest, cwd=cwd),
            console=out,
            layout=TableLayout(
                command_max_width=settings.command_max_width,
                separator_padding=settings.separator_padding,
            ),
        )
    except ScriptListError as exc:
        logger.debug("Aborting", exc_info=exc)
        print_error(err, str(exc))
        raise typer.Exit(code=1) from exc


def run() -> None:
    app()
