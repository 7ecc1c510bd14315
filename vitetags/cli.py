"""CLI entrypoints for vitetags."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .config import Config, load_config
from .manifest import ManifestError, Tags, load_manifest, parse
from .render import RenderError, TagRenderer
from .writer import TAGS_HTML_FILENAME, TAGS_JSON_FILENAME, write_markup, write_tags

console = Console()
app = typer.Typer(help="Turn bundler manifests into stylesheet, preload, and script tags.")


class OutputFormat(str, Enum):
    """Presentation formats for the ``tags`` command."""

    JSON = "json"
    TABLE = "table"


ConfigPathOption = Annotated[
    str,
    typer.Option("--config", "-c", help="Path to a configuration file or project directory."),
]
ManifestOption = Annotated[
    Path | None,
    typer.Option("--manifest", "-m", help="Override the manifest path from configuration."),
]
OutputOption = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Write the result to this file instead of stdout."),
]
WriteFlag = Annotated[
    bool,
    typer.Option("--write", "-w", help="Write the result into the configured output directory."),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Configure logging before running a command."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )


@app.command()
def tags(
    config_path: ConfigPathOption = ".",
    manifest_path: ManifestOption = None,
    output: OutputOption = None,
    write: WriteFlag = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format for stdout."),
    ] = OutputFormat.JSON,
) -> None:
    """Print the links, preloads, and scripts required by the manifest."""
    config = _load(config_path)
    result = _parse_manifest(manifest_path or config.manifest_path)

    destination = output or (config.output_dir / TAGS_JSON_FILENAME if write else None)
    if destination is not None:
        written = write_tags(result, destination)
        console.print(f"[bold green]Tags[/]: written to {written}")
        return

    if output_format is OutputFormat.TABLE:
        console.print(_tags_table(result))
        return
    typer.echo(json.dumps(result.model_dump(mode="json"), indent=2))


@app.command()
def render(
    config_path: ConfigPathOption = ".",
    manifest_path: ManifestOption = None,
    base_url: Annotated[
        str | None,
        typer.Option("--base-url", "-b", help="Override the public prefix joined onto asset paths."),
    ] = None,
    output: OutputOption = None,
    write: WriteFlag = False,
) -> None:
    """Render HTML tags for the manifest."""
    config = _load(config_path)
    if base_url is not None:
        config.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
    result = _parse_manifest(manifest_path or config.manifest_path)

    try:
        markup = TagRenderer.from_config(config).render(result)
    except RenderError as exc:
        console.print(f"[bold red]Render failed[/]: {exc}")
        raise typer.Exit(code=1) from exc

    destination = output or (config.output_dir / TAGS_HTML_FILENAME if write else None)
    if destination is not None:
        written = write_markup(markup, destination)
        console.print(f"[bold green]Markup[/]: written to {written}")
        return
    typer.echo(markup, nl=False)


@app.command()
def version() -> None:
    """Print the installed vitetags version."""
    typer.echo(__version__)


def _parse_manifest(path: Path) -> Tags:
    try:
        manifest = load_manifest(path)
    except ManifestError as exc:
        console.print(f"[bold red]Manifest error[/]: {exc}")
        raise typer.Exit(code=1) from exc
    return parse(manifest)


def _tags_table(result: Tags) -> Table:
    table = Table(title="Manifest tags")
    table.add_column("Kind", style="bold")
    table.add_column("Path")
    for kind, paths in (
        ("link", result.links),
        ("preload", result.preloads),
        ("script", result.scripts),
    ):
        for path in paths:
            table.add_row(kind, path)
    return table


def _load(path: str) -> Config:
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {path}") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


if __name__ == "__main__":
    app()
