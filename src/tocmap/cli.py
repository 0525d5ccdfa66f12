"""Command line interface for tocmap."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from tocmap.config import AppConfig
from tocmap.manifest import ManifestBuild, load_manifest
from tocmap.web.app import app as web_app, configure


console = Console()
app = typer.Typer(help="tocmap - find the table of contents governing each document")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load_build(manifest: Optional[Path]) -> ManifestBuild:
    config = AppConfig(manifest_path=manifest)
    resolved = config.resolve_manifest_path(Path.cwd())
    if not resolved.exists():
        raise typer.BadParameter(f"Manifest not found: {resolved}")
    try:
        return load_manifest(resolved).build()
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid manifest {resolved}: {exc}") from exc


@app.command()
def resolve(
    documents: Optional[List[str]] = typer.Argument(
        None, help="Document site paths. Defaults to every manifest document."
    ),
    manifest: Path = typer.Option(None, "--manifest", "-m", help="Build manifest (JSON)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the nearest TOC of each document."""
    _setup_logging(verbose)
    build = _load_build(manifest)

    try:
        results = build.resolve(documents or None)
    except KeyError as exc:
        raise typer.BadParameter(exc.args[0]) from exc

    if not results:
        console.print("[yellow]No documents to resolve.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Document")
    table.add_column("Nearest TOC")
    table.add_column("Relative path")

    for result in results:
        table.add_row(
            result.document,
            result.toc or "[dim]-[/dim]",
            result.relative_path or "[dim]-[/dim]",
        )

    console.print(table)


@app.command()
def contains(
    toc: str = typer.Argument(..., help="TOC site path"),
    manifest: Path = typer.Option(None, "--manifest", "-m", help="Build manifest (JSON)"),
) -> None:
    """Check whether a site path is a primary or experimental TOC."""
    build = _load_build(manifest)
    found = toc in build.registry and build.toc_map.contains(build.lookup(toc))
    console.print("yes" if found else "no")
    if not found:
        raise typer.Exit(code=1)


@app.command()
def web(
    host: str = typer.Option(AppConfig().host, help="Host interface"),
    port: int = typer.Option(AppConfig().port, help="Server port"),
    manifest: Path = typer.Option(None, "--manifest", "-m", help="Build manifest (JSON)"),
) -> None:
    """Start the web service."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    config = AppConfig(manifest_path=manifest, host=host, port=port)
    resolved = config.resolve_manifest_path(Path.cwd())
    if not resolved.exists():
        console.print("[yellow]Warning: manifest not found, GET /manifest will fail.[/yellow]")
    configure(resolved)

    console.print(f"Starting web service on http://{host}:{port} (manifest: {resolved})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
