"""Typer CLI for pagegen."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console

from pagegen.config import DEFAULT_CONFIG_TEMPLATE, PagegenConfig
from pagegen.errors import PagegenError

load_dotenv()

app = typer.Typer(
    name="pagegen",
    help="Add component imports and index files to a compiled page build.",
    no_args_is_help=True,
)
console = Console()

LOG_FILE = ".pagegen.log"


def _setup_logging(debug: bool) -> None:
    # Always log to file
    file_handler = logging.FileHandler(LOG_FILE, mode="w")
    file_handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    pagegen_logger = logging.getLogger("pagegen")
    pagegen_logger.setLevel(logging.DEBUG)
    pagegen_logger.addHandler(file_handler)

    if debug:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        pagegen_logger.addHandler(stream_handler)


def _load_config(config_path: Path | None, root: Path | None) -> PagegenConfig:
    config = PagegenConfig.load(config_path)
    if root is not None:
        config.build.dir = str(root)
    return config


@app.command()
def imports(
    files: Annotated[list[Path], typer.Argument(help="Generated files to rewrite")],
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Print the result instead of writing")
    ] = False,
) -> None:
    """Prepend the import statements each generated file needs."""
    from pagegen.imports import synthesize, synthesize_file

    for path in files:
        if dry_run:
            console.print(f"[bold]{path}[/bold]")
            console.print(synthesize(path.read_text(encoding="utf-8")), markup=False)
        else:
            synthesize_file(path)
            console.print(f"  {path}")


@app.command()
def index(
    root: Annotated[
        Path | None, typer.Option("--root", "-r", help="Build directory to index")
    ] = None,
    config_path: Annotated[
        Path | None, typer.Option("--config", "-c", help="Path to pagegen.toml")
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Log progress to stderr")] = False,
) -> None:
    """Write index.js files for the build root and each group directory."""
    from pagegen.indexing import synthesize_index

    _setup_logging(debug)
    config = _load_config(config_path, root)

    try:
        written = synthesize_index(config.build.resolve_dir(), config=config.index)
    except PagegenError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold green]Done![/bold green] Wrote {len(written)} index files:")
    for index_file in written:
        console.print(f"  {index_file.path}")


@app.command()
def build(
    root: Annotated[
        Path | None, typer.Option("--root", "-r", help="Build directory to process")
    ] = None,
    config_path: Annotated[
        Path | None, typer.Option("--config", "-c", help="Path to pagegen.toml")
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Log progress to stderr")] = False,
) -> None:
    """Add imports to every page file, then write the index files."""
    from pagegen.pipeline import run_build

    _setup_logging(debug)
    config = _load_config(config_path, root)

    with console.status("[bold green]Processing build directory..."):
        try:
            result = run_build(config)
        except PagegenError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(
        f"[bold green]Done![/bold green] {len(result.page_files)} pages, "
        f"{len(result.index_files)} index files."
    )
    if result.skipped_files:
        console.print(f"[dim]{len(result.skipped_files)} pages already had imports.[/dim]")


@app.command()
def init(
    path: Annotated[
        Path, typer.Option("--path", "-p", help="Where to create pagegen.toml")
    ] = Path("."),
) -> None:
    """Create a pagegen.toml config file."""
    target = path / "pagegen.toml"
    if target.exists():
        console.print(f"[yellow]{target} already exists.[/yellow]")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    console.print(f"[green]Created {target}[/green]")
