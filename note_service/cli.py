"""
ClipNotes v1 - Command Line Interface

Probe clipboard content and render notes from the terminal.

Usage:
    clipnote check "https://www.tiktok.com/@someuser/video/1234567890"
    clipnote note "https://vm.tiktok.com/ABCDEFG/" --output-dir ~/vault/TikTok
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click
import httpx
from rich.console import Console
from rich.table import Table

from config import Config, load_env
from . import __version__
from .parsers import NoParserError, get_default_registry

console = Console()


def _build_registry():
    load_env()
    return get_default_registry(Config().tiktok_config())


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """ClipNotes - turn clipboard links into notes"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.command()
@click.argument("content")
def check(content: str):
    """
    Show whether a parser accepts CONTENT.

    Short links are resolved over the network.
    """
    registry = _build_registry()
    parser = asyncio.run(registry.get_parser(content))

    if parser is None:
        console.print(f"[yellow]No parser accepts:[/yellow] {content}")
        sys.exit(1)

    console.print(f"[green]Accepted by[/green] {parser.__class__.__name__}")


@cli.command()
@click.argument("content")
@click.option(
    "--output-dir", "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write the note into (prints only when omitted)"
)
def note(content: str, output_dir: Optional[Path]):
    """
    Fetch CONTENT and render its note.
    """
    registry = _build_registry()

    try:
        result = asyncio.run(registry.create_note(content))
    except NoParserError:
        console.print(f"[red]Error:[/red] no parser accepts {content}")
        sys.exit(1)
    except httpx.HTTPError as e:
        console.print(f"[red]Fetch failed:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Could not create note:[/red] {e}")
        sys.exit(1)

    table = Table(title="Note")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("File name", result.file_name_with_extension)
    table.add_row("Content type", result.content_type_slug)
    table.add_row("Created", result.created_at.isoformat(timespec="seconds"))
    console.print(table)
    console.print()
    console.print(result.content, markup=False, highlight=False)

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / result.file_name_with_extension
        path.write_text(result.content, encoding="utf-8")
        console.print(f"[bold green]Saved[/bold green] {path}")


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == "__main__":
    main()
