from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional, TextIO

import typer
from rich.console import Console
from rich.markup import escape

from .commands import CommandProcessor
from .config import get_settings
from .network import SocialNetwork

app = typer.Typer(help="friendnet – in-memory social network shell")
console = Console()

PROMPT = "> "


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else get_settings().LOG_LEVEL.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _interactive_lines(stream: TextIO) -> Iterator[str]:
    while True:
        console.print(PROMPT, end="", markup=False, highlight=False)
        line = stream.readline()
        if not line:
            return
        yield line


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Create users, befriend them and post messages."""
    _setup_logging(verbose)


@app.command()
def shell(
    batch_file: Optional[Path] = typer.Argument(None, help="File of commands to run instead of stdin"),
):
    """Run shell commands from BATCH_FILE, or interactively from stdin."""
    processor = CommandProcessor(SocialNetwork(), console)
    if batch_file is not None:
        if not batch_file.exists():
            console.print(f"[red]Batch file not found: {escape(str(batch_file))}", soft_wrap=True)
            raise typer.Exit(code=1)
        with batch_file.open("r", encoding="utf-8") as f:
            processor.run(f)
        return
    stdin = typer.get_text_stream("stdin")
    if stdin.isatty():
        console.print("Welcome to friendnet. Type quit to exit.")
        processor.run(_interactive_lines(stdin))
    else:
        processor.run(stdin)


def main():
    app()


if __name__ == "__main__":
    main()
