"""Unified CLI entrypoint for wordscan."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as package_version
from typing import NoReturn

import typer

from wordscan.cli import count_command
from wordscan.cli.ui import console

app = typer.Typer(
    name="wordscan",
    help="Count a word across many files in parallel",
    add_completion=False,
)

app.command("count")(count_command.count)


@app.command()
def version() -> None:
    """Show the installed wordscan version."""
    try:
        console.print(package_version("wordscan"))
    except PackageNotFoundError:
        console.print("unknown")


def main() -> NoReturn:
    """Main entrypoint for wordscan CLI."""
    app()
    raise SystemExit(0)


if __name__ == "__main__":
    main()
