"""UI utilities for CLI commands using Rich."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from wordscan.run_config import RunConfig
from wordscan.types import Result

console = Console()


def display_config_table(run_config: RunConfig) -> None:
    """Display run configuration using Rich.

    Args:
        run_config: Validated run configuration
    """
    config_table = Table.grid(padding=(0, 2))
    config_table.add_row("[bold]Files:[/bold]", escape(", ".join(run_config.files)))
    config_table.add_row("[bold]Word:[/bold]", escape(run_config.word))
    config_table.add_row("[bold]Workers:[/bold]", str(run_config.worker_count))

    console.print("\n[bold]Word Count Configuration[/bold]")
    console.print(Panel(config_table, border_style="blue", padding=(0, 1)))
    console.print()


def format_result_line(result: Result) -> str:
    """Plain one-line rendering: ``path; count`` or ``path; error``."""
    if result.error is not None:
        return f"{result.file_path}; error: {result.error}"
    return f"{result.file_path}; {result.word_count}"


def display_results(results: list[Result], plain: bool = False) -> None:
    """Display per-file results.

    Args:
        results: Results to show, already in display order
        plain: Print one ``path; count`` line per file instead of a table
    """
    if plain:
        for result in results:
            console.print(format_result_line(result), markup=False, highlight=False, soft_wrap=True)
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("File")
    table.add_column("Count", justify="right")
    table.add_column("Status")
    for result in results:
        if result.error is not None:
            table.add_row(escape(result.file_path), "-", f"[red]{escape(str(result.error))}[/red]")
        else:
            table.add_row(escape(result.file_path), str(result.word_count), "[green]ok[/green]")
    console.print(table)


def display_processing_summary(summary: dict[str, Any], cancelled: bool = False) -> None:
    """Display processing summary using Rich.

    Args:
        summary: Dictionary from summarize_results()
        cancelled: Whether the run was cut short
    """
    console.print()
    summary_table = Table.grid(padding=(0, 2))
    summary_table.add_row("[bold]Files requested:[/bold]", str(summary.get("files_requested", 0)))
    summary_table.add_row("[bold]Successfully scanned:[/bold]", f"[green]{summary.get('succeeded', 0)}[/green]")
    summary_table.add_row("[bold]Failed:[/bold]", f"[red]{summary.get('failed', 0)}[/red]")
    summary_table.add_row("[bold]Total matches:[/bold]", str(summary.get("total_words", 0)))
    if cancelled:
        summary_table.add_row("[bold]Status:[/bold]", "[yellow]cancelled[/yellow]")

    console.print("[bold]Processing Summary[/bold]")
    console.print(Panel(summary_table, border_style="green", padding=(0, 1)))
