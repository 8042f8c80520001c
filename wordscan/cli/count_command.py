"""CLI command that runs a word count over the configured files."""

from __future__ import annotations

import logging
import signal
from collections.abc import Callable
from pathlib import Path
from types import FrameType
from typing import Annotated, Any

import typer
from rich.markup import escape

from wordscan.cancellation import CancellationToken
from wordscan.cli.ui import console, display_config_table, display_processing_summary, display_results
from wordscan.config import setup_logging
from wordscan.exceptions import ConfigError
from wordscan.processor import FileProcessor, summarize_results
from wordscan.run_config import RunConfig

LOGGER = logging.getLogger(__name__)

SignalRegistrar = Callable[[int, Any], Any]


def _configure_logging(verbose: bool) -> None:
    """Configure logging levels based on verbosity.

    Args:
        verbose: If True, show DEBUG logs. Otherwise use LOG_LEVEL (default INFO).
    """
    setup_logging(logging.DEBUG if verbose else None)


def run_count(
    config_path: Path | None = None,
    files: list[str] | None = None,
    word: str | None = None,
    workers: int | None = None,
    plain: bool = False,
    verbose: bool = False,
    *,
    cancel_token: CancellationToken | None = None,
    signal_registrar: SignalRegistrar | None = None,
) -> int:
    """Load configuration, scan the files and print every result.

    Args:
        config_path: Explicit YAML config file
        files: File paths overriding config and environment
        word: Target word overriding config and environment
        workers: Worker count overriding config and environment
        plain: Print ``path; count`` lines instead of Rich tables
        verbose: Enable DEBUG logging
        cancel_token: Token cancelled on SIGINT/SIGTERM (created if omitted)
        signal_registrar: Replacement for ``signal.signal``, used by tests

    Returns:
        Exit code: 0 once the run completes (even if files failed), 1 on configuration errors
    """
    _configure_logging(verbose)

    try:
        run_config = RunConfig.load(
            config_path=config_path,
            overrides={"files": files or None, "word": word, "worker_count": workers},
        )
        processor = FileProcessor(run_config)
    except ConfigError as error:
        console.print(f"[red]Configuration error:[/red] {escape(str(error))}")
        return 1

    token = cancel_token if cancel_token is not None else CancellationToken()
    register_signal = signal_registrar or signal.signal

    def _handle_signal(signum: int, _frame: FrameType | None) -> None:
        LOGGER.info("Received signal %s; cancelling run.", signum)
        token.cancel(f"received signal {signum}")

    previous_handlers = {sig: register_signal(sig, _handle_signal) for sig in (signal.SIGINT, signal.SIGTERM)}
    try:
        if not plain:
            display_config_table(run_config)
        summary = summarize_results(processor.process_files(token), run_config.files)
    finally:
        for sig, handler in previous_handlers.items():
            if handler is not None:
                register_signal(sig, handler)

    display_results(summary["results"], plain=plain)
    if not plain:
        display_processing_summary(summary, cancelled=token.cancelled)
    return 0


def count(
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="YAML config file (default: ./config.yaml if present)")
    ] = None,
    file: Annotated[list[str] | None, typer.Option("--file", "-f", help="File to scan; repeat for several")] = None,
    word: Annotated[str | None, typer.Option("--word", "-w", help="Word to count")] = None,
    workers: Annotated[int | None, typer.Option("--workers", "-n", help="Number of worker threads")] = None,
    plain: Annotated[bool, typer.Option("--plain", help="Print 'path; count' lines only")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Count occurrences of a word across files using a pool of workers."""
    exit_code = run_count(config, file, word, workers, plain, verbose)
    if exit_code:
        raise typer.Exit(exit_code)
