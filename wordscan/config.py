import logging
import os
import sys
from collections.abc import Callable
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from dotenv import load_dotenv
from rich.logging import RichHandler


def load_environment(dotenv_path: Path | None = None) -> bool:
    """Load ``.env`` from the working directory (or ``dotenv_path``) without overriding real env vars."""
    return load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)


# --- Logging Configuration ---
# runtime modules should use logging.getLogger(...) and env LOG_LEVEL
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_logging_configured = False


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    if not value:
        return default
    name = value.strip().upper()
    level = getattr(logging, name, default)
    return level if isinstance(level, int) else default


def _build_console_handler(level: int, isatty: Callable[[], bool] | None = None) -> logging.Handler:
    """Return a console handler. Use Rich in TTY, plain stream otherwise."""
    if (isatty or sys.stderr.isatty)():
        handler: logging.Handler = RichHandler(
            show_time=False,
            show_path=False,
            rich_tracebacks=True,
            show_level=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    return handler


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger once with console and optional file handler.

    Args:
        level: Explicit level; falls back to env LOG_LEVEL (default INFO)
    """
    global _logging_configured
    if _logging_configured:
        if level is not None:
            logging.getLogger().setLevel(level)
            for handler in logging.getLogger().handlers:
                handler.setLevel(level)
        return

    load_environment()
    if level is None:
        level = _parse_level(os.getenv("LOG_LEVEL", "INFO"))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(_build_console_handler(level))

    # Optional file logging only when APP_LOG_DIR is set
    app_log_dir = os.getenv("APP_LOG_DIR")
    if app_log_dir:
        log_dir = Path(app_log_dir)
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            backup_count_env = os.getenv("APP_LOG_BACKUP_COUNT", "5")
            try:
                backup_count = max(0, int(str(backup_count_env).strip()))
            except (TypeError, ValueError):
                backup_count = 5
                logging.warning(
                    "Invalid APP_LOG_BACKUP_COUNT=%r. Defaulting to 5.",
                    backup_count_env,
                )

            file_handler = TimedRotatingFileHandler(
                filename=log_dir / "wordscan.log",
                when="midnight",
                backupCount=backup_count,
                encoding="utf-8",
                utc=True,
            )
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            file_handler.setLevel(level)
            root.addHandler(file_handler)
        except (PermissionError, OSError) as e:
            logging.warning("Failed to configure file logging to '%s'. Error: %s", app_log_dir, e)

    # Forward warnings module messages to logging
    logging.captureWarnings(True)

    _logging_configured = True


# --- End Logging Configuration ---
