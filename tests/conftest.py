"""Root-level pytest configuration and fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

import wordscan.config

# Set up a logger for this module
logger = logging.getLogger(__name__)

_ENV_VARS = ("APP_FILES", "APP_WORD", "APP_WORKERCOUNT", "APP_WORKER_COUNT", "APP_LOG_DIR", "LOG_LEVEL")


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Provides the absolute path to the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def _clean_app_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep APP_* variables from the developer shell out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _isolate_root_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Undo handlers installed by setup_logging() so each test starts unconfigured."""
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level
    monkeypatch.setattr(wordscan.config, "_logging_configured", False)
    yield
    for handler in root.handlers[:]:
        if handler not in handlers_before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level_before)


@pytest.fixture
def make_text_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a text file from a list of lines and returning its path."""

    def _make(name: str, lines: list[str], newline: str = "\n") -> Path:
        path = tmp_path / name
        path.write_bytes(newline.join(lines).encode("utf-8"))
        return path

    return _make
