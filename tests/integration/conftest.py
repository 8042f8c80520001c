from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def cli_workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run CLI commands from an empty directory so no stray config.yaml or .env is picked up."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def cli_text_files(make_text_file: Callable[..., Path]) -> list[str]:
    return [
        str(make_text_file("first.txt", ["go is fun", "I go home", "going going"])),
        str(make_text_file("second.txt", ["nothing to see"])),
    ]
