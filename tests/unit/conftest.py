from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from wordscan.cancellation import CancellationToken


@pytest.fixture(scope="session", autouse=True)
def _disable_network_for_unit_tests() -> None:
    """Block real sockets for unit tests; allow Unix sockets for pytest internals."""
    from pytest_socket import disable_socket

    disable_socket(allow_unix_socket=True)


@pytest.fixture
def cancel_token() -> CancellationToken:
    return CancellationToken()


@pytest.fixture
def cancelled_token() -> CancellationToken:
    token = CancellationToken()
    token.cancel("test")
    return token


@pytest.fixture
def ten_files(make_text_file: Callable[..., Path]) -> list[str]:
    """Ten small files; file N contains the word 'go' exactly N times."""
    return [str(make_text_file(f"file{n}.txt", ["go " * n, "nothing here"])) for n in range(10)]
