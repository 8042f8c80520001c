"""Unit tests for CancellationToken."""

import pytest

from wordscan.cancellation import CancellationToken
from wordscan.exceptions import CancellationError


def test_new_token_is_not_cancelled() -> None:
    token = CancellationToken()

    assert not token.cancelled
    assert token.reason is None
    assert token.wait(timeout=0) is False
    token.raise_if_cancelled()


def test_cancel_records_first_reason_only() -> None:
    token = CancellationToken()
    token.cancel("first")
    token.cancel("second")

    assert token.cancelled
    assert token.reason == "first"
    assert token.wait(timeout=0) is True


def test_raise_if_cancelled() -> None:
    token = CancellationToken()
    token.cancel("stop")

    with pytest.raises(CancellationError, match="stop"):
        token.raise_if_cancelled()


def test_callbacks_run_once() -> None:
    token = CancellationToken()
    calls: list[str] = []
    token.register(lambda: calls.append("a"))

    token.cancel()
    token.cancel()

    assert calls == ["a"]


def test_register_after_cancel_runs_immediately() -> None:
    token = CancellationToken()
    token.cancel()
    calls: list[str] = []

    token.register(lambda: calls.append("late"))

    assert calls == ["late"]


def test_unregistered_callback_is_not_run() -> None:
    token = CancellationToken()
    calls: list[str] = []
    unregister = token.register(lambda: calls.append("x"))

    unregister()
    unregister()
    token.cancel()

    assert calls == []
