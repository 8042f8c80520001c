"""Unit tests for the worker loop."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from wordscan.cancellation import CancellationToken
from wordscan.channels import Channel, WaitGroup
from wordscan.exceptions import ScanError
from wordscan.types import Job, Result
from wordscan.worker import Worker


def _channels(jobs: list[Job]) -> tuple[Channel[Job], Channel[Result]]:
    job_channel: Channel[Job] = Channel(max(1, len(jobs)))
    for job in jobs:
        job_channel.put(job)
    job_channel.close()
    return job_channel, Channel(max(1, len(jobs)))


class RecordingCount:
    def __init__(self, *, should_fail: bool = False) -> None:
        self.calls: list[str] = []
        self.should_fail = should_fail

    def __call__(self, file_path: str, word: str, cancel_token: CancellationToken | None = None) -> Result:
        self.calls.append(file_path)
        if self.should_fail:
            raise RuntimeError("Test error")
        return Result(file_path=file_path, word_count=len(word))


def test_worker_drains_closed_channel(make_text_file: Callable[..., Path], cancel_token: CancellationToken) -> None:
    paths = [str(make_text_file(f"f{i}.txt", ["go go"] * i)) for i in range(3)]
    jobs, results = _channels([Job(file_path=path, word="go") for path in paths])
    group = WaitGroup()
    group.add(1)

    processed = Worker(1, wait_group=group).run(jobs, results, cancel_token)
    results.close()

    assert processed == 3
    assert group.wait(timeout=0) is True
    assert sorted((r.file_path, r.word_count) for r in results) == [(paths[0], 0), (paths[1], 2), (paths[2], 4)]


def test_worker_publishes_one_result_per_job_in_order() -> None:
    count = RecordingCount()
    jobs, results = _channels([Job(file_path=name, word="abc") for name in ("a", "b", "c")])

    Worker(1, count_fn=count).run(jobs, results)

    assert count.calls == ["a", "b", "c"]
    assert len(results) == 3


def test_cancelled_worker_processes_nothing(
    cancelled_token: CancellationToken, caplog: pytest.LogCaptureFixture
) -> None:
    count = RecordingCount()
    jobs, results = _channels([Job(file_path=name, word="go") for name in ("a", "b")])
    group = WaitGroup()
    group.add(1)

    with caplog.at_level(logging.INFO, logger="wordscan.worker"):
        processed = Worker(7, count_fn=count, wait_group=group).run(jobs, results, cancelled_token)

    assert processed == 0
    assert count.calls == []
    assert len(results) == 0
    assert len(jobs) == 2
    assert group.wait(timeout=0) is True
    assert any("Worker 7 shutting down gracefully" in message for message in caplog.messages)


def test_cancellation_between_jobs_stops_the_loop() -> None:
    token = CancellationToken()

    def cancel_after_first(file_path: str, word: str, cancel_token: CancellationToken | None = None) -> Result:
        token.cancel("done with one")
        return Result(file_path=file_path, word_count=1)

    jobs, results = _channels([Job(file_path=name, word="go") for name in ("a", "b", "c")])

    processed = Worker(1, count_fn=cancel_after_first).run(jobs, results, token)
    results.close()

    assert processed == 1
    assert [r.file_path for r in results] == ["a"]
    assert len(jobs) == 2


def test_unexpected_scanner_failure_still_yields_a_result() -> None:
    jobs, results = _channels([Job(file_path="boom", word="go")])

    processed = Worker(1, count_fn=RecordingCount(should_fail=True)).run(jobs, results)

    result = results.get()
    assert processed == 1
    assert isinstance(result.error, ScanError)
    assert isinstance(result.error.__cause__, RuntimeError)
    assert result.word_count == 0
