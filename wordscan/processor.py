"""Job dispatch and result collection for a word counting run."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Iterable, Sequence
from typing import Any

from wordscan.cancellation import CancellationToken
from wordscan.channels import Channel, WaitGroup
from wordscan.run_config import RunConfig
from wordscan.scanner import count_word
from wordscan.types import Job, Result
from wordscan.worker import CountFn, Worker

LOGGER = logging.getLogger(__name__)

# End-of-stream is signalled by the channel being closed.
ResultStream = Channel[Result]


class FileProcessor:
    """Orchestrates a bounded pool of workers over one job per file."""

    def __init__(self, run_config: RunConfig, count_fn: CountFn = count_word) -> None:
        """Initialize the processor.

        Args:
            run_config: Validated run parameters; validated again here so a
                hand-built config with zero workers cannot hang the run
            count_fn: Scanner used by every worker

        Raises:
            ConfigError: If ``run_config`` is invalid
        """
        run_config.validate()
        self.run_config = run_config
        self._count_fn = count_fn
        LOGGER.debug("Processor initialized: %s", run_config.to_dict())

    @property
    def files(self) -> tuple[str, ...]:
        return self.run_config.files

    @property
    def word(self) -> str:
        return self.run_config.word

    @property
    def worker_count(self) -> int:
        return self.run_config.worker_count

    def process_files(self, cancel_token: CancellationToken | None = None) -> ResultStream:
        """Scan every file and return the closed stream of results.

        Jobs are enqueued in file order but results arrive in completion order.
        Without cancellation there is exactly one result per file; after
        cancellation, jobs that no worker had picked up produce no result.

        Args:
            cancel_token: Shared token; a fresh, never-cancelled one is used if omitted

        Returns:
            Result channel, already closed, holding every published result
        """
        token = cancel_token if cancel_token is not None else CancellationToken()
        capacity = len(self.files)
        jobs: Channel[Job] = Channel(capacity)
        results: Channel[Result] = Channel(capacity)
        wait_group = WaitGroup()

        LOGGER.debug("Starting %d workers for %d files", self.worker_count, capacity)
        run_start = time.monotonic()

        for worker_id in range(1, self.worker_count + 1):
            worker = Worker(worker_id, count_fn=self._count_fn, wait_group=wait_group)
            wait_group.add(1)
            threading.Thread(
                target=worker.run,
                args=(jobs, results, token),
                name=f"wordscan-worker-{worker_id}",
                daemon=True,
            ).start()

        for file_path in self.files:
            jobs.put(Job(file_path=file_path, word=self.word))
        jobs.close()

        wait_group.wait()
        results.close()

        LOGGER.info(
            "Run finished in %.3f s: %d results for %d files%s",
            time.monotonic() - run_start,
            len(results),
            capacity,
            " (cancelled)" if token.cancelled else "",
        )
        return results


def process_files(
    files: Sequence[str],
    word: str,
    worker_count: int,
    cancel_token: CancellationToken | None = None,
    count_fn: CountFn = count_word,
) -> ResultStream:
    """Convenience wrapper: validate the parameters and run a FileProcessor."""
    run_config = RunConfig(files=tuple(files), word=word, worker_count=worker_count)
    return FileProcessor(run_config, count_fn=count_fn).process_files(cancel_token)


def summarize_results(results: Iterable[Result], files: Sequence[str] | None = None) -> dict[str, Any]:
    """Drain ``results`` into counts and an ordered list.

    Args:
        results: Result stream or any iterable of results
        files: Input order used to sort the results; unknown paths sort last

    Returns:
        Dictionary with succeeded/failed counts, total words and the results
    """
    collected = list(results)
    if files is not None:
        order = {path: index for index, path in enumerate(files)}
        collected.sort(key=lambda result: order.get(result.file_path, len(order)))

    succeeded = sum(1 for result in collected if result.ok)
    return {
        "files_requested": len(files) if files is not None else len(collected),
        "succeeded": succeeded,
        "failed": len(collected) - succeeded,
        "total_words": sum(result.word_count for result in collected),
        "results": collected,
    }
