"""Worker that drains the job channel and publishes one result per job."""

from __future__ import annotations

import logging
from collections.abc import Callable

from wordscan.cancellation import CancellationToken
from wordscan.channels import Channel, WaitGroup
from wordscan.exceptions import CancellationError, ChannelClosedError, ScanError
from wordscan.scanner import count_word
from wordscan.types import Job, Result

LOGGER = logging.getLogger(__name__)

CountFn = Callable[[str, str, CancellationToken | None], Result]


class Worker:
    """Pulls jobs until the job channel is drained or the run is cancelled."""

    def __init__(
        self,
        worker_id: int,
        count_fn: CountFn = count_word,
        wait_group: WaitGroup | None = None,
    ) -> None:
        """Initialize the worker.

        Args:
            worker_id: Identifier used in log messages
            count_fn: Scanner invoked once per job
            wait_group: Completion group signalled when ``run`` exits
        """
        self.worker_id = worker_id
        self._count_fn = count_fn
        self._wait_group = wait_group

    def run(
        self,
        jobs: Channel[Job],
        results: Channel[Result],
        cancel_token: CancellationToken | None = None,
    ) -> int:
        """Process jobs until ``jobs`` is closed and empty or ``cancel_token`` fires.

        Jobs still queued when cancellation is observed are left untouched and
        produce no result.

        Returns:
            Number of jobs this worker processed
        """
        processed = 0
        LOGGER.debug("Worker %d started", self.worker_id)
        try:
            while True:
                try:
                    job = jobs.get(cancel_token)
                except ChannelClosedError:
                    LOGGER.debug("Worker %d finished: job channel drained", self.worker_id)
                    return processed
                except CancellationError:
                    LOGGER.info("Worker %d shutting down gracefully due to cancellation", self.worker_id)
                    return processed

                results.put(self._process(job, cancel_token))
                processed += 1
        finally:
            if self._wait_group is not None:
                self._wait_group.done()

    def _process(self, job: Job, cancel_token: CancellationToken | None) -> Result:
        try:
            return self._count_fn(job.file_path, job.word, cancel_token)
        except Exception as error:
            # Every dispatched job must yield exactly one result.
            LOGGER.exception("Worker %d: unexpected failure scanning %s", self.worker_id, job.file_path)
            scan_error = ScanError(job.file_path, str(error))
            scan_error.__cause__ = error
            return Result(file_path=job.file_path, error=scan_error)
