"""Shared type definitions."""

from __future__ import annotations

from dataclasses import dataclass

from wordscan.exceptions import WordScanError


@dataclass(frozen=True, slots=True)
class Job:
    """Unit of work: one file to scan for one word."""

    file_path: str
    word: str


@dataclass(frozen=True, slots=True)
class Result:
    """Outcome captured for each processed job.

    ``word_count`` is always 0 when ``error`` is set; partial counts are never reported.
    """

    file_path: str
    word_count: int = 0
    error: WordScanError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
