"""Custom exceptions for the word scanning pipeline.

This module defines a unified hierarchy of exceptions for configuration loading,
per-file scanning and run cancellation.

All exceptions inherit from WordScanError base class for consistent error handling.
"""

from __future__ import annotations


class WordScanError(Exception):
    """Base exception for all word scanning errors.

    Per-file errors are never raised out of a run; they are captured on the
    Result of the job that produced them.
    """


# Configuration exceptions


class ConfigError(WordScanError, ValueError):
    """Raised when run configuration is missing or invalid.

    This can occur due to:
    - Empty file list or a blank file path
    - Empty target word
    - Worker count below 1 or not an integer
    - Unreadable or malformed config file

    Fatal to the run; raised before any file is processed.
    """


# Per-file exceptions


class FileOpenError(WordScanError, OSError):
    """Raised when a target file cannot be opened.

    Inherits from OSError so callers matching OS-level failures still catch it.
    """

    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        super().__init__(f"cannot open {file_path}: {message}")


class ScanError(WordScanError):
    """Raised when reading an already opened file fails mid-scan.

    This can occur due to:
    - I/O errors from the underlying device
    - Content that cannot be decoded with the configured encoding
    """

    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        super().__init__(f"error reading {file_path}: {message}")


# Run control exceptions


class CancellationError(WordScanError):
    """Raised when the run was cancelled while a job was in flight."""

    def __init__(self, reason: str | None = None):
        self.reason = reason
        super().__init__(reason or "operation cancelled")


class ChannelClosedError(WordScanError):
    """Raised on put() to a closed channel or get() from a closed, drained one."""
