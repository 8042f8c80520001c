"""Line-by-line substring counting for a single file."""

from __future__ import annotations

import logging

from wordscan.cancellation import CancellationToken
from wordscan.exceptions import CancellationError, ConfigError, FileOpenError, ScanError
from wordscan.types import Result

LOGGER = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def count_word(
    path: str,
    word: str,
    cancel_token: CancellationToken | None = None,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> Result:
    """Count occurrences of ``word`` in the file at ``path``.

    Matching is a plain, case-sensitive, non-overlapping substring count per
    line; word boundaries are not enforced ("cat" matches inside "category").
    Cancellation is checked before each line, never within one.

    Args:
        path: File to scan
        word: Non-empty target string
        cancel_token: Optional token polled at every line boundary
        encoding: Text encoding used to decode the file

    Returns:
        Result with the total count, or with ``error`` set and a count of 0
        when the file cannot be opened, fails mid-read or the scan is cancelled
    """
    if not word:
        raise ConfigError("word must not be empty")

    try:
        handle = open(path, encoding=encoding, newline="\n")
    except OSError as error:
        LOGGER.debug("Cannot open %s: %s", path, error)
        open_error = FileOpenError(path, error.strerror or str(error))
        open_error.__cause__ = error
        return Result(file_path=path, error=open_error)

    total = 0
    with handle:
        try:
            for line in handle:
                if cancel_token is not None and cancel_token.cancelled:
                    LOGGER.debug("Scan of %s cancelled", path)
                    return Result(file_path=path, error=CancellationError(cancel_token.reason))
                total += line.rstrip("\r\n").count(word)
        except (OSError, UnicodeDecodeError) as error:
            LOGGER.debug("Read of %s failed: %s", path, error)
            scan_error = ScanError(path, str(error))
            scan_error.__cause__ = error
            return Result(file_path=path, error=scan_error)

    return Result(file_path=path, word_count=total)
