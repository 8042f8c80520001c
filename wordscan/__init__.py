from __future__ import annotations

from typing import TYPE_CHECKING, Any

# Keep imports lazy so the CLI can configure logging before worker modules load.
__all__ = ["FileProcessor", "process_files", "count_word", "CancellationToken", "RunConfig"]

_EXPORTS = {
    "FileProcessor": "wordscan.processor",
    "process_files": "wordscan.processor",
    "count_word": "wordscan.scanner",
    "CancellationToken": "wordscan.cancellation",
    "RunConfig": "wordscan.run_config",
}

if TYPE_CHECKING:
    from wordscan.cancellation import CancellationToken
    from wordscan.processor import FileProcessor, process_files
    from wordscan.run_config import RunConfig
    from wordscan.scanner import count_word


def __getattr__(name: str) -> Any:
    if name in _EXPORTS:
        from importlib import import_module

        return getattr(import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module 'wordscan' has no attribute '{name}'")
