"""Run configuration loading and validation.

Values are resolved in increasing order of precedence:

1. built-in defaults
2. a YAML config file (``config.yaml`` / ``config.yml`` in the working directory,
   or an explicit path)
3. ``APP_``-prefixed environment variables (``.env`` is honoured)
4. explicit overrides, typically from CLI flags
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

import yaml

from wordscan.config import load_environment
from wordscan.exceptions import ConfigError

LOGGER = logging.getLogger(__name__)

DEFAULT_FILES: Final = ("./sample1.txt",)
DEFAULT_WORD: Final = "go"
DEFAULT_WORKER_COUNT: Final = 1

CONFIG_FILE_NAMES: Final = ("config.yaml", "config.yml")

ENV_PREFIX: Final = "APP_"
_FILES_ENV: Final = "APP_FILES"
_WORD_ENV: Final = "APP_WORD"
_WORKER_COUNT_ENV: Final = "APP_WORKERCOUNT"
_WORKER_COUNT_ENV_ALIAS: Final = "APP_WORKER_COUNT"

# Keys accepted in the YAML document (matched case-insensitively), mapped to RunConfig field names
_FILE_KEYS: Final = {
    "files": "files",
    "word": "word",
    "workercount": "worker_count",
    "worker_count": "worker_count",
}


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Validated, immutable parameters for one processing run."""

    files: tuple[str, ...]
    word: str
    worker_count: int = DEFAULT_WORKER_COUNT

    def validate(self) -> None:
        """Reject configurations that cannot make forward progress."""
        if not self.files:
            raise ConfigError("files must contain at least one path")
        if any(not path.strip() for path in self.files):
            raise ConfigError(f"files must not contain blank paths, got {list(self.files)}")
        if not self.word:
            raise ConfigError("word must not be empty")
        if isinstance(self.worker_count, bool) or not isinstance(self.worker_count, int):
            raise ConfigError(f"worker_count must be an integer, got {self.worker_count!r}")
        if self.worker_count < 1:
            raise ConfigError(f"worker_count must be >= 1, got {self.worker_count}")

    @classmethod
    def load(
        cls,
        config_path: str | Path | None = None,
        env: Mapping[str, str] | None = None,
        overrides: Mapping[str, Any] | None = None,
        search_dirs: Sequence[Path] | None = None,
    ) -> "RunConfig":
        """Build a validated config from defaults, config file, environment and overrides.

        Args:
            config_path: Explicit YAML file; must exist when given
            env: Environment mapping (defaults to ``os.environ`` after loading ``.env``)
            overrides: Highest-precedence values keyed by field name; ``None`` values are ignored
            search_dirs: Directories searched for a default config file (defaults to the cwd)

        Returns:
            Validated RunConfig instance

        Raises:
            ConfigError: If any source is unreadable or the merged values are invalid
        """
        if env is None:
            load_environment()
            env = os.environ

        values: dict[str, Any] = {
            "files": list(DEFAULT_FILES),
            "word": DEFAULT_WORD,
            "worker_count": DEFAULT_WORKER_COUNT,
        }
        values.update(_read_config_file(config_path, search_dirs))
        values.update(_read_env(env))
        if overrides:
            values.update({key: value for key, value in overrides.items() if value is not None})

        config = cls(
            files=_parse_files(values["files"]),
            word=str(values["word"]),
            worker_count=_parse_worker_count(values["worker_count"]),
        )
        config.validate()
        LOGGER.debug("Run configuration: %s", config.to_dict())
        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary for serialization/logging."""
        return {
            "files": list(self.files),
            "word": self.word,
            "worker_count": self.worker_count,
        }


def _find_config_file(config_path: str | Path | None, search_dirs: Sequence[Path] | None) -> Path | None:
    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        return path

    for directory in search_dirs or (Path.cwd(),):
        for name in CONFIG_FILE_NAMES:
            candidate = Path(directory) / name
            if candidate.is_file():
                return candidate
    return None


def _read_config_file(config_path: str | Path | None, search_dirs: Sequence[Path] | None) -> dict[str, Any]:
    path = _find_config_file(config_path, search_dirs)
    if path is None:
        LOGGER.warning("No config file found; using defaults and environment")
        return {}

    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as error:
        raise ConfigError(f"Cannot read config file {path}: {error}") from error
    except yaml.YAMLError as error:
        raise ConfigError(f"Malformed config file {path}: {error}") from error

    if document is None:
        return {}
    if not isinstance(document, Mapping):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(document).__name__}")

    values: dict[str, Any] = {}
    for key, value in document.items():
        field_name = _FILE_KEYS.get(str(key).lower())
        if field_name is None:
            LOGGER.warning("Ignoring unknown config key %r in %s", key, path)
            continue
        # A key with no value keeps the default
        if value is None:
            continue
        values[field_name] = value

    LOGGER.debug("Loaded config file %s", path)
    return values


def _read_env(env: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    if env.get(_FILES_ENV):
        values["files"] = env[_FILES_ENV]
    if env.get(_WORD_ENV):
        values["word"] = env[_WORD_ENV]
    worker_count = env.get(_WORKER_COUNT_ENV) or env.get(_WORKER_COUNT_ENV_ALIAS)
    if worker_count:
        values["worker_count"] = worker_count.strip()
    return values


def _parse_files(raw: Any) -> tuple[str, ...]:
    """Accept a list of paths or a comma-separated string."""
    if isinstance(raw, str):
        return tuple(part.strip() for part in raw.split(",") if part.strip())
    if isinstance(raw, Sequence):
        return tuple(str(item) for item in raw)
    raise ConfigError(f"files must be a list or comma-separated string, got {type(raw).__name__}")


def _parse_worker_count(raw: Any) -> int:
    if isinstance(raw, bool):
        raise ConfigError(f"worker_count must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError as error:
        raise ConfigError(f"worker_count must be an integer, got {raw!r}") from error
