"""Configuration loading from environment variables and rolo.toml."""

from __future__ import annotations

import codecs
import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_CONFIG_FILENAME = "rolo.toml"
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

ENV_VARS = (
    "ROLO_LOG_LEVEL",
    "ROLO_ECHO",
    "ROLO_REVERSE_TAIL",
    "ROLO_ENCODING",
    "ROLO_MAX_READ_DEPTH",
)


@dataclass
class BookConfig:
    """Record book display behavior."""

    echo_on_insert: bool = True
    reverse_tail: bool = False


@dataclass
class FilesConfig:
    """%W / %R file handling."""

    encoding: str = "utf-8"
    max_read_depth: int = 16


@dataclass
class RoloConfig:
    """Top-level rolo configuration."""

    book: BookConfig = field(default_factory=BookConfig)
    files: FilesConfig = field(default_factory=FilesConfig)
    log_level: str = "WARNING"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {raw!r}")


def _check_encoding(name: str) -> str:
    try:
        codecs.lookup(name)
    except LookupError as e:
        raise ValueError(f"unknown file encoding: {name!r}") from e
    return name


def load_config(config_path: Path | None = None) -> RoloConfig:
    """Load configuration from environment variables and optional rolo.toml.

    Priority: environment variables > rolo.toml > defaults.

    Raises:
        ValueError: malformed rolo.toml or an invalid setting.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.rolo/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".rolo" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    book_data = file_data.get("book", {})
    files_data = file_data.get("files", {})

    config = RoloConfig(
        book=BookConfig(
            echo_on_insert=_env_bool("ROLO_ECHO", book_data.get("echo_on_insert", True)),
            reverse_tail=_env_bool("ROLO_REVERSE_TAIL", book_data.get("reverse_tail", False)),
        ),
        files=FilesConfig(
            encoding=_check_encoding(
                os.getenv("ROLO_ENCODING", files_data.get("encoding", "utf-8"))
            ),
            max_read_depth=int(
                os.getenv("ROLO_MAX_READ_DEPTH", files_data.get("max_read_depth", 16))
            ),
        ),
        log_level=os.getenv("ROLO_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )
    return config
