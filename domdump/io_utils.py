"""Utility helpers for reading markup, loading config and logging."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from .models import DumpConfig

PathLike = Union[str, Path]

STDIO_PATH = "-"


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


def load_config(path: PathLike | None) -> DumpConfig:
    """Load a YAML config file; a missing path means defaults."""
    if path is None:
        return DumpConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        data: Any = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"{config_path} must contain a mapping of settings.")
    try:
        return DumpConfig.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid config in {config_path}: {exc}") from exc


def read_markup(path: PathLike | None, *, encoding: str = "utf-8") -> str:
    """Read markup from a file, or from stdin when ``path`` is None or ``-``."""
    if path is None or str(path) == STDIO_PATH:
        return sys.stdin.read()
    source = Path(path)
    if not source.exists():
        raise SystemExit(f"Input not found: {source}")
    return source.read_text(encoding=encoding)


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


__all__ = ["load_config", "read_markup", "warn", "write_text"]
