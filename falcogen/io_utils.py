"""Utility helpers for text IO and diagnostics."""

from __future__ import annotations

import sys
from pathlib import Path


def read_source(path: Path | None) -> str:
    """Read HTML from ``path``, or from stdin when it is missing or ``-``."""

    if path is None or str(path) == "-":
        return sys.stdin.read()
    if not path.exists():
        raise FileNotFoundError(f"Input HTML not found: {path}")
    return path.read_text(encoding="utf-8")


def write_text(path: Path, content: str, *, force: bool = False) -> Path:
    """Write text content, creating parent directories as needed."""

    if path.exists() and not force:
        raise SystemExit(f"Output file already exists: {path}. Use --force to overwrite.")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["read_source", "warn", "write_text"]
