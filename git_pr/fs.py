"""Filesystem helpers for git-pr."""

from __future__ import annotations

from pathlib import Path

from .exceptions import IoError


def read_text(path: Path, description: str) -> str:
    """Read ``path`` as UTF-8, reporting failures as ``IoError``."""

    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IoError(f"Cannot read {description}; {exc}") from exc


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping one trailing ``\\r`` from each line.

    Unlike ``str.splitlines`` form feeds and unicode separators stay inside
    the line. A trailing newline does not produce an empty last line.
    """

    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
