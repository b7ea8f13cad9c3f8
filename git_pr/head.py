"""Resolve the checked-out branch from the repository's HEAD file."""

from __future__ import annotations

import logging
from pathlib import Path

from .exceptions import IoError, RepoError
from .fs import read_text, split_lines

logger = logging.getLogger(__name__)


def branch(path: Path) -> str:
    """Return the current branch name recorded in the HEAD file at ``path``."""

    contents = read_text(path, ".git HEAD file")
    name = current_branch(contents)
    logger.debug("Current branch from %s: %s", path, name)
    return name


def current_branch(contents: str) -> str:
    """Split the first HEAD line on '/' and keep everything after ``refs/heads``.

    ``ref: refs/heads/feat/x`` yields ``feat/x``; nested separators are kept.
    """

    lines = split_lines(contents)
    if not lines:
        raise IoError("Could not find git HEAD file")
    line = lines[0]
    if "/" not in line:
        raise RepoError("Could not find current branch from git HEAD")
    name = "/".join(line.split("/")[2:])
    if not name:
        raise RepoError("Could not find current branch from git HEAD")
    return name
