"""Load environment variables and repository locations for runtime."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .exceptions import MissingEnvError, RepoError
from .fs import read_text, split_lines
from .models import RepoPaths

MESSAGE_FILE = "PR_EDITMSG"
TOKEN_VARS = ("GIT_PR_TOKEN", "GITHUB_TOKEN")
EDITOR_VARS = ("GIT_EDITOR", "VISUAL", "EDITOR")
GITDIR_PREFIX = "gitdir:"


@dataclass
class Config:
    """Application defaults."""

    default_base: str = "master"
    default_remote: str = "origin"
    default_editor: str = "vi"
    forge_host: str = "github.com"
    api_host: str = "api.github.com"


def get_default_base() -> str:
    return os.getenv("GIT_PR_BASE") or Config.default_base


def get_forge_host() -> str:
    """Host that remote URLs must point at."""
    return os.getenv("GIT_PR_HOST") or Config.forge_host


def get_api_host() -> str:
    return os.getenv("GIT_PR_API_HOST") or Config.api_host


def get_editor() -> str:
    """Pick the editor the way git does, falling back to vi."""
    for var in EDITOR_VARS:
        value = os.getenv(var)
        if value and value.strip():
            return value.strip()
    return Config.default_editor


def get_token() -> str:
    for var in TOKEN_VARS:
        value = os.getenv(var)
        if value:
            return value
    raise MissingEnvError(
        f"Environment variable {TOKEN_VARS[0]} or {TOKEN_VARS[1]} is required. "
        f"Example: export {TOKEN_VARS[1]}=<personal access token>"
    )


def find_git_dir(start: Path | None = None) -> Path:
    """Return the git directory of the repository containing ``start``.

    The walk stops at the first ``.git`` entry. Submodules and linked
    worktrees have a ``.git`` file pointing elsewhere, which is followed.
    """

    origin = (start or Path.cwd()).expanduser().resolve()
    for candidate in (origin, *origin.parents):
        dot_git = candidate / ".git"
        if dot_git.is_dir():
            return dot_git
        if dot_git.is_file():
            return _follow_gitdir_file(dot_git)
    raise RepoError(f"Not inside a git repository: {origin}")


def _follow_gitdir_file(dot_git: Path) -> Path:
    lines = split_lines(read_text(dot_git, ".git file"))
    first = lines[0] if lines else ""
    if not first.startswith(GITDIR_PREFIX):
        raise RepoError(f"Unrecognized .git file: {dot_git}")
    target = _relative_to(dot_git.parent, first[len(GITDIR_PREFIX):])
    if not target.is_dir():
        raise RepoError(f"Git directory {target} referenced by {dot_git} does not exist")
    return target


def common_dir(git_dir: Path) -> Path:
    """Linked worktrees share config with the directory named in ``commondir``."""

    marker = git_dir / "commondir"
    if not marker.is_file():
        return git_dir
    lines = split_lines(read_text(marker, "commondir file"))
    if not lines or not lines[0].strip():
        return git_dir
    return _relative_to(git_dir, lines[0])


def _relative_to(base: Path, raw: str) -> Path:
    path = Path(raw.strip()).expanduser()
    if not path.is_absolute():
        path = base / path
    return path.resolve()


def resolve_paths(repo_override: Path | None = None) -> RepoPaths:
    git_dir = find_git_dir(repo_override)
    return RepoPaths(
        git_dir=git_dir,
        head=git_dir / "HEAD",
        config=common_dir(git_dir) / "config",
        message=git_dir / MESSAGE_FILE,
    )
