"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RepoIdentity:
    """Owner/repository pair taken from a remote URL."""

    author: str
    repo_name: str

    @property
    def slug(self) -> str:
        return f"{self.author}/{self.repo_name}"


@dataclass(frozen=True)
class RepoPaths:
    """Files inside the git directory that the pipeline reads or writes."""

    git_dir: Path
    head: Path
    config: Path
    message: Path


@dataclass(frozen=True)
class PullRequestMessage:
    """Title and description collected from the user."""

    title: str
    body: str


@dataclass(frozen=True)
class PullRequestRequest:
    """Everything needed to open a pull request from head into target."""

    target_branch: str
    head_branch: str
    message: PullRequestMessage


@dataclass(frozen=True)
class PullRequestCreated:
    """Successful forge response."""

    url: str
    number: int
