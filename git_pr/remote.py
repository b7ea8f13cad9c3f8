"""Extract the forge owner and repository name from a git config file."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .exceptions import RepoError
from .fs import read_text
from .models import RepoIdentity

logger = logging.getLogger(__name__)

DEFAULT_HOST = "github.com"

_NAME = r"[A-Za-z0-9_-]+"


def remote_pattern(host: str = DEFAULT_HOST) -> re.Pattern[str]:
    """Match a remote section header followed directly by its url line.

    Both ``https://host/author/repo`` and ``git@host:author/repo`` are
    accepted, with or without a trailing ``.git``.
    """

    return re.compile(
        rf'^\[remote[ \t]+"(?P<remote>[^"\n]+)"\][ \t]*\r?\n'
        rf"[ \t]*url[ \t]*=[ \t]*(?:https?://|git@){re.escape(host)}[:/]?"
        rf"(?P<author>{_NAME})/(?P<repo>{_NAME})(?:\.git)?/?[ \t]*\r?$",
        re.MULTILINE,
    )


def repo_config(text: str, remote_name: str, host: str = DEFAULT_HOST) -> RepoIdentity:
    """Return the identity of ``remote_name`` from the config ``text``.

    Only sections named exactly ``remote_name`` are considered so a fork
    remote pointing at another owner is never picked up by accident. When a
    malformed config repeats the section, the first one wins.
    """

    for match in remote_pattern(host).finditer(text):
        if match.group("remote") != remote_name:
            continue
        identity = RepoIdentity(author=match.group("author"), repo_name=match.group("repo"))
        logger.debug("Remote %s resolves to %s", remote_name, identity.slug)
        return identity
    raise RepoError("failed to read repo config")


def read_repo_config(path: Path, remote_name: str, host: str = DEFAULT_HOST) -> RepoIdentity:
    return repo_config(read_text(path, ".git config file"), remote_name, host)
