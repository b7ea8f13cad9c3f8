"""Collect the pull request title and description through an editor."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .exceptions import IoError, OtherError, RepoError
from .fs import read_text, split_lines
from .models import PullRequestMessage

logger = logging.getLogger(__name__)

SENTINEL = "// Requesting a pull to"

TEMPLATE = """

// Requesting a pull to {target} from {current}
// Write a message for this pull request. The first line
// of text is the title and the rest is the description.
// All lines beginning with // will be ignored"""


def render_template(target: str, current: str) -> str:
    return TEMPLATE.format(target=target, current=current)


def write_template(path: Path, target: str, current: str) -> None:
    """Write the editable message file with an empty title area."""

    try:
        Path(path).write_text(render_template(target, current), encoding="utf-8")
    except OSError as exc:
        raise IoError(f"Cannot write pull request message file; {exc}") from exc
    logger.debug("Wrote message template to %s", path)


def launch_editor(path: Path, editor: str) -> None:
    """Open ``path`` in ``editor`` and block until it exits.

    The editor value may carry its own arguments (``code --wait``), so it is
    handed to the shell the same way git treats ``GIT_EDITOR``.
    """

    cmd = ["sh", "-c", f'{editor} "$@"', editor, str(path)]
    logger.debug("Launching editor: %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, check=False)
    except OSError as exc:
        raise OtherError(f"Unable to launch editor '{editor}': {exc}") from exc
    if proc.returncode != 0:
        raise OtherError(f"Editor '{editor}' exited with status {proc.returncode}")


def parse_message(text: str) -> PullRequestMessage:
    """Split edited text into a title and a flattened body.

    The first line is the title. Following lines are concatenated without a
    separator until the sentinel comment, which ends the editable region.
    """

    lines = split_lines(text)
    if not lines or not lines[0].strip():
        raise RepoError("Unable to read title")
    body_lines: list[str] = []
    for line in lines[1:]:
        if line.startswith(SENTINEL):
            break
        body_lines.append(line)
    return PullRequestMessage(title=lines[0], body="".join(body_lines))


def read_message(path: Path) -> PullRequestMessage:
    return parse_message(read_text(path, "pull request message file"))


def edit_and_parse(path: Path, editor: str) -> PullRequestMessage:
    launch_editor(path, editor)
    message = read_message(path)
    logger.debug("Parsed message title: %s", message.title)
    return message
