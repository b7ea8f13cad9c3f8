"""Main application orchestration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from . import config, render
from .api import ForgeClient
from .exceptions import RepoError
from .head import branch
from .message import edit_and_parse, parse_message, write_template
from .models import PullRequestCreated, PullRequestRequest
from .payload import build_payload
from .remote import read_repo_config

logger = logging.getLogger(__name__)


def run(
    remote: str,
    target: str,
    message: Optional[str] = None,
    repo: Optional[Path] = None,
    dry_run: bool = False,
    verbose: bool = False,
    client: Optional[ForgeClient] = None,
) -> Optional[PullRequestCreated]:
    """Open a pull request from the current branch into ``target``.

    Args:
        remote: Name of the remote section whose URL identifies the repository
        target: Branch the pull request should merge into
        message: Title and description; the editor is skipped when given
        repo: Any path inside the repository (defaults to the cwd)
        dry_run: Stop after building the request body
        verbose: Show the request body before sending it
        client: Forge client to submit with

    Returns:
        The created pull request, or None on a dry run.

    Raises:
        PrError: Any stage failed; nothing is retried.
    """
    paths = config.resolve_paths(repo)
    logger.debug("Using git directory %s", paths.git_dir)

    head_branch = branch(paths.head)
    identity = read_repo_config(paths.config, remote, host=config.get_forge_host())
    if head_branch == target:
        raise RepoError(f"Cannot request a pull from '{head_branch}' into itself")

    # fail before the user spends time writing a message
    token = None if dry_run else config.get_token()

    if message is None:
        write_template(paths.message, target, head_branch)
        pr_message = edit_and_parse(paths.message, config.get_editor())
    else:
        pr_message = parse_message(message)

    request = PullRequestRequest(
        target_branch=target,
        head_branch=head_branch,
        message=pr_message,
    )
    payload = build_payload(request)
    render.preview_request(identity, request)
    render.show_payload(payload, verbose=verbose or dry_run)

    if dry_run:
        render.info("Dry run - pull request not submitted")
        return None

    client = client or ForgeClient(api_host=config.get_api_host())
    created = client.submit(identity, token, payload)
    render.show_created(created)
    return created
