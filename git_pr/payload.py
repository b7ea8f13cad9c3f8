"""Serialize a pull request into the forge's request body."""

from __future__ import annotations

from typing import TypedDict

from .models import PullRequestRequest


class PullRequestPayload(TypedDict):
    """JSON body accepted by ``POST /repos/{owner}/{repo}/pulls``."""

    title: str
    body: str
    head: str
    base: str


def build_payload(request: PullRequestRequest) -> PullRequestPayload:
    return PullRequestPayload(
        title=request.message.title,
        body=request.message.body,
        head=request.head_branch,
        base=request.target_branch,
    )
