"""HTTP client for the forge pull request endpoint."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

import requests

from .exceptions import ApiError, DecodeError, OtherError
from .models import PullRequestCreated, RepoIdentity
from .payload import PullRequestPayload

logger = logging.getLogger(__name__)

DEFAULT_API_HOST = "api.github.com"


class ForgeClient:
    """Create pull requests through the forge REST API.

    Each call is a single request. Nothing is retried and no timeout is set,
    rerunning the command is the retry mechanism.
    """

    def __init__(self, api_host: str = DEFAULT_API_HOST, session: requests.Session | None = None):
        self.api_host = api_host
        self.session = session

    def endpoint(self, identity: RepoIdentity) -> str:
        return f"https://{self.api_host}/repos/{identity.author}/{identity.repo_name}/pulls"

    def submit(
        self,
        identity: RepoIdentity,
        credential: str,
        payload: PullRequestPayload,
    ) -> PullRequestCreated:
        """POST ``payload`` using basic auth with the author and ``credential``.

        Returns:
            The created pull request's URL and number.

        Raises:
            ApiError: The forge answered with anything other than 201.
            DecodeError: The response body is not the expected JSON shape.
            OtherError: The request never completed (connection, TLS, ...).
        """
        url = self.endpoint(identity)
        logger.debug("POST %s head=%s base=%s", url, payload["head"], payload["base"])
        session = self.session or requests.Session()
        try:
            response = session.post(
                url,
                json=payload,
                auth=(identity.author, credential),
                headers={"Accept": "application/vnd.github+json"},
            )
        except requests.RequestException as exc:
            raise OtherError(f"Request to {url} failed: {exc}") from exc
        finally:
            if self.session is None:
                session.close()
        logger.debug("Forge responded with HTTP %s", response.status_code)
        return interpret_response(response)


def interpret_response(response: requests.Response) -> PullRequestCreated:
    """Classify a forge response into a created pull request or an error."""

    status = response.status_code
    try:
        data: Any = response.json()
    except ValueError as exc:
        raise DecodeError(f"Invalid JSON in forge response (HTTP {status}): {exc}") from exc
    if not isinstance(data, dict):
        raise DecodeError(f"Unexpected forge response (HTTP {status}): expected a JSON object")

    if status == HTTPStatus.CREATED:
        url = data.get("html_url")
        number = data.get("number")
        if not isinstance(url, str):
            raise DecodeError("Forge response is missing 'html_url'")
        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise DecodeError("Forge response is missing a valid 'number'")
        return PullRequestCreated(url=url, number=number)

    message = data.get("message")
    if not isinstance(message, str):
        raise DecodeError(f"Forge response (HTTP {status}) is missing 'message'")
    # 422 responses put the useful reason under "errors"
    errors = data.get("errors")
    if not isinstance(errors, list):
        errors = []
    details = [
        item["message"]
        for item in errors
        if isinstance(item, dict) and isinstance(item.get("message"), str)
    ]
    if details:
        message = f"{message}: {'; '.join(details)}"
    raise ApiError(message, status_code=status)
