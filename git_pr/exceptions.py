"""Custom error hierarchy for git-pr."""

from __future__ import annotations


class PrError(RuntimeError):
    """Base error for the CLI.

    ``kind`` names the failure class shown to the user and ``exit_code`` is
    the process status the CLI exits with.
    """

    kind = "error"
    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class IoError(PrError):
    """Raised when a local file cannot be read or written."""

    kind = "io"
    exit_code = 2


class RepoError(PrError):
    """Raised when HEAD, config or the message file has an unexpected shape."""

    kind = "repo"
    exit_code = 3


class DecodeError(PrError):
    """Raised when the forge response body does not have the expected shape."""

    kind = "decode"
    exit_code = 4


class ApiError(PrError):
    """Raised when the forge rejects the pull request."""

    kind = "api"
    exit_code = 5

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OtherError(PrError):
    """Raised for transport failures and anything not classified above."""

    kind = "other"
    exit_code = 1


class MissingEnvError(OtherError):
    """Raised when a required environment variable is absent."""


__all__ = [
    "PrError",
    "IoError",
    "RepoError",
    "DecodeError",
    "ApiError",
    "OtherError",
    "MissingEnvError",
]
