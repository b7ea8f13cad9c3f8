"""Module entrypoint for `python -m git_pr`."""

from __future__ import annotations

from .cli import app


def main() -> None:
    app(prog_name="git-pr")


if __name__ == "__main__":
    main()
