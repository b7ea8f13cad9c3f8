"""Tests for environment configuration and git directory discovery."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from git_pr import config
from git_pr.exceptions import MissingEnvError, OtherError, RepoError

MANAGED_VARS = (
    *config.TOKEN_VARS,
    *config.EDITOR_VARS,
    "GIT_PR_BASE",
    "GIT_PR_HOST",
    "GIT_PR_API_HOST",
)


class EnvironmentTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch.dict(os.environ)
        patcher.start()
        self.addCleanup(patcher.stop)
        for var in MANAGED_VARS:
            os.environ.pop(var, None)

    def test_defaults(self) -> None:
        self.assertEqual(config.get_default_base(), "master")
        self.assertEqual(config.get_forge_host(), "github.com")
        self.assertEqual(config.get_api_host(), "api.github.com")
        self.assertEqual(config.get_editor(), "vi")

    def test_overrides(self) -> None:
        os.environ["GIT_PR_BASE"] = "main"
        os.environ["GIT_PR_HOST"] = "git.example.org"
        os.environ["GIT_PR_API_HOST"] = "git.example.org/api/v3"

        self.assertEqual(config.get_default_base(), "main")
        self.assertEqual(config.get_forge_host(), "git.example.org")
        self.assertEqual(config.get_api_host(), "git.example.org/api/v3")

    def test_git_editor_wins_over_editor(self) -> None:
        os.environ["EDITOR"] = "nano"
        self.assertEqual(config.get_editor(), "nano")

        os.environ["GIT_EDITOR"] = "vim"
        self.assertEqual(config.get_editor(), "vim")

    def test_token_lookup_order(self) -> None:
        os.environ["GITHUB_TOKEN"] = "from-github"
        self.assertEqual(config.get_token(), "from-github")

        os.environ["GIT_PR_TOKEN"] = "from-git-pr"
        self.assertEqual(config.get_token(), "from-git-pr")

    def test_missing_token(self) -> None:
        with self.assertRaises(MissingEnvError) as ctx:
            config.get_token()

        self.assertIsInstance(ctx.exception, OtherError)
        self.assertIn("GITHUB_TOKEN", str(ctx.exception))


class GitDirTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()

    def test_walks_up_to_git_dir(self) -> None:
        (self.root / ".git").mkdir()
        nested = self.root / "src" / "pkg"
        nested.mkdir(parents=True)

        self.assertEqual(config.find_git_dir(nested), self.root / ".git")

    def test_outside_repository(self) -> None:
        with self.assertRaises(RepoError):
            config.find_git_dir(self.root)

    def test_gitdir_file_stops_the_walk(self) -> None:
        (self.root / ".git" / "modules" / "lib").mkdir(parents=True)
        submodule = self.root / "vendor" / "lib"
        submodule.mkdir(parents=True)
        (submodule / ".git").write_text("gitdir: ../../.git/modules/lib\n", encoding="utf-8")

        self.assertEqual(config.find_git_dir(submodule), self.root / ".git" / "modules" / "lib")

    def test_broken_gitdir_file_is_repo_error(self) -> None:
        (self.root / ".git").mkdir()
        submodule = self.root / "vendor" / "lib"
        submodule.mkdir(parents=True)
        (submodule / ".git").write_text("gitdir: ../missing\n", encoding="utf-8")

        with self.assertRaises(RepoError):
            config.find_git_dir(submodule)

        (submodule / ".git").write_text("not a pointer\n", encoding="utf-8")

        with self.assertRaises(RepoError):
            config.find_git_dir(submodule)

    def test_linked_worktree_reads_shared_config(self) -> None:
        worktree_git = self.root / "main" / ".git" / "worktrees" / "feature"
        worktree_git.mkdir(parents=True)
        (worktree_git / "commondir").write_text("../..\n", encoding="utf-8")
        checkout = self.root / "feature"
        checkout.mkdir()
        (checkout / ".git").write_text(f"gitdir: {worktree_git}\n", encoding="utf-8")

        paths = config.resolve_paths(checkout)

        self.assertEqual(paths.head, worktree_git / "HEAD")
        self.assertEqual(paths.config, self.root / "main" / ".git" / "config")
        self.assertEqual(paths.message, worktree_git / "PR_EDITMSG")

    def test_resolve_paths(self) -> None:
        (self.root / ".git").mkdir()

        paths = config.resolve_paths(self.root)

        self.assertEqual(paths.head, self.root / ".git" / "HEAD")
        self.assertEqual(paths.config, self.root / ".git" / "config")
        self.assertEqual(paths.message, self.root / ".git" / "PR_EDITMSG")


if __name__ == "__main__":
    unittest.main()
