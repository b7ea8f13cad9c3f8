"""Tests for reading the current branch from HEAD."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from git_pr.exceptions import IoError, RepoError
from git_pr.head import branch, current_branch


class CurrentBranchTests(unittest.TestCase):
    def test_simple_branch(self) -> None:
        self.assertEqual(current_branch("ref: refs/heads/test-branch\n"), "test-branch")

    def test_branch_with_path_segments(self) -> None:
        self.assertEqual(current_branch("ref: refs/heads/feat/test-branch"), "feat/test-branch")
        self.assertEqual(
            current_branch("ref: refs/heads/feat/nested//test-branch"),
            "feat/nested//test-branch",
        )

    def test_only_first_line_is_used(self) -> None:
        self.assertEqual(current_branch("ref: refs/heads/main\nref: refs/heads/other\n"), "main")

    def test_detached_head_is_repo_error(self) -> None:
        with self.assertRaises(RepoError):
            current_branch("4b825dc642cb6eb9a060e54bf8d69288fbee4904\n")

    def test_only_newlines_end_the_first_line(self) -> None:
        self.assertEqual(current_branch("ref: refs/heads/feat\x0cfix\u2028x\r\nnext\n"), "feat\x0cfix\u2028x")

    def test_empty_contents_is_io_error(self) -> None:
        with self.assertRaises(IoError):
            current_branch("")


class BranchTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)

    def test_reads_branch_from_file(self) -> None:
        head = self.root / "HEAD"
        head.write_text("ref: refs/heads/test-branch\n", encoding="utf-8")

        self.assertEqual(branch(head), "test-branch")

    def test_missing_file_reports_os_cause(self) -> None:
        with self.assertRaises(IoError) as ctx:
            branch(self.root / "HEAD_FILENOTFOUND")

        self.assertIn("Cannot read .git HEAD file", str(ctx.exception))
        self.assertIn("No such file or directory", str(ctx.exception))
        self.assertEqual(ctx.exception.kind, "io")

    def test_broken_file_is_repo_error(self) -> None:
        head = self.root / "HEAD_BROKEN"
        head.write_text("this is not a ref\n", encoding="utf-8")

        with self.assertRaises(RepoError) as ctx:
            branch(head)

        self.assertEqual(str(ctx.exception), "Could not find current branch from git HEAD")


if __name__ == "__main__":
    unittest.main()
