"""
Local git repository client for fetching commit dates.
"""

import logging
import subprocess
from datetime import date
from pathlib import Path

from git_heatmap.commit_parser import parse_git_log

logger = logging.getLogger(__name__)


class GitClientError(Exception):
    """Base exception for git client errors."""

    pass


class RepositoryNotFoundError(GitClientError):
    """Raised when the path is not inside a git repository."""

    pass


class NoCommitsError(GitClientError):
    """Raised when no commits are reachable from HEAD."""

    pass


class GitRepository:
    """A local git repository read through the git command line."""

    def __init__(self, path: str | Path = ".", timeout: int = 60):
        """
        Open a git repository.

        Args:
            path: Path to the repository (or any directory inside it)
            timeout: Seconds to wait for each git invocation

        Raises:
            RepositoryNotFoundError: If the path is not a git repository
            GitClientError: If git is unavailable
        """
        self.path = Path(path)
        self.timeout = timeout

        if not self.path.is_dir():
            raise RepositoryNotFoundError(f"Repository path '{self.path}' does not exist.")

        result = self._run("rev-parse", "--git-dir")
        if result.returncode != 0:
            raise RepositoryNotFoundError(
                f"'{self.path}' is not a git repository: {result.stderr.strip()}"
            )

    def _run(self, *args: str) -> subprocess.CompletedProcess:
        cmd = ["git", *args]
        logger.debug(f"Running {' '.join(cmd)} in {self.path}")
        try:
            return subprocess.run(
                cmd,
                cwd=str(self.path),
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            raise GitClientError("git executable not found. Is git installed?")
        except subprocess.TimeoutExpired:
            raise GitClientError(f"git {args[0]} timed out after {self.timeout}s")

    def commit_timestamps(self) -> list[str]:
        """
        Fetch committer timestamps of every commit reachable from HEAD.

        Returns:
            Unix timestamps as strings, newest first

        Raises:
            NoCommitsError: If HEAD is unborn or has no commits
            GitClientError: If git log fails for another reason
        """
        head = self._run("rev-parse", "--verify", "--quiet", "HEAD")
        if head.returncode != 0:
            raise NoCommitsError(f"No commits found in '{self.path}' (HEAD does not exist).")

        result = self._run("log", "--format=%ct", "HEAD")
        if result.returncode != 0:
            raise GitClientError(f"git log failed: {result.stderr.strip()}")

        timestamps = [line.strip() for line in result.stdout.splitlines() if line.strip()]
        if not timestamps:
            raise NoCommitsError(f"No commits reachable from HEAD in '{self.path}'.")

        logger.debug(f"Read {len(timestamps)} commits from {self.path}")
        return timestamps

    def commit_dates(self) -> list[date]:
        """
        Fetch the UTC calendar day of every commit reachable from HEAD.

        Raises:
            NoCommitsError: If there are no commits
            InvalidCommitDateError: If git reports a malformed timestamp
        """
        return parse_git_log("\n".join(self.commit_timestamps()))
