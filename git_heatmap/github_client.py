"""
GitHub API client for fetching repository commit dates.
"""

import logging
from datetime import date

import requests

from git_heatmap.commit_parser import parse_github_commits

logger = logging.getLogger(__name__)


class GitHubClientError(Exception):
    """Base exception for GitHub client errors."""

    pass


class GitHubClient:
    """Client for interacting with the GitHub API."""

    BASE_URL = "https://api.github.com"

    def __init__(self, token: str | None = None, timeout: int = 30):
        """
        Initialize the GitHub client.

        Args:
            token: GitHub personal access token. Optional for public
                repositories, but unauthenticated requests are heavily
                rate limited.
            timeout: Seconds to wait for each request
        """
        self.token = token
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def get_commits(
        self,
        repo: str,
        since: str | None = None,
        until: str | None = None,
        per_page: int = 100,
    ) -> list[dict]:
        """
        Fetch every commit on the default branch of a repository.

        Follows pagination until a short page is returned.

        Args:
            repo: Repository full name (e.g., "owner/name")
            since: Only commits after this ISO 8601 timestamp
            until: Only commits before this ISO 8601 timestamp
            per_page: Page size (clamped to 1-100)

        Returns:
            List of commit dictionaries from the GitHub API

        Raises:
            GitHubClientError: If the API request fails
        """
        url = f"{self.BASE_URL}/repos/{repo}/commits"
        per_page = max(1, min(per_page, 100))
        params = {"per_page": per_page, "page": 1}
        if since:
            params["since"] = since
        if until:
            params["until"] = until

        commits = []
        while True:
            logger.debug(f"Fetching {url} page {params['page']}")
            try:
                response = self.session.get(url, params=params, timeout=self.timeout)
            except requests.RequestException as e:
                raise GitHubClientError(f"Request to GitHub failed: {e}") from e

            if response.status_code == 401:
                raise GitHubClientError(
                    "Authentication failed. Check your GITHUB_TOKEN is valid."
                )
            elif response.status_code == 404:
                raise GitHubClientError(f"Repository '{repo}' not found on GitHub.")
            elif response.status_code == 409:
                raise GitHubClientError(f"Repository '{repo}' is empty.")
            elif response.status_code == 403:
                # Check for rate limiting
                remaining = response.headers.get("X-RateLimit-Remaining", "unknown")
                raise GitHubClientError(
                    f"API rate limit exceeded or access forbidden. "
                    f"Remaining requests: {remaining}"
                )
            elif not response.ok:
                raise GitHubClientError(
                    f"GitHub API error: {response.status_code} - {response.text}"
                )

            page = response.json()
            commits.extend(page)
            if len(page) < per_page:
                break
            params["page"] += 1

        logger.debug(f"Fetched {len(commits)} commits for {repo}")
        return commits

    def get_commit_dates(self, repo: str, year: int) -> list[date]:
        """
        Fetch the UTC commit days of a repository for one year.

        Args:
            repo: Repository full name (e.g., "owner/name")
            year: Year to fetch

        Returns:
            List of calendar days, one per commit

        Raises:
            GitHubClientError: If the API request fails
            InvalidCommitDateError: If a commit has a malformed date
        """
        commits = self.get_commits(
            repo,
            since=f"{year}-01-01T00:00:00Z",
            until=f"{year}-12-31T23:59:59Z",
        )
        return parse_github_commits(commits)
