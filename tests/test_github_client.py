"""
Tests for the GitHub API client.
"""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest
import requests

from git_heatmap.github_client import GitHubClient, GitHubClientError


def _response(status_code=200, json_data=None, headers=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = json_data if json_data is not None else []
    response.headers = headers or {}
    response.text = text
    return response


def _commit(iso_date: str, sha: str = "abcdef1234") -> dict:
    return {"sha": sha, "commit": {"committer": {"date": iso_date}}}


class TestGitHubClient:
    """Tests for the GitHub API client."""

    def test_client_initialization(self):
        """Client should store the token and set up session headers."""
        client = GitHubClient("test_token")

        assert client.token == "test_token"
        assert "Bearer test_token" in client.session.headers["Authorization"]
        assert client.session.headers["Accept"] == "application/vnd.github+json"
        assert "X-GitHub-Api-Version" in client.session.headers

    def test_client_without_token(self):
        """Public repositories can be read anonymously."""
        client = GitHubClient()
        assert "Authorization" not in client.session.headers

    @patch("requests.Session.get")
    def test_get_commits_single_page(self, mock_get):
        """Should return commits from a single short page."""
        mock_get.return_value = _response(json_data=[_commit("2021-01-01T00:00:00Z")])

        client = GitHubClient("test_token")
        commits = client.get_commits("owner/repo")

        assert len(commits) == 1
        mock_get.assert_called_once()
        assert mock_get.call_args.args[0] == "https://api.github.com/repos/owner/repo/commits"

    @patch("requests.Session.get")
    def test_get_commits_follows_pages(self, mock_get):
        """Should keep fetching until a short page."""
        page_one = [_commit("2021-01-01T00:00:00Z"), _commit("2021-01-02T00:00:00Z")]
        page_two = [_commit("2021-01-03T00:00:00Z")]
        mock_get.side_effect = [_response(json_data=page_one), _response(json_data=page_two)]

        client = GitHubClient("test_token")
        commits = client.get_commits("owner/repo", per_page=2)

        assert len(commits) == 3
        assert mock_get.call_count == 2

    @patch("requests.Session.get")
    def test_per_page_capped(self, mock_get):
        """Page size is capped at the API maximum of 100."""
        mock_get.return_value = _response(json_data=[])

        GitHubClient().get_commits("owner/repo", per_page=500)

        assert mock_get.call_args.kwargs["params"]["per_page"] == 100

    @patch("requests.Session.get")
    def test_non_positive_per_page_clamped(self, mock_get):
        """A zero page size is raised to 1 so pagination still terminates."""
        mock_get.return_value = _response(json_data=[])

        GitHubClient().get_commits("owner/repo", per_page=0)

        assert mock_get.call_args.kwargs["params"]["per_page"] == 1
        mock_get.assert_called_once()

    @patch("requests.Session.get")
    def test_get_commits_auth_failure(self, mock_get):
        """Should raise error on 401 unauthorized."""
        mock_get.return_value = _response(status_code=401)

        with pytest.raises(GitHubClientError, match="Authentication failed"):
            GitHubClient("bad_token").get_commits("owner/repo")

    @patch("requests.Session.get")
    def test_get_commits_not_found(self, mock_get):
        """Should raise error on 404 not found."""
        mock_get.return_value = _response(status_code=404)

        with pytest.raises(GitHubClientError, match="not found"):
            GitHubClient("test_token").get_commits("owner/missing")

    @patch("requests.Session.get")
    def test_get_commits_empty_repository(self, mock_get):
        """Should raise error on 409 for an empty repository."""
        mock_get.return_value = _response(status_code=409)

        with pytest.raises(GitHubClientError, match="is empty"):
            GitHubClient("test_token").get_commits("owner/empty")

    @patch("requests.Session.get")
    def test_get_commits_rate_limited(self, mock_get):
        """Should raise error on 403 rate limit."""
        mock_get.return_value = _response(
            status_code=403, headers={"X-RateLimit-Remaining": "0"}
        )

        with pytest.raises(GitHubClientError, match="rate limit"):
            GitHubClient("test_token").get_commits("owner/repo")

    @patch("requests.Session.get")
    def test_get_commits_server_error(self, mock_get):
        """Should include the status code on other failures."""
        mock_get.return_value = _response(status_code=500, text="Internal Server Error")

        with pytest.raises(GitHubClientError, match="500"):
            GitHubClient("test_token").get_commits("owner/repo")

    @patch("requests.Session.get")
    def test_get_commits_network_error(self, mock_get):
        """Should wrap connection failures."""
        mock_get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(GitHubClientError, match="connection refused"):
            GitHubClient("test_token").get_commits("owner/repo")

    @patch("requests.Session.get")
    def test_get_commit_dates_limits_to_year(self, mock_get):
        """Should request only the target year and parse the dates."""
        mock_get.return_value = _response(
            json_data=[_commit("2021-06-01T12:00:00Z"), _commit("2021-06-01T13:00:00Z")]
        )

        dates = GitHubClient("test_token").get_commit_dates("owner/repo", 2021)

        assert dates == [date(2021, 6, 1), date(2021, 6, 1)]
        params = mock_get.call_args.kwargs["params"]
        assert params["since"] == "2021-01-01T00:00:00Z"
        assert params["until"] == "2021-12-31T23:59:59Z"
