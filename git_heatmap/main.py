"""
git-heatmap: a terminal calendar heatmap of commit activity.

Entry point for the application.
"""

import logging
import sys
from datetime import date, datetime, timezone

import click
from rich.console import Console

from git_heatmap import __version__, config
from git_heatmap.git_client import GitClientError, GitRepository
from git_heatmap.github_client import GitHubClient, GitHubClientError
from git_heatmap.grid_assembler import build_heatmap
from git_heatmap.renderer import render_heatmap


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _fetch_commit_dates(repo: str, github: str | None, year: int) -> list[date]:
    if github:
        client = GitHubClient(config.GITHUB_TOKEN)
        return client.get_commit_dates(github, year)
    return GitRepository(repo).commit_dates()


@click.command()
@click.option(
    "-r",
    "--repo",
    default=None,
    help="Path to the git repository (default: GIT_HEATMAP_REPO or the current directory)",
)
@click.option("-y", "--year", type=int, default=None, help="Year to show (default: current year)")
@click.option("--github", metavar="OWNER/NAME", default=None, help="Read commits from a GitHub repository instead")
@click.option("--clear/--no-clear", default=True, help="Clear the terminal before drawing")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(__version__)
def main(repo: str | None, year: int | None, github: str | None, clear: bool, debug: bool):
    """Show a GitHub-style commit heatmap for one year."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    try:
        config.validate_config(require_github=bool(github))
        scale = config.load_intensity_scale()
    except ValueError as e:
        _fail(f"Configuration error: {e}")

    repo_path = repo or config.GIT_HEATMAP_REPO
    if year is None:
        # Commit days are UTC days, so "this year" is the UTC year too
        year = datetime.now(timezone.utc).year

    click.echo(f"Repo: {github or repo_path}")
    click.echo(f"Year: {year}")

    try:
        commit_dates = _fetch_commit_dates(repo_path, github, year)
        grid = build_heatmap(commit_dates, year, scale=scale)
    except (GitClientError, GitHubClientError) as e:
        _fail(str(e))
    except ValueError as e:
        # Malformed commit dates and years outside 1-9999
        _fail(str(e))

    console = Console()
    if clear:
        console.clear()
    render_heatmap(console, grid)


if __name__ == "__main__":
    main()
