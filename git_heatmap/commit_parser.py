"""
Parse commit dates into calendar days.

Commit sources hand over dates in whatever shape they have them (date
objects, ISO strings, unix timestamps, GitHub API payloads). Everything is
resolved here to a UTC calendar day, and anything malformed is rejected.
"""

from datetime import date, datetime, timezone


class InvalidCommitDateError(ValueError):
    """Raised when a commit date cannot be resolved to a calendar day."""

    def __init__(self, value, reason: str = "not a valid calendar date"):
        self.value = value
        super().__init__(f"Invalid commit date {value!r}: {reason}")


def parse_calendar_day(value) -> date:
    """
    Resolve a single commit date to a calendar day.

    Args:
        value: A date, a datetime or an ISO 8601 string such as
            "2024-03-01" or "2024-03-01T12:00:00Z". Values carrying a UTC
            offset are converted to UTC first; naive ones are taken as UTC.

    Returns:
        The calendar day

    Raises:
        InvalidCommitDateError: If the value is not a valid date
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidCommitDateError(value, f"unsupported type {type(value).__name__}")

    text = value.strip()
    if not text:
        raise InvalidCommitDateError(value, "empty string")

    if len(text) != 10:
        return _utc_day(text)
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise InvalidCommitDateError(value, str(e)) from e


def day_from_timestamp(timestamp) -> date:
    """
    Convert a unix timestamp (seconds) to its UTC calendar day.

    Args:
        timestamp: Seconds since the epoch, as an int or a numeric string

    Returns:
        The UTC calendar day

    Raises:
        InvalidCommitDateError: If the timestamp is not numeric or out of range
    """
    try:
        seconds = int(timestamp)
    except (TypeError, ValueError) as e:
        raise InvalidCommitDateError(timestamp, "timestamp is not an integer") from e

    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc).date()
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidCommitDateError(timestamp, "timestamp out of range") from e


def parse_git_log(output: str) -> list[date]:
    """
    Parse `git log --format=%ct` output into calendar days.

    Args:
        output: Raw stdout, one committer timestamp per line

    Returns:
        List of UTC calendar days, one per commit, in log order
    """
    return [day_from_timestamp(line) for line in output.splitlines() if line.strip()]


def parse_github_commits(commits: list[dict]) -> list[date]:
    """
    Extract committer dates from GitHub API commit objects.

    Prefers the committer date (what `git log %ct` reports) and falls back
    to the author date when the committer block is missing.

    Args:
        commits: List of commit dicts from GET /repos/{owner}/{repo}/commits

    Returns:
        List of UTC calendar days, one per commit

    Raises:
        InvalidCommitDateError: If a commit carries no usable date
    """
    days = []

    for item in commits:
        commit = item.get("commit", {})
        committer = commit.get("committer") or {}
        author = commit.get("author") or {}
        raw = committer.get("date") or author.get("date")

        if raw is None:
            sha = item.get("sha", "")[:7] or "unknown"
            raise InvalidCommitDateError(raw, f"commit {sha} has no date")

        days.append(_utc_day(raw))

    return days


def _utc_day(raw: str) -> date:
    """Resolve an ISO timestamp to its UTC calendar day."""
    if not isinstance(raw, str):
        raise InvalidCommitDateError(raw, f"unsupported type {type(raw).__name__}")
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError as e:
        raise InvalidCommitDateError(raw, str(e)) from e

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()
