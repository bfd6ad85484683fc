"""
Configuration management for git-heatmap.

Loads settings from environment variables (and a .env file if present).
"""

import os
from dotenv import load_dotenv

from git_heatmap.intensity import DEFAULT_SCALE, IntensityScale

# Load .env file from project root
load_dotenv()

GITHUB_TOKEN = os.getenv("GITHUB_TOKEN")
GIT_HEATMAP_REPO = os.getenv("GIT_HEATMAP_REPO", ".")
GIT_HEATMAP_THRESHOLDS = os.getenv("GIT_HEATMAP_THRESHOLDS")


def _parse_thresholds(value: str) -> list[int]:
    try:
        return [int(part) for part in value.split(",")]
    except ValueError:
        raise ValueError(
            f"GIT_HEATMAP_THRESHOLDS must be a comma-separated list of integers, got {value!r}"
        )


def load_intensity_scale() -> IntensityScale:
    """
    Build the intensity scale from GIT_HEATMAP_THRESHOLDS.

    Returns:
        The configured scale, or the default 1,2,4,6 scale when unset

    Raises:
        ValueError: If the setting is malformed
    """
    if not GIT_HEATMAP_THRESHOLDS:
        return DEFAULT_SCALE

    minimums = _parse_thresholds(GIT_HEATMAP_THRESHOLDS)
    try:
        return IntensityScale.from_thresholds(minimums)
    except ValueError as e:
        raise ValueError(f"Invalid GIT_HEATMAP_THRESHOLDS {GIT_HEATMAP_THRESHOLDS!r}: {e}")


def validate_config(require_github: bool = False):
    """
    Validate the configuration.

    Args:
        require_github: Also require a usable GITHUB_TOKEN

    Raises:
        ValueError: Describing every problem found
    """
    problems = []

    if require_github and GITHUB_TOKEN == "your_token_here":
        problems.append(
            "GITHUB_TOKEN still holds the placeholder value from .env.example"
        )

    if not GIT_HEATMAP_REPO:
        problems.append("GIT_HEATMAP_REPO is empty")

    try:
        load_intensity_scale()
    except ValueError as e:
        problems.append(str(e))

    if problems:
        raise ValueError(
            "Invalid configuration:\n"
            + "\n".join(f"  - {problem}" for problem in problems)
        )
