"""
Intensity classification for heatmap cells.

Maps a day's commit count to one of five ordered buckets. The thresholds
live in an IntensityScale so they can be configured; the default scale is:

    0 commits   -> ZERO
    1 commit    -> LOW
    2-3 commits -> MEDIUM
    4-5 commits -> HIGH
    6+ commits  -> VERY_HIGH
"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IntensityBucket(IntEnum):
    """Ordered intensity levels, lowest first."""

    ZERO = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    VERY_HIGH = 4


class IntensityScale(BaseModel):
    """Monotonic list of (minimum count, bucket) pairs."""

    model_config = ConfigDict(frozen=True)

    thresholds: tuple[tuple[int, IntensityBucket], ...] = Field(
        default=(
            (0, IntensityBucket.ZERO),
            (1, IntensityBucket.LOW),
            (2, IntensityBucket.MEDIUM),
            (4, IntensityBucket.HIGH),
            (6, IntensityBucket.VERY_HIGH),
        ),
        min_length=1,
        description="(minimum commit count, bucket) pairs in ascending order",
    )

    @field_validator("thresholds")
    @classmethod
    def _check_monotonic(cls, thresholds):
        if thresholds[0][0] != 0:
            raise ValueError("the first threshold must start at 0 commits")

        for (prev_min, prev_bucket), (cur_min, cur_bucket) in zip(thresholds, thresholds[1:]):
            if cur_min <= prev_min:
                raise ValueError(
                    f"thresholds must be strictly increasing, got {prev_min} then {cur_min}"
                )
            if cur_bucket < prev_bucket:
                raise ValueError(
                    f"buckets must not decrease, got {prev_bucket.name} then {cur_bucket.name}"
                )
        return thresholds

    @classmethod
    def from_thresholds(cls, minimums: list[int]) -> "IntensityScale":
        """
        Build a scale from the minimum counts of LOW, MEDIUM, HIGH, VERY_HIGH.

        Args:
            minimums: Exactly four ascending positive counts, e.g. [1, 2, 4, 6]

        Raises:
            ValueError: If the list has the wrong length or is not ascending
        """
        buckets = list(IntensityBucket)[1:]
        if len(minimums) != len(buckets):
            raise ValueError(
                f"expected {len(buckets)} thresholds, got {len(minimums)}"
            )
        pairs = [(0, IntensityBucket.ZERO)] + list(zip(minimums, buckets))
        return cls(thresholds=pairs)

    def classify(self, count: int) -> IntensityBucket:
        if count < 0:
            raise ValueError(f"Commit count must be nonnegative, got {count}")

        bucket = self.thresholds[0][1]
        for minimum, candidate in self.thresholds:
            if count < minimum:
                break
            bucket = candidate
        return bucket


DEFAULT_SCALE = IntensityScale()


def classify(count: int, scale: IntensityScale = DEFAULT_SCALE) -> IntensityBucket:
    """
    Classify a day's commit count into an intensity bucket.

    Args:
        count: Number of commits for the day (>= 0)
        scale: Thresholds to use (default: 0 / 1 / 2-3 / 4-5 / 6+)

    Returns:
        The matching IntensityBucket

    Raises:
        ValueError: If count is negative
    """
    return scale.classify(count)
