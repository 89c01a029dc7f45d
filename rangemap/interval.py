from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True, order=True)
class Interval:
    """A closed range of integers, ``start`` and ``end`` both included."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Interval start ({self.start}) must be <= end ({self.end})"
            )

    def __str__(self) -> str:
        """Human-friendly string showing range and length."""
        return f"Interval({self.start}→{self.end}, {self.length} values)"

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def overlaps_or_touches(self, other: "Interval") -> bool:
        """True if the intervals share a value or sit next to each other."""
        return self.end + 1 >= other.start and self.start <= other.end + 1

    def merge(self, other: "Interval") -> "Interval":
        """Return the single interval covering both ``self`` and ``other``.

        Raises:
            ValueError: If the intervals leave a gap between them
        """
        if not self.overlaps_or_touches(other):
            raise ValueError(
                f"Cannot merge disjoint intervals {self} and {other}.\n"
                f"Hint: check overlaps_or_touches() first, or collect both "
                f"with reduce_intervals([a, b])"
            )
        return Interval(
            start=min(self.start, other.start), end=max(self.end, other.end)
        )


def reduce_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    """Coalesce intervals into the minimal sorted covering set.

    Overlapping and adjacent intervals are merged into single continuous
    spans. The output is sorted by start and consecutive intervals are
    separated by at least one uncovered value.

    Example:
        >>> reduce_intervals([Interval(start=5, end=7), Interval(start=1, end=4)])
        [Interval(start=1, end=7)]
    """
    reduced: list[Interval] = []
    for interval in sorted(intervals):
        if reduced and reduced[-1].overlaps_or_touches(interval):
            reduced[-1] = reduced[-1].merge(interval)
        else:
            reduced.append(interval)
    return reduced
