"""Affine mapping rules: one contiguous domain shifted by a constant offset."""

from dataclasses import dataclass

from rangemap.interval import Interval


@dataclass(frozen=True)
class Split:
    """Result of pushing an interval through a segment.

    Attributes:
        mapped: Pieces that fell inside the segment's domain, already translated
        remainder: Untranslated pieces left of and right of the domain
    """

    mapped: tuple[Interval, ...] = ()
    remainder: tuple[Interval, ...] = ()


@dataclass(frozen=True, kw_only=True)
class Segment:
    source_start: int
    destination_start: int
    length: int

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError(
                f"Segment length must be positive, got {self.length}\n"
                f"(source_start={self.source_start}, "
                f"destination_start={self.destination_start})"
            )

    @classmethod
    def from_entry(
        cls, destination_start: int, source_start: int, length: int
    ) -> "Segment":
        """Build a segment from almanac column order (destination first)."""
        return cls(
            source_start=source_start,
            destination_start=destination_start,
            length=length,
        )

    @property
    def source_end(self) -> int:
        return self.source_start + self.length - 1

    @property
    def offset(self) -> int:
        return self.destination_start - self.source_start

    @property
    def domain(self) -> Interval:
        return Interval(start=self.source_start, end=self.source_end)

    def destination_of(self, value: int) -> int | None:
        """Translate ``value`` if it lies in the domain, else return None."""
        if value < self.source_start or value > self.source_end:
            return None
        return self.destination_start + (value - self.source_start)

    def split(self, interval: Interval) -> Split:
        """Cut ``interval`` at the domain edges and translate the inside part.

        Up to three pieces come out: the part before the domain and the part
        after it go to ``remainder`` (in that order), the overlap is shifted
        by ``offset`` and goes to ``mapped``. Together they cover exactly the
        values of ``interval``.
        """
        if interval.end < self.source_start or interval.start > self.source_end:
            return Split(remainder=(interval,))

        remainder: list[Interval] = []
        if interval.start < self.source_start:
            remainder.append(
                Interval(start=interval.start, end=self.source_start - 1)
            )

        overlap_start = max(interval.start, self.source_start)
        overlap_end = min(interval.end, self.source_end)
        mapped = Interval(
            start=overlap_start + self.offset, end=overlap_end + self.offset
        )

        if interval.end > self.source_end:
            remainder.append(Interval(start=self.source_end + 1, end=interval.end))

        return Split(mapped=(mapped,), remainder=tuple(remainder))
