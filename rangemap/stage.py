import logging
from dataclasses import dataclass

from rangemap.interval import Interval
from rangemap.segment import Segment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stage:
    """Translation table from one labelled value space to the next.

    Segments are consulted in declared order. Values not covered by any
    segment map to themselves.
    """

    from_label: str
    to_label: str
    segments: tuple[Segment, ...] = ()

    def relation_of(self, value: int) -> int:
        for segment in self.segments:
            destination = segment.destination_of(value)
            if destination is not None:
                return destination
        return value

    def apply(self, interval: Interval) -> list[Interval]:
        """Map ``interval`` through every segment, returning unreduced pieces.

        Algorithm: keep a working list of not-yet-mapped fragments. Each
        segment splits every fragment; translated pieces are collected and
        the leftovers become the new working list. Whatever survives all
        segments is passed through unchanged.
        """
        mapped: list[Interval] = []
        remaining: list[Interval] = [interval]

        for segment in self.segments:
            if not remaining:
                break
            leftovers: list[Interval] = []
            for fragment in remaining:
                split = segment.split(fragment)
                mapped.extend(split.mapped)
                leftovers.extend(split.remainder)
            remaining = leftovers

        mapped.extend(remaining)
        logger.debug(
            "%s-to-%s: %s -> %d fragments (%d passed through)",
            self.from_label,
            self.to_label,
            interval,
            len(mapped),
            len(remaining),
        )
        return mapped
