"""Label-chained stage traversal in scalar and range mode.

A pipeline holds stages keyed by their ``from`` label. Traversal starts at
``"seed"`` and follows ``to`` labels by repeated lookup until the requested
label is reached or no stage leads further.

Example:
    >>> pipeline = parse_almanac(text)
    >>> pipeline.value_at(79, "location")
    82
    >>> min(i.start for i in pipeline.ranges_at(pipeline.seed_ranges(), "location"))
    46
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from rangemap.interval import Interval, reduce_intervals
from rangemap.stage import Stage

logger = logging.getLogger(__name__)

SEED_LABEL = "seed"
LOCATION_LABEL = "location"


class LabelCycleError(RuntimeError):
    """The label chain revisits a label instead of ending."""


@dataclass(frozen=True)
class Pipeline:
    seeds: tuple[int, ...] = ()
    stages: Mapping[str, Stage] = field(default_factory=dict)

    def _max_hops(self) -> int:
        return len(self.stages) + 1

    def _cycle_error(self, label: str) -> LabelCycleError:
        return LabelCycleError(
            f"Label chain from {SEED_LABEL!r} did not end after "
            f"{self._max_hops()} hops (last label {label!r}).\n"
            f"Registered stages: "
            + ", ".join(f"{s.from_label}->{s.to_label}" for s in self.stages.values())
        )

    def _path_to(self, target_label: str) -> list[Stage] | None:
        """Stages leading from the seed label to ``target_label``.

        Returns None when the chain ends before reaching the target.

        Raises:
            LabelCycleError: If the walk exceeds one hop per registered stage
        """
        path: list[Stage] = []
        label = SEED_LABEL
        for _ in range(self._max_hops()):
            stage = self.stages.get(label)
            if stage is None:
                logger.debug(
                    "chain ended at %r before reaching %r", label, target_label
                )
                return None
            path.append(stage)
            label = stage.to_label
            if label == target_label:
                return path
        raise self._cycle_error(label)

    def labels(self) -> list[str]:
        """Every label reachable from the seed label, in chain order."""
        chain = [SEED_LABEL]
        for _ in range(self._max_hops()):
            stage = self.stages.get(chain[-1])
            if stage is None:
                return chain
            chain.append(stage.to_label)
        raise self._cycle_error(chain[-1])

    def value_at(self, seed_value: int, target_label: str) -> int | None:
        """Follow a single value through the chain up to ``target_label``."""
        path = self._path_to(target_label)
        if path is None:
            return None

        value = seed_value
        for stage in path:
            value = stage.relation_of(value)
        return value

    def ranges_at(
        self, seed_ranges: Iterable[Interval], target_label: str
    ) -> list[Interval]:
        """Follow whole intervals through the chain up to ``target_label``.

        Output of every stage is reduced before feeding the next one, so
        fragments that land next to each other are merged back together.
        Returns an empty list when the chain ends before the target.
        """
        path = self._path_to(target_label)
        if path is None:
            return []

        current = reduce_intervals(seed_ranges)
        for stage in path:
            current = reduce_intervals(
                piece for interval in current for piece in stage.apply(interval)
            )
            logger.debug(
                "after %s-to-%s: %d intervals",
                stage.from_label,
                stage.to_label,
                len(current),
            )
        return current

    def seed_ranges(self) -> list[Interval]:
        """Read the seeds as ``(start, length)`` pairs.

        Raises:
            ValueError: If the seed count is odd or a length is not positive
        """
        if len(self.seeds) % 2:
            raise ValueError(
                f"Seed ranges need (start, length) pairs, got {len(self.seeds)} "
                f"numbers: {list(self.seeds)}"
            )

        ranges: list[Interval] = []
        for start, length in zip(self.seeds[::2], self.seeds[1::2]):
            if length <= 0:
                raise ValueError(
                    f"Seed range starting at {start} has length {length}; "
                    f"lengths must be positive"
                )
            ranges.append(Interval(start=start, end=start + length - 1))
        return ranges

    def lowest_value(self, target_label: str = LOCATION_LABEL) -> int | None:
        """Smallest target value over the individual seeds."""
        values = [
            value
            for value in (self.value_at(seed, target_label) for seed in self.seeds)
            if value is not None
        ]
        return min(values, default=None)

    def lowest_range_value(self, target_label: str = LOCATION_LABEL) -> int | None:
        """Smallest target value reachable from any seed range."""
        ranges = self.ranges_at(self.seed_ranges(), target_label)
        return min((interval.start for interval in ranges), default=None)
