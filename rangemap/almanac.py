"""Parse almanac text into a Pipeline.

Format:

    seeds: 79 14 55 13

    seed-to-soil map:
    50 98 2
    52 50 48

    soil-to-fertilizer map:
    ...

Each entry line is ``destination_start source_start length``. Parsing is
fail-fast: any malformed part raises an ``AlmanacError`` and no pipeline is
returned.
"""

import logging
import re
from os import PathLike

from rangemap.pipeline import SEED_LABEL, Pipeline
from rangemap.segment import Segment
from rangemap.stage import Stage

logger = logging.getLogger(__name__)

_BLOCK_SEPARATOR = re.compile(r"\n[ \t]*\n(?:[ \t]*\n)*")
_HEADER = re.compile(r"^seeds:(?P<numbers>.*)$")
_TITLE = re.compile(r"^(?P<from_label>\w+)-to-(?P<to_label>\w+)\s+map:$")


class AlmanacError(ValueError):
    """Base class for almanac parsing errors."""

    def __init__(self, message: str, text: str):
        super().__init__(f"{message}: {text!r}")
        self.text: str = text


class MalformedHeader(AlmanacError):
    pass


class MalformedTableTitle(AlmanacError):
    pass


class MalformedEntry(AlmanacError):
    pass


class UnknownLabel(AlmanacError):
    pass


def _unsigned(token: str) -> int | None:
    return int(token) if token.isdecimal() else None


def parse_seeds(line: str) -> tuple[int, ...]:
    """Parse a ``seeds: n1 n2 ...`` header line.

    Example:
        >>> parse_seeds("seeds: 79 14 55 13")
        (79, 14, 55, 13)
    """
    match = _HEADER.match(line.strip())
    if match is None:
        raise MalformedHeader("Expected 'seeds: n1 n2 ...'", line)

    seeds: list[int] = []
    for token in match["numbers"].split():
        value = _unsigned(token)
        if value is None:
            raise MalformedHeader(f"Seed {token!r} is not an unsigned integer", line)
        seeds.append(value)
    return tuple(seeds)


def parse_entry(line: str) -> Segment:
    """Parse ``destination_start source_start length`` into a Segment."""
    tokens = line.split()
    if len(tokens) != 3:
        raise MalformedEntry(f"Expected 3 numbers, got {len(tokens)}", line)

    numbers = [_unsigned(token) for token in tokens]
    if any(number is None for number in numbers):
        raise MalformedEntry("Entries must be unsigned integers", line)

    destination_start, source_start, length = numbers
    if length == 0:
        raise MalformedEntry("Entry length must be positive", line)
    return Segment.from_entry(destination_start, source_start, length)


def parse_stage(block: str) -> Stage:
    """Parse a ``<from>-to-<to> map:`` title followed by entry lines."""
    title, *entries = [line.strip() for line in block.strip().splitlines()]
    match = _TITLE.match(title)
    if match is None:
        raise MalformedTableTitle("Expected '<from>-to-<to> map:'", title)

    return Stage(
        from_label=match["from_label"],
        to_label=match["to_label"],
        segments=tuple(parse_entry(line) for line in entries if line),
    )


def parse_almanac(text: str) -> Pipeline:
    """Build a Pipeline from almanac text.

    Raises:
        MalformedHeader: If the seeds line is missing or has bad numbers
        MalformedTableTitle: If a map title is malformed or declared twice
        MalformedEntry: If an entry line is not three unsigned integers
        UnknownLabel: If a map starts from a label nothing leads to
    """
    blocks = _BLOCK_SEPARATOR.split(text.replace("\r\n", "\n").strip())
    header, *tables = blocks
    if not header:
        raise MalformedHeader("Almanac is empty", text)

    header_line, *rest = header.splitlines()
    seeds = parse_seeds(header_line)
    if rest:
        raise MalformedHeader("Seeds header must be a single line", header)

    stages: dict[str, Stage] = {}
    for block in tables:
        stage = parse_stage(block)
        if stage.from_label in stages:
            raise MalformedTableTitle(
                f"Map from {stage.from_label!r} is declared twice",
                block.splitlines()[0],
            )
        stages[stage.from_label] = stage

    targets = {stage.to_label for stage in stages.values()}
    for label in stages:
        if label != SEED_LABEL and label not in targets:
            raise UnknownLabel("No map leads to label", label)

    logger.debug("parsed %d seeds and %d stages", len(seeds), len(stages))
    return Pipeline(seeds=seeds, stages=stages)


def read_almanac(path: str | PathLike[str]) -> Pipeline:
    """Read and parse an almanac file."""
    with open(path, encoding="utf-8") as handle:
        return parse_almanac(handle.read())
