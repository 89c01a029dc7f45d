from pathlib import Path

import pytest

from rangemap.almanac import (
    AlmanacError,
    MalformedEntry,
    MalformedHeader,
    MalformedTableTitle,
    UnknownLabel,
    parse_almanac,
    parse_entry,
    parse_seeds,
    parse_stage,
    read_almanac,
)
from rangemap.segment import Segment
from rangemap.stage import Stage


def test_parse_seeds() -> None:
    assert parse_seeds("seeds: 79 14 55 13") == (79, 14, 55, 13)
    assert parse_seeds("seeds:") == ()


@pytest.mark.parametrize(
    "line",
    ["79 14 55 13", "seed: 1 2", "seeds: 1 -2", "seeds: 1 x"],
)
def test_parse_seeds_rejects_malformed(line: str) -> None:
    with pytest.raises(MalformedHeader):
        parse_seeds(line)


def test_parse_entry() -> None:
    assert parse_entry("50 98 2") == Segment(
        source_start=98, destination_start=50, length=2
    )


@pytest.mark.parametrize("line", ["50 98", "50 98 2 1", "50 -98 2", "a b c", "50 98 0"])
def test_parse_entry_rejects_malformed(line: str) -> None:
    with pytest.raises(MalformedEntry):
        parse_entry(line)


def test_parse_stage_title_only() -> None:
    assert parse_stage("seed-to-soil map:") == Stage(
        from_label="seed", to_label="soil"
    )


def test_parse_stage_with_entries() -> None:
    assert parse_stage("seed-to-soil map:\n0 15 37") == Stage(
        from_label="seed",
        to_label="soil",
        segments=(Segment.from_entry(0, 15, 37),),
    )


@pytest.mark.parametrize("title", ["seed-soil map:", "seed-to-soil", "seed to soil map:"])
def test_parse_stage_rejects_bad_title(title: str) -> None:
    with pytest.raises(MalformedTableTitle):
        parse_stage(f"{title}\n1 2 3")


def test_parse_almanac(example_text: str) -> None:
    pipeline = parse_almanac(example_text)

    assert pipeline.seeds == (79, 14, 55, 13)
    assert len(pipeline.stages) == 7
    assert pipeline.stages["seed"] == Stage(
        from_label="seed",
        to_label="soil",
        segments=(Segment.from_entry(50, 98, 2), Segment.from_entry(52, 50, 48)),
    )
    assert pipeline.stages["humidity"].to_label == "location"


def test_parse_almanac_tolerates_crlf_and_extra_blank_lines(example_text: str) -> None:
    messy = "\n" + example_text.replace("\n\n", "\n\n  \n\n").replace("\n", "\r\n")

    assert parse_almanac(messy) == parse_almanac(example_text)


def test_parse_almanac_empty() -> None:
    with pytest.raises(MalformedHeader):
        parse_almanac("   \n")


def test_parse_almanac_multiline_header() -> None:
    with pytest.raises(MalformedHeader):
        parse_almanac("seeds: 1 2\n3 4\n\nseed-to-soil map:\n1 2 3")


def test_parse_almanac_duplicate_from_label() -> None:
    text = "seeds: 1\n\nseed-to-soil map:\n1 2 3\n\nseed-to-water map:\n4 5 6"
    with pytest.raises(MalformedTableTitle, match="declared twice"):
        parse_almanac(text)


def test_parse_almanac_orphan_label() -> None:
    text = "seeds: 1\n\nseed-to-soil map:\n1 2 3\n\nwater-to-light map:\n4 5 6"
    with pytest.raises(UnknownLabel) as info:
        parse_almanac(text)

    assert info.value.text == "water"


def test_parse_almanac_bad_entry_fails_whole_document(example_text: str) -> None:
    broken = example_text.replace("37 52 2", "37 52")
    with pytest.raises(MalformedEntry):
        parse_almanac(broken)


def test_errors_are_value_errors() -> None:
    assert issubclass(AlmanacError, ValueError)
    for error in (MalformedHeader, MalformedTableTitle, MalformedEntry, UnknownLabel):
        assert issubclass(error, AlmanacError)


def test_read_almanac(example_file: Path) -> None:
    pipeline = read_almanac(example_file)

    assert pipeline.lowest_value() == 35
    assert pipeline.lowest_range_value() == 46
