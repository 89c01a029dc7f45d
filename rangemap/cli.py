"""Command line entry point: lowest target value for an almanac file."""

import logging
from pathlib import Path

import click

from rangemap import __version__
from rangemap.almanac import read_almanac
from rangemap.logging import configure_logging
from rangemap.pipeline import LOCATION_LABEL, LabelCycleError

logger = logging.getLogger(__name__)


def _format(value: int | None) -> str:
    return "none" if value is None else str(value)


def _report(part: int, value: int | None, target: str) -> None:
    if value is None:
        logger.warning("part %d: no seed reaches %r", part, target)
    click.echo(f"Part {part}: {_format(value)}")


@click.command()
@click.version_option(version=__version__, prog_name="rangemap")
@click.argument(
    "input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "-t",
    "--target",
    default=LOCATION_LABEL,
    show_default=True,
    help="Label to map seeds to.",
)
@click.option(
    "--mode",
    type=click.Choice(["scalar", "range", "both"]),
    default="both",
    show_default=True,
    help="Treat seeds as single values (part 1), (start, length) pairs (part 2), or both.",
)
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def cli(
    input_file: Path,
    target: str,
    mode: str,
    verbose: bool,
    log_json: bool,
) -> None:
    """Map almanac seeds through their label chain and print the lowest result."""
    configure_logging(verbose=verbose, log_json=log_json)

    try:
        pipeline = read_almanac(input_file)
        if target not in pipeline.labels():
            logger.warning("label %r is not reachable from the seeds", target)
        if mode in ("scalar", "both"):
            _report(1, pipeline.lowest_value(target), target)
        if mode in ("range", "both"):
            _report(2, pipeline.lowest_range_value(target), target)
    except (ValueError, LabelCycleError) as exc:
        raise click.ClickException(str(exc)) from exc
