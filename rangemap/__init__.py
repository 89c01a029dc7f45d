from .almanac import (
    AlmanacError,
    MalformedEntry,
    MalformedHeader,
    MalformedTableTitle,
    UnknownLabel,
    parse_almanac,
    read_almanac,
)
from .interval import Interval, reduce_intervals
from .pipeline import LOCATION_LABEL, SEED_LABEL, LabelCycleError, Pipeline
from .segment import Segment, Split
from .stage import Stage

__version__ = "0.1.0"

__all__ = [
    "Interval",
    "reduce_intervals",
    "Segment",
    "Split",
    "Stage",
    "Pipeline",
    "LabelCycleError",
    "SEED_LABEL",
    "LOCATION_LABEL",
    "parse_almanac",
    "read_almanac",
    "AlmanacError",
    "MalformedHeader",
    "MalformedTableTitle",
    "MalformedEntry",
    "UnknownLabel",
]
