"""Time-driven range scheduler."""

from .block import Block, CompletionCallback, RangeCallback, RangeFilter
from .boundaries import Boundary, collect_boundaries
from .debug import RangeSummary, log_ranges, summarize_ranges
from .timeline import Timeline

__all__ = [
    "Block",
    "Boundary",
    "collect_boundaries",
    "CompletionCallback",
    "log_ranges",
    "RangeCallback",
    "RangeFilter",
    "RangeSummary",
    "summarize_ranges",
    "Timeline",
]

__version__ = "0.1.0"
