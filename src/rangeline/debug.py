"""Diagnostic dump of a timeline's ranges."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .timeline import Timeline

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RangeSummary:
    name: str
    start_time: float
    end_time: float
    progress: float
    active: bool


def summarize_ranges(timeline: Timeline, active_only: bool = False) -> list[RangeSummary]:
    """Snapshot every range (or only active ones), ordered by start time then name."""
    summaries = [
        RangeSummary(
            name=block.name,
            start_time=block.start_time,
            end_time=block.end_time,
            progress=block.progress,
            active=block.active,
        )
        for block in timeline.ranges.values()
        if block.active or not active_only
    ]
    summaries.sort(key=lambda s: (s.start_time, s.name))
    return summaries


def log_ranges(
    timeline: Timeline,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
    active_only: bool = False,
) -> list[RangeSummary]:
    """Write a human-readable listing of *timeline*'s ranges to *logger*.

    Returns the summaries that were logged.
    """
    logger = logger or log
    summaries = summarize_ranges(timeline, active_only=active_only)
    logger.log(level, "%d ranges in timeline", len(summaries))
    for s in summaries:
        logger.log(
            level,
            "%s progress=%.3f start=%.3f end=%.3f%s",
            s.name, s.progress, s.start_time, s.end_time,
            " (active)" if s.active else "",
        )
    return summaries
