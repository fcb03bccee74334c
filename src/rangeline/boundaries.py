"""Range edge collection for scrubbing and stepping through a timeline."""

from __future__ import annotations

from dataclasses import dataclass

from .block import RangeFilter, accepts
from .timeline import Timeline


@dataclass(frozen=True)
class Boundary:
    time: float
    name: str
    edge: str  # "start" or "end"


def collect_boundaries(timeline: Timeline, filter_fn: RangeFilter | None = None) -> list[Boundary]:
    """Collect the start and end edge of every range on *timeline*.

    Returns boundaries sorted by (time, edge) where start sorts before end,
    then by range name so the result does not depend on insertion order.
    """
    points: list[tuple[float, int, str, Boundary]] = []

    for name, block in timeline.ranges.items():
        if not accepts(filter_fn, block):
            continue
        points.append((block.start_time, 0, name, Boundary(block.start_time, name, "start")))
        points.append((block.end_time, 1, name, Boundary(block.end_time, name, "end")))

    points.sort(key=lambda p: (p[0], p[1], p[2]))
    return [b for _, _, _, b in points]
