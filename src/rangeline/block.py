"""Named time ranges and the callback shapes the timeline invokes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

RangeCallback = Callable[["Block", float], Any]
CompletionCallback = Callable[[], Any]
RangeFilter = Callable[["Block"], bool]


def accepts(filter_fn: RangeFilter | None, block: Block) -> bool:
    return filter_fn is None or filter_fn(block) is True


@dataclass
class Block:
    """A named ``[start_time, end_time)`` interval on a timeline's clock.

    Timing is fixed at creation; ``progress``, ``active`` and
    ``progress_changed`` are written by the owning timeline during its
    update pass and should be treated as read-only by callers.

    >>> b = Block("intro", 2.0, 4.0)
    >>> b.end_time
    6.0
    >>> b.contains(5.9), b.contains(6.0)
    (True, False)
    """

    name: str
    start_time: float
    duration: float
    callback: RangeCallback | None = field(default=None, repr=False)
    context: Any = field(default=None, repr=False)

    end_time: float = field(init=False)
    active: bool = field(default=False, init=False)
    progress: float = field(default=0.0, init=False)
    progress_changed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self.end_time = self.start_time + self.duration

    def contains(self, time: float) -> bool:
        return self.start_time <= time < self.end_time

    def _evaluate(self, time: float) -> bool:
        """Recompute progress/active at *time*; return whether progress changed."""
        previous = self.progress
        if self.contains(time):
            progress = (time - self.start_time) / self.duration
            self.progress = max(min(progress, 1.0), 0.0)
            self.active = True
        elif time >= self.end_time:
            self.progress = 1.0
            self.active = False
        else:
            self.progress = 0.0
            self.active = False
        self.progress_changed = self.progress != previous
        return self.progress_changed
