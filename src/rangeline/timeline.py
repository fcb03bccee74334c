"""Clock-driven range scheduling."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Self

from .block import Block, CompletionCallback, RangeCallback, RangeFilter, accepts

log = logging.getLogger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


@dataclass
class Timeline:
    """A single clock and a set of named ranges evaluated against it.

    The clock only moves when the caller moves it. ``advance`` and
    ``seek_to`` clamp the clock into ``[0, duration]`` and reconcile every
    range, invoking range callbacks (and then the completion callback)
    inline. The ``go_to_*`` helpers set the clock directly without
    reconciling; the next ``advance``/``seek_to`` picks up the new position.
    """

    completion_callback: CompletionCallback | None = field(default=None, repr=False)

    _blocks: dict[str, Block] = field(default_factory=dict, init=False, repr=False)
    _time: float = field(default=0.0, init=False)
    _duration: float = field(default=0.0, init=False)
    _paused: bool = field(default=False, init=False)
    _loop_start: float | None = field(default=None, init=False, repr=False)
    _loop_end: float | None = field(default=None, init=False, repr=False)

    # -- Clock ----------------------------------------------------------------

    @property
    def time(self) -> float:
        """Current clock position."""
        return self._time

    @property
    def duration(self) -> float:
        """Latest end time across all ranges, 0.0 when empty."""
        return self._duration

    @property
    def progress(self) -> float:
        """Position of the clock across the whole timeline, 0.0-1.0."""
        if self._duration == 0:
            return 0.0
        return _clamp(self._time / self._duration, 0.0, 1.0)

    @property
    def is_at_beginning(self) -> bool:
        return self.progress == 0.0

    @property
    def is_at_end(self) -> bool:
        return self.progress == 1.0

    @property
    def is_paused(self) -> bool:
        return self._paused

    def set_paused(self, paused: bool) -> None:
        self._paused = paused

    def set_completion(self, callback: CompletionCallback | None) -> None:
        self.completion_callback = callback

    def advance(self, dt: float) -> None:
        """Move the clock by *dt* and reconcile all ranges."""
        if self._paused:
            return
        previous_time = self._time
        self._time = _clamp(self._time + dt, 0.0, self._duration)
        self._update_blocks(previous_time)

    def seek_to(self, time: float) -> None:
        """Move the clock to *time* and reconcile all ranges."""
        if self._paused:
            return
        previous_time = self._time
        self._time = _clamp(time, 0.0, self._duration)
        self._update_blocks(previous_time)

    def reset(self) -> None:
        """Remove all ranges and rewind. Pause, loop and completion settings are kept."""
        self.remove_all_ranges()
        self.go_to_beginning()

    def go_to_time(self, time: float) -> None:
        self._time = time

    def go_to_beginning(self) -> None:
        self._time = 0.0

    def go_to_end(self) -> None:
        self._time = self._duration

    def _update_blocks(self, previous_time: float) -> None:
        if self._loop_end is not None and self._time >= self._loop_end:
            log.debug("Looping from %.3f back to %.3f", self._time, self._loop_start)
            self._time = self._loop_start

        time = self._time
        for block in list(self._blocks.values()):
            if block._evaluate(time) and block.callback is not None:
                block.callback(block, block.progress)

        if (
            self.completion_callback is not None
            and time != previous_time
            and time >= self._duration
        ):
            log.debug("Timeline complete at %.3f", time)
            self.completion_callback()

    # -- Loop -----------------------------------------------------------------

    @property
    def loop_range(self) -> tuple[float, float] | None:
        if self._loop_end is None:
            return None
        return self._loop_start, self._loop_end

    def set_loop_range(self, start_time: float, end_time: float) -> None:
        self._loop_start = start_time
        self._loop_end = end_time

    def remove_loop_range(self) -> None:
        self._loop_start = None
        self._loop_end = None

    # -- Ranges ---------------------------------------------------------------

    @property
    def ranges(self) -> Mapping[str, Block]:
        """Read-only view of the registered ranges keyed by name."""
        return MappingProxyType(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def __contains__(self, name: object) -> bool:
        return name in self._blocks

    def __iter__(self) -> Iterator[str]:
        return iter(self._blocks)

    def add_range(
        self,
        name: str,
        start_time: float,
        duration: float,
        callback: RangeCallback | None = None,
        context: Any = None,
    ) -> Block | None:
        """Register (or replace) the range *name* covering ``[start_time, start_time + duration)``.

        Think of a range as a shot or section of the timeline: each has its
        own normalized progress, so animation further down can shape timings
        within it. Returns the new block, or ``None`` if *duration* is zero.
        """
        if duration == 0:
            log.debug("Ignoring range %r with zero duration", name)
            return None

        if name in self._blocks:
            log.debug("Replacing range %r", name)
        block = Block(name, start_time, duration, callback=callback, context=context)
        self._blocks[name] = block
        self._recalculate_duration()
        return block

    def append_range(
        self,
        name: str,
        duration: float,
        callback: RangeCallback | None = None,
        context: Any = None,
    ) -> Block | None:
        """Add a range starting at the current end of the timeline."""
        return self.add_range(name, self._duration, duration, callback, context)

    def remove_range(self, name: str) -> Self:
        self._blocks.pop(name, None)
        self._recalculate_duration()
        return self

    def remove_all_ranges(self) -> Self:
        self._blocks.clear()
        self._recalculate_duration()
        return self

    def get_range(self, name: str) -> Block | None:
        return self._blocks.get(name)

    def is_range_active(self, name: str) -> bool:
        block = self._blocks.get(name)
        if block is None:
            return False
        return block.active

    def get_range_progress(self, name: str) -> float:
        """Progress (0.0-1.0) of range *name*, 0.0 if it does not exist."""
        block = self._blocks.get(name)
        if block is None:
            return 0.0
        return block.progress

    def get_ranges_at_time(
        self, time: float, filter_fn: RangeFilter | None = None
    ) -> dict[str, Block]:
        """Ranges whose ``[start_time, end_time)`` contains *time*, optionally filtered."""
        return {
            name: block
            for name, block in self._blocks.items()
            if block.contains(time) and accepts(filter_fn, block)
        }

    def get_current_ranges(self, filter_fn: RangeFilter | None = None) -> dict[str, Block]:
        return self.get_ranges_at_time(self._time, filter_fn)

    def _recalculate_duration(self) -> None:
        # Starts from zero, so ranges ending before 0 never make it negative.
        self._duration = max([0.0, *(b.end_time for b in self._blocks.values())])

    # -- Navigation -----------------------------------------------------------

    def go_to_start_of_range(self, name: str) -> bool:
        block = self._blocks.get(name)
        if block is None:
            return False
        self._time = block.start_time
        return True

    def go_to_next_range(self, filter_fn: RangeFilter | None = None) -> bool:
        """Jump to the nearest range start after the clock.

        Only ranges accepted by *filter_fn* are considered. Returns ``False``
        and leaves the clock alone if there is none.
        """
        next_time = min(
            (
                b.start_time
                for b in self._blocks.values()
                if b.start_time > self._time and accepts(filter_fn, b)
            ),
            default=None,
        )
        if next_time is None:
            return False
        self._time = next_time
        return True

    def go_to_previous_range(self, filter_fn: RangeFilter | None = None) -> bool:
        """Jump to the latest start among ranges lying entirely behind the clock."""
        previous_time = max(
            (
                b.start_time
                for b in self._blocks.values()
                if b.start_time < self._time
                and self._time >= b.end_time
                and accepts(filter_fn, b)
            ),
            default=None,
        )
        if previous_time is None:
            return False
        self._time = previous_time
        return True
