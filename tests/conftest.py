"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from rangeline import Block, Timeline


@dataclass
class ProgressRecorder:
    """Range callback that records every (name, progress) it receives."""

    calls: list[tuple[str, float]] = field(default_factory=list)

    def __call__(self, block: Block, progress: float) -> None:
        self.calls.append((block.name, progress))

    def progress_for(self, name: str) -> list[float]:
        return [p for n, p in self.calls if n == name]


@dataclass
class CompletionCounter:
    count: int = 0

    def __call__(self) -> None:
        self.count += 1


@pytest.fixture
def timeline() -> Timeline:
    return Timeline()


@pytest.fixture
def recorder() -> ProgressRecorder:
    return ProgressRecorder()


@pytest.fixture
def completion() -> CompletionCounter:
    return CompletionCounter()


@pytest.fixture
def chained(recorder: ProgressRecorder) -> Timeline:
    """intro [0, 10) followed by body [10, 30)."""
    tl = Timeline()
    tl.append_range("intro", 10.0, recorder)
    tl.append_range("body", 20.0, recorder)
    return tl
