"""Data models for ladder frames, solve reports, and playback options."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Mapping

ParentMap = Mapping[str, frozenset[str]]
LadderPath = tuple[str, ...]

STATUS_SOLVED = "solved"
STATUS_NO_PATH = "no path"
STATUS_LENGTH_MISMATCH = "length mismatch"


@dataclass(frozen=True, slots=True)
class Frame:
    """Snapshot of the search after fully expanding one BFS level."""

    level: int
    frontier: tuple[str, ...]
    next_frontier: tuple[str, ...]
    visited: frozenset[str]
    parents: ParentMap
    found: bool


@dataclass(slots=True)
class LadderInput:
    """Normalized begin/end words and dictionary handed to the solver."""

    begin_word: str
    end_word: str
    words: tuple[str, ...]


@dataclass(slots=True)
class LadderReport:
    """Frames and shortest paths computed for one input."""

    begin_word: str
    end_word: str
    frames: tuple[Frame, ...]
    paths: list[LadderPath]
    status: str
    generated_at_utc: str = field(
        default_factory=lambda: datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"
    )

    @property
    def solved(self) -> bool:
        return bool(self.frames) and self.frames[-1].found

    @property
    def shortest_length(self) -> int:
        """Number of words in each shortest path, or 0 when unsolved."""
        if not self.solved:
            return 0
        return len(self.frames) + 1

    @property
    def final_parents(self) -> ParentMap:
        if not self.frames:
            return MappingProxyType({})
        return self.frames[-1].parents


@dataclass(slots=True)
class LadderExample:
    """Preset input shown as a quick-start button."""

    name: str
    begin: str
    end: str
    words: list[str]
    description: str


@dataclass(slots=True)
class PlaybackOptions:
    """Replay speed settings."""

    speed_ms: int = 750
    min_speed_ms: int = 200
    max_speed_ms: int = 2000
    speed_step_ms: int = 50
