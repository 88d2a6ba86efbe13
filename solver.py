"""Neighbor index, layered BFS engine, and shortest-path reconstruction."""

from __future__ import annotations

import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Iterable

from models import (
    STATUS_LENGTH_MISMATCH,
    STATUS_NO_PATH,
    STATUS_SOLVED,
    Frame,
    LadderInput,
    LadderPath,
    LadderReport,
    ParentMap,
)
from utils import prepare_input

logger = logging.getLogger(__name__)

WILDCARD = "*"


def wildcard_patterns(word: str) -> list[str]:
    """All patterns of ``word`` with exactly one position replaced by the wildcard."""
    return [word[:i] + WILDCARD + word[i + 1 :] for i in range(len(word))]


class NeighborIndex:
    """Bucket words by wildcard pattern for fast one-letter neighbor lookup."""

    def __init__(self, words: Iterable[str], begin_word: str, word_length: int | None = None) -> None:
        self.word_length = len(begin_word) if word_length is None else word_length
        self._words: set[str] = set()

        buckets: dict[str, set[str]] = defaultdict(set)
        for word in [*words, begin_word]:
            if len(word) != self.word_length or word in self._words:
                continue
            self._words.add(word)
            for pattern in self.patterns(word):
                buckets[pattern].add(word)
        self.buckets: dict[str, set[str]] = dict(buckets)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    @property
    def bucket_count(self) -> int:
        return len(self.buckets)

    def patterns(self, word: str) -> list[str]:
        """Bucket keys looked up for ``word``; empty when its length does not match."""
        if len(word) != self.word_length:
            return []
        return wildcard_patterns(word)

    def bucket(self, pattern: str) -> frozenset[str]:
        return frozenset(self.buckets.get(pattern, ()))

    def neighbors(self, word: str) -> list[str]:
        """Words one letter away from ``word``, sorted."""
        found: set[str] = set()
        for pattern in self.patterns(word):
            for candidate in self.buckets.get(pattern, ()):
                if candidate != word and len(candidate) == len(word):
                    found.add(candidate)
        return sorted(found)


def build_frames(begin_word: str, end_word: str, index: NeighborIndex) -> tuple[Frame, ...]:
    """
    Run a level-synchronous BFS from ``begin_word`` and record one frame per level.

    Words found on a level are only marked visited once the whole level has
    been expanded, so every parent of a word sits on the level directly above
    it and a word reached from several parents keeps all of them.
    """
    if len(begin_word) != len(end_word):
        return ()

    visited: set[str] = {begin_word}
    parents: dict[str, set[str]] = {}
    frontier: list[str] = [begin_word]
    level = 0
    frames: list[Frame] = []

    while frontier:
        discovered: set[str] = set()
        for node in frontier:
            for neighbor in index.neighbors(node):
                if neighbor in visited:
                    continue
                parents.setdefault(neighbor, set()).add(node)
                discovered.add(neighbor)

        next_frontier = sorted(discovered)
        visited.update(next_frontier)
        found = end_word in discovered

        frames.append(
            Frame(
                level=level,
                frontier=tuple(frontier),
                next_frontier=tuple(next_frontier),
                visited=frozenset(visited),
                parents=MappingProxyType({child: frozenset(ps) for child, ps in parents.items()}),
                found=found,
            )
        )

        if found:
            break
        frontier = next_frontier
        level += 1

    return tuple(frames)


def reconstruct_paths(parents: ParentMap, begin_word: str, end_word: str) -> list[LadderPath]:
    """Backtrack from ``end_word`` through ``parents`` and return every path, sorted."""
    results: list[LadderPath] = []
    if end_word not in parents:
        return results

    path: list[str] = [end_word]
    visiting: set[str] = {end_word}

    def backtrack(word: str) -> None:
        if word == begin_word:
            results.append(tuple(reversed(path)))
            return
        for parent in parents.get(word, ()):
            if parent in visiting:
                continue
            path.append(parent)
            visiting.add(parent)
            backtrack(parent)
            visiting.discard(parent)
            path.pop()

    backtrack(end_word)
    results.sort(key=lambda p: "".join(p))
    return results


class LadderSolver:
    """Compute frames and all shortest ladders for one begin/end/dictionary input."""

    def __init__(self) -> None:
        self.index: NeighborIndex | None = None
        self.report: LadderReport | None = None
        self.ladder_input: LadderInput | None = None

    def invalidate(self) -> None:
        """Drop the last index and report after the inputs changed."""
        self.index = None
        self.report = None
        self.ladder_input = None

    def is_current(self, begin_word: str, end_word: str, words: Iterable[str]) -> bool:
        """True when the last report was computed from these inputs."""
        if self.report is None or self.ladder_input is None:
            return False
        return prepare_input(begin_word, end_word, words) == self.ladder_input

    def solve(self, begin_word: str, end_word: str, words: Iterable[str]) -> LadderReport:
        """Recompute everything from scratch and return a fresh report."""
        ladder_input = prepare_input(begin_word, end_word, words)
        self.ladder_input = ladder_input
        begin = ladder_input.begin_word
        end = ladder_input.end_word

        self.index = NeighborIndex(ladder_input.words, begin)
        frames = build_frames(begin, end, self.index)

        if not frames:
            status = STATUS_LENGTH_MISMATCH
            paths: list[LadderPath] = []
        elif frames[-1].found:
            status = STATUS_SOLVED
            paths = reconstruct_paths(frames[-1].parents, begin, end)
        else:
            status = STATUS_NO_PATH
            paths = []

        logger.info(
            "Solved %s -> %s: %s, %d words indexed, %d levels, %d shortest paths",
            begin,
            end,
            status,
            len(self.index),
            len(frames),
            len(paths),
        )
        self.report = LadderReport(
            begin_word=begin,
            end_word=end,
            frames=frames,
            paths=paths,
            status=status,
        )
        return self.report
