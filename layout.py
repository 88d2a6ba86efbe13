"""Derive graph columns, node positions, and parent edges from ladder frames."""

from __future__ import annotations

from dataclasses import dataclass, field

from models import Frame, LadderReport

SPACING_X = 200
SPACING_Y = 56
START_X = 120
START_Y = 100
RIGHT_PADDING = 160
BOTTOM_PADDING = 80
MIN_HEIGHT = 300

Point = tuple[float, float]


@dataclass(slots=True)
class Edge:
    """Parent link drawn from ``source`` to ``target`` node keys."""

    source: str
    target: str
    start: Point
    end: Point


@dataclass(slots=True)
class GraphLayout:
    """Everything the canvas needs to draw one playback step."""

    columns: list[list[str]] = field(default_factory=list)
    positions: dict[str, Point] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)
    highlighted: set[str] = field(default_factory=set)
    width: int = 0
    height: int = MIN_HEIGHT


def node_key(word: str, column: int) -> str:
    return f"{word}@{column}"


def build_columns(report: LadderReport, step: int) -> list[list[str]]:
    """Column 0 holds the begin word; each later column is one level's discoveries up to ``step``."""
    if not report.frames:
        return []
    columns = [[report.begin_word]]
    width = len(report.begin_word)
    last = min(step, len(report.frames) - 1)
    for frame in report.frames[: last + 1]:
        discovered = [w for w in frame.next_frontier if len(w) == width]
        if discovered:
            columns.append(discovered)
    return columns


def compute_positions(columns: list[list[str]]) -> dict[str, Point]:
    positions: dict[str, Point] = {}
    for ci, column in enumerate(columns):
        height = (len(column) - 1) * SPACING_Y
        base_y = START_Y - height / 2
        for ri, word in enumerate(column):
            positions[node_key(word, ci)] = (START_X + ci * SPACING_X, base_y + ri * SPACING_Y)
    return positions


def build_edges(columns: list[list[str]], positions: dict[str, Point], frame: Frame | None) -> list[Edge]:
    """
    Connect each visible child to its parents.

    An edge starts at the parent's right-most column that is still left of the
    child's column.
    """
    edges: list[Edge] = []
    if not columns or frame is None:
        return edges

    word_columns: dict[str, list[int]] = {}
    for ci, column in enumerate(columns):
        for word in column:
            word_columns.setdefault(word, []).append(ci)

    for child in sorted(frame.parents):
        for ci in word_columns.get(child, []):
            for parent in sorted(frame.parents[child]):
                earlier = [pi for pi in word_columns.get(parent, []) if pi < ci]
                if not earlier:
                    continue
                source = node_key(parent, earlier[-1])
                target = node_key(child, ci)
                if source not in positions or target not in positions:
                    continue
                edges.append(Edge(source=source, target=target, start=positions[source], end=positions[target]))
    return edges


def solved_words(report: LadderReport) -> set[str]:
    if not report.solved:
        return set()
    return {word for path in report.paths for word in path}


def canvas_size(positions: dict[str, Point]) -> tuple[int, int]:
    if not positions:
        return 0, MIN_HEIGHT
    max_x = max(x for x, _ in positions.values())
    max_y = max(y for _, y in positions.values())
    return int(max_x + RIGHT_PADDING), int(max(MIN_HEIGHT, max_y + BOTTOM_PADDING))


def build_layout(report: LadderReport, step: int) -> GraphLayout:
    """Assemble the full drawable layout for playback ``step``."""
    columns = build_columns(report, step)
    if not columns:
        return GraphLayout()
    frame = report.frames[min(step, len(report.frames) - 1)]
    positions = compute_positions(columns)
    width, height = canvas_size(positions)
    return GraphLayout(
        columns=columns,
        positions=positions,
        edges=build_edges(columns, positions, frame),
        highlighted=solved_words(report),
        width=width,
        height=height,
    )
