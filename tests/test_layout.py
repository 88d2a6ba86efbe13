from layout import build_columns, build_edges, build_layout, canvas_size, compute_positions, node_key, solved_words
from solver import LadderSolver

CLASSIC_WORDS = ["hot", "dot", "dog", "lot", "log", "cog"]


def classic_report():
    return LadderSolver().solve("hit", "cog", CLASSIC_WORDS)


def test_columns_grow_with_playback_step() -> None:
    report = classic_report()

    assert build_columns(report, 0) == [["hit"], ["hot"]]
    assert build_columns(report, 1) == [["hit"], ["hot"], ["dot", "lot"]]
    assert build_columns(report, 3)[-1] == ["cog"]
    assert build_columns(report, 99) == build_columns(report, 3)


def test_columns_empty_without_frames() -> None:
    report = LadderSolver().solve("hit", "cogs", CLASSIC_WORDS)
    assert build_columns(report, 0) == []
    assert build_layout(report, 0).columns == []


def test_empty_discovery_level_adds_no_column() -> None:
    report = LadderSolver().solve("dog", "cat", ["dog", "cot", "cat"])
    assert build_columns(report, 0) == [["dog"]]


def test_positions_center_each_column() -> None:
    positions = compute_positions([["hit"], ["dot", "lot"]])

    assert positions[node_key("hit", 0)] == (120, 100)
    assert positions[node_key("dot", 1)] == (320, 72)
    assert positions[node_key("lot", 1)] == (320, 128)


def test_edges_follow_parent_links_of_current_frame() -> None:
    report = classic_report()
    columns = build_columns(report, 1)
    positions = compute_positions(columns)

    edges = build_edges(columns, positions, report.frames[1])
    pairs = sorted((e.source, e.target) for e in edges)
    assert pairs == [
        ("hit@0", "hot@1"),
        ("hot@1", "dot@2"),
        ("hot@1", "lot@2"),
    ]
    assert edges[0].start == positions[edges[0].source]


def test_edges_include_every_parent() -> None:
    report = classic_report()
    layout = build_layout(report, 3)
    into_cog = sorted(e.source for e in layout.edges if e.target == "cog@4")
    assert into_cog == ["dog@3", "log@3"]


def test_solved_words_only_when_solved() -> None:
    assert solved_words(classic_report()) == {"hit", "hot", "dot", "dog", "lot", "log", "cog"}
    unsolved = LadderSolver().solve("dog", "cat", ["dog", "cot", "cat"])
    assert solved_words(unsolved) == set()


def test_canvas_size_has_padding_and_minimum_height() -> None:
    assert canvas_size({}) == (0, 300)
    assert canvas_size({"a@0": (120, 100), "b@1": (320, 400)}) == (480, 480)


def test_layout_bundles_everything() -> None:
    layout = build_layout(classic_report(), 3)

    assert len(layout.columns) == 5
    assert layout.width == 120 + 4 * 200 + 160
    assert layout.height == 300
    assert "cog" in layout.highlighted
