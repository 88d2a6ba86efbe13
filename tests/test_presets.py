import pytest

from presets import EXAMPLES, example_summary, get_example
from solver import LadderSolver


def test_presets_have_unique_names() -> None:
    names = [example.name for example in EXAMPLES]
    assert len(names) == 6
    assert len(set(names)) == len(names)


def test_get_example_unknown_name_raises() -> None:
    with pytest.raises(KeyError):
        get_example("Missing")


def test_classic_preset_solves() -> None:
    example = get_example("Classic (hit → cog)")
    report = LadderSolver().solve(example.begin, example.end, example.words)
    assert len(report.paths) == 2


def test_no_solution_preset_has_no_paths() -> None:
    example = get_example("No Solution (dog → cat)")
    report = LadderSolver().solve(example.begin, example.end, example.words)
    assert report.paths == []
    assert report.frames[-1].found is False


@pytest.mark.parametrize("example", EXAMPLES, ids=lambda ex: ex.name)
def test_every_preset_produces_frames(example) -> None:
    report = LadderSolver().solve(example.begin, example.end, example.words)
    assert report.frames
    for path in report.paths:
        assert path[0] == example.begin
        assert path[-1] == example.end


def test_example_summary_shows_description_and_word_count() -> None:
    example = get_example("Classic (hit → cog)")
    assert example_summary(example) == "The classic example with 2 shortest paths · 6 words"
