"""Built-in example inputs."""

from __future__ import annotations

from models import LadderExample

EXAMPLES: list[LadderExample] = [
    LadderExample(
        name="Classic (hit → cog)",
        begin="hit",
        end="cog",
        words=["hot", "dot", "dog", "lot", "log", "cog"],
        description="The classic example with 2 shortest paths",
    ),
    LadderExample(
        name="Simple (cat → dog)",
        begin="cat",
        end="dog",
        words=["cat", "cot", "cog", "dog"],
        description="A simple 3-step transformation",
    ),
    LadderExample(
        name="Multiple Paths (red → hot)",
        begin="red",
        end="hot",
        words=["red", "ted", "tex", "rex", "hex", "het", "hot", "rot", "tot"],
        description="Multiple shortest paths of equal length",
    ),
    LadderExample(
        name="Long Chain (cold → warm)",
        begin="cold",
        end="warm",
        words=["cold", "cord", "card", "ward", "warm", "worm", "word", "lord"],
        description="A longer transformation sequence",
    ),
    LadderExample(
        name="No Solution (dog → cat)",
        begin="dog",
        end="cat",
        words=["dog", "cot", "cat"],
        description="Impossible transformation - no valid path",
    ),
    LadderExample(
        name="Complex (team → mate)",
        begin="team",
        end="mate",
        words=["team", "tear", "bear", "beat", "meat", "melt", "belt", "best", "beet", "meet", "mete", "mate"],
        description="Complex graph with many intermediate words",
    ),
]


def get_example(name: str) -> LadderExample:
    for example in EXAMPLES:
        if example.name == name:
            return example
    raise KeyError(f"Unknown example: {name}")


def example_summary(example: LadderExample) -> str:
    """Description line shown under an example button."""
    return f"{example.description} · {len(example.words)} words"
