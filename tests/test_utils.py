import csv
import json
from pathlib import Path

import pytest

from solver import LadderSolver
from utils import export_report, format_path, normalize_word, parse_word_list, prepare_input, read_wordlist


def test_normalize_word_trims_and_lowercases() -> None:
    assert normalize_word("  HoT\n") == "hot"


def test_parse_word_list_splits_on_commas_spaces_and_newlines() -> None:
    raw = "hot, dot\nDOG  lot,,log\r\ncog\n"
    assert parse_word_list(raw) == ["hot", "dot", "dog", "lot", "log", "cog"]


def test_parse_word_list_dedupes_keeping_first_position() -> None:
    assert parse_word_list("hot Hot dot HOT") == ["hot", "dot"]
    assert parse_word_list("   \n ") == []


def test_prepare_input_adds_missing_end_word() -> None:
    ladder_input = prepare_input("Hit", " COG ", ["hot", "dot"])
    assert ladder_input.begin_word == "hit"
    assert ladder_input.end_word == "cog"
    assert ladder_input.words == ("hot", "dot", "cog")


def test_prepare_input_keeps_present_end_word_once() -> None:
    ladder_input = prepare_input("hit", "cog", ["cog", "hot"])
    assert ladder_input.words == ("cog", "hot")


def test_read_wordlist_parses_file(tmp_path: Path) -> None:
    wordlist = tmp_path / "words.txt"
    wordlist.write_text("Hot\ndot, dog\n\nhot\n", encoding="utf-8")
    assert read_wordlist(wordlist) == ["hot", "dot", "dog"]


def test_read_wordlist_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="nope.txt"):
        read_wordlist(tmp_path / "nope.txt")


def test_format_path_joins_words() -> None:
    assert format_path(("hit", "hot", "dot")) == "hit -> hot -> dot"
    assert format_path(["a", "b"], " → ") == "a → b"


def test_export_report_writes_json_and_csv(tmp_path: Path) -> None:
    report = LadderSolver().solve("hit", "cog", ["hot", "dot", "dog", "lot", "log", "cog"])
    json_path = tmp_path / "result.json"
    csv_path = tmp_path / "result.csv"

    export_report(json_path, csv_path, report)

    payload = json.loads(json_path.read_text(encoding="utf-8"))
    assert payload["status"] == "solved"
    assert payload["levels"] == 4
    assert payload["paths"][1] == ["hit", "hot", "lot", "log", "cog"]
    assert payload["frames"][0]["next_frontier"] == ["hot"]

    with csv_path.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == ["index", "length", "path"]
    assert rows[1] == ["1", "5", "hit -> hot -> dot -> dog -> cog"]
    assert len(rows) == 3
