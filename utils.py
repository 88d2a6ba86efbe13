"""Utility helpers for normalization, parsing, config, and exports."""

from __future__ import annotations

import csv
import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable

from models import LadderInput, LadderReport


def _choose_app_dir() -> Path:
    """
    Pick a writable app directory.

    Preferred location is user home, with local workspace fallback when blocked.
    """
    preferred = Path.home() / ".word_ladder_visualizer"
    try:
        preferred.mkdir(parents=True, exist_ok=True)
        return preferred
    except OSError:
        fallback = Path(".word_ladder_visualizer")
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


APP_DIR = _choose_app_dir()
CONFIG_PATH = APP_DIR / "config.json"
LOG_PATH = APP_DIR / "app.log"

WORD_SEPARATOR_PATTERN = re.compile(r"[\s,]+")


def ensure_app_dirs() -> None:
    """Create the app directory if it does not already exist."""
    APP_DIR.mkdir(parents=True, exist_ok=True)


def setup_logging() -> None:
    """Configure file logging once per app run."""
    ensure_app_dirs()
    logging.basicConfig(
        filename=str(LOG_PATH),
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_config() -> dict[str, Any]:
    """Load config from the user home config file."""
    ensure_app_dirs()
    if not CONFIG_PATH.exists():
        return {}
    try:
        return json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        logging.exception("Failed to load config from %s", CONFIG_PATH)
        return {}


def save_config(config: dict[str, Any]) -> None:
    """Persist config to disk."""
    ensure_app_dirs()
    try:
        CONFIG_PATH.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except Exception:
        logging.exception("Failed to save config to %s", CONFIG_PATH)


def normalize_word(token: str) -> str:
    return token.strip().lower()


def parse_word_list(raw_text: str) -> list[str]:
    """
    Parse a dictionary typed or pasted by the user.

    Words may be separated by whitespace, commas, or newlines. Each word is
    trimmed and lowercased; empties are dropped and duplicates keep their
    first position.
    """
    if not raw_text or not raw_text.strip():
        return []

    seen: set[str] = set()
    words: list[str] = []
    for token in WORD_SEPARATOR_PATTERN.split(raw_text):
        word = normalize_word(token)
        if not word or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


def prepare_input(begin_word: str, end_word: str, words: Iterable[str]) -> LadderInput:
    """Normalize solver input, adding the end word to the dictionary when missing."""
    begin = normalize_word(begin_word)
    end = normalize_word(end_word)
    dictionary = parse_word_list(" ".join(words))
    if end and end not in dictionary:
        dictionary.append(end)
    return LadderInput(begin_word=begin, end_word=end, words=tuple(dictionary))


def read_wordlist(wordlist_path: str | Path) -> list[str]:
    """Read and parse a word list file."""
    path = Path(wordlist_path)
    if not path.exists():
        raise FileNotFoundError(f"Wordlist file not found: {wordlist_path}")
    raw = path.read_bytes().decode("utf-8", errors="ignore")
    return parse_word_list(raw)


def format_path(path: Iterable[str], separator: str = " -> ") -> str:
    return separator.join(path)


def export_report(json_path: Path, csv_path: Path, report: LadderReport) -> None:
    """Export a ladder report to both JSON and CSV."""
    payload = {
        "generated_at_utc": report.generated_at_utc,
        "begin_word": report.begin_word,
        "end_word": report.end_word,
        "status": report.status,
        "levels": len(report.frames),
        "shortest_length": report.shortest_length,
        "paths": [list(p) for p in report.paths],
        "frames": [
            {
                "level": f.level,
                "frontier": list(f.frontier),
                "next_frontier": list(f.next_frontier),
                "visited_count": len(f.visited),
                "found": f.found,
            }
            for f in report.frames
        ],
    }

    json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    with csv_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(["index", "length", "path"])
        for idx, path in enumerate(report.paths, start=1):
            writer.writerow([idx, len(path), format_path(path)])
