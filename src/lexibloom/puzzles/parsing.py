"""Puzzle catalog parsing utilities."""

import re
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .models import PuzzleDefinition


MIN_RING_LETTERS = 6
MAX_RING_LETTERS = 8
PLACEHOLDER = "."


def parse_crossword_row(row: Union[str, List[str]]) -> List[str]:
    """
    Parse one crossword row.

    A row is either a string where each character is a cell and '.' is a
    placeholder, or a list of single-character cells where '' is a placeholder.
    """
    if isinstance(row, str):
        return ["" if ch == PLACEHOLDER else ch.upper() for ch in row.strip()]
    return [str(cell).strip().upper() if cell else "" for cell in row]


def parse_puzzle(data: Dict[str, Any], index: int = 0) -> PuzzleDefinition:
    """
    Build a PuzzleDefinition from a raw mapping.

    Raises:
        ValueError: If the entry is missing fields or breaks catalog rules
    """
    label = f"Puzzle {index + 1}"
    if not isinstance(data, dict):
        raise ValueError(f"{label}: expected a mapping, got {type(data).__name__}")

    raw_letters = data.get("letters")
    if isinstance(raw_letters, str):
        letters = list(raw_letters.replace(" ", ""))
    else:
        letters = list(raw_letters or [])

    if not MIN_RING_LETTERS <= len(letters) <= MAX_RING_LETTERS:
        raise ValueError(
            f"{label}: ring needs {MIN_RING_LETTERS}-{MAX_RING_LETTERS} letters, got {len(letters)}"
        )
    for letter in letters:
        if not re.match(r'^[A-Za-z]$', str(letter)):
            raise ValueError(f"{label}: invalid ring letter {letter!r}")

    words = [str(w).strip().upper() for w in data.get("words") or []]
    if not words:
        raise ValueError(f"{label}: no target words")
    for word in words:
        if not re.match(r'^[A-Z]{2,}$', word):
            raise ValueError(f"{label}: invalid target word {word!r} (letters only, length >= 2)")

    rows = data.get("crossword")
    if not rows:
        raise ValueError(f"{label}: missing crossword grid")

    return PuzzleDefinition(
        letters=[str(letter) for letter in letters],
        words=words,
        hint=str(data.get("hint") or ""),
        crossword=[parse_crossword_row(row) for row in rows],
        title=data.get("title"),
    )


def parse_catalog(text: str) -> List[PuzzleDefinition]:
    """
    Parse a YAML puzzle catalog.

    The document is either a list of puzzles or a mapping with a 'puzzles' key.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Puzzle catalog is not valid YAML: {e}") from e
    if isinstance(data, dict):
        data = data.get("puzzles")
    if not data or not isinstance(data, list):
        raise ValueError("Puzzle catalog is empty")

    return [parse_puzzle(entry, i) for i, entry in enumerate(data)]


def load_catalog(path: str | Path) -> List[PuzzleDefinition]:
    """Load a puzzle catalog from a YAML file."""
    path = Path(path).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Puzzle catalog not found: {path}")
    return parse_catalog(path.read_text())
