"""Built-in puzzle catalog and level lookup."""

from pathlib import Path
from typing import List, Optional, Sequence

from .models import PuzzleDefinition
from .parsing import load_catalog


FALLBACK_TITLE = "Master Wordsmith"

# Load the built-in levels shipped with the package
_DATA_FILE = Path(__file__).parent / "data" / "levels.yaml"
PUZZLES: List[PuzzleDefinition] = load_catalog(_DATA_FILE)


def get_puzzle(level: int, catalog: Optional[Sequence[PuzzleDefinition]] = None) -> PuzzleDefinition:
    """
    Return the puzzle for a 1-based level number.

    Levels outside the catalog fall back to the first puzzle.
    """
    catalog = PUZZLES if catalog is None else catalog
    if not catalog:
        raise ValueError("Puzzle catalog is empty")
    if 1 <= level <= len(catalog):
        return catalog[level - 1]
    return catalog[0]


def level_title(level: int, catalog: Optional[Sequence[PuzzleDefinition]] = None) -> str:
    """Display title for a level; levels past the catalog share a generic title."""
    catalog = PUZZLES if catalog is None else catalog
    if 1 <= level <= len(catalog) and catalog[level - 1].title:
        return catalog[level - 1].title
    return FALLBACK_TITLE
