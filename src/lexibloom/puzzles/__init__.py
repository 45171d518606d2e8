"""Puzzle data, word validation and crossword projection for LexiBloom."""

from .models import PuzzleDefinition, Placement, SubmissionResult, WordOutcome
from .validate import LevelState, DEFAULT_MIN_WORD_LENGTH
from .crossword import find_placements, revealed_cells, render_crossword
from .parsing import parse_catalog, parse_puzzle, load_catalog
from .catalog import PUZZLES, get_puzzle, level_title

__all__ = [
    # Models
    "PuzzleDefinition",
    "Placement",
    "SubmissionResult",
    "WordOutcome",
    # Validation
    "LevelState",
    "DEFAULT_MIN_WORD_LENGTH",
    # Crossword
    "find_placements",
    "revealed_cells",
    "render_crossword",
    # Catalog
    "parse_catalog",
    "parse_puzzle",
    "load_catalog",
    "PUZZLES",
    "get_puzzle",
    "level_title",
]
