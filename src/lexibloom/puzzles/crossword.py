"""Crossword reveal projection and rendering."""

from typing import Iterable, List, Set, Tuple

from .models import Placement


Cell = Tuple[int, int]


def _cell(grid: List[List[str]], row: int, col: int) -> str:
    """Character at (row, col), or '' when outside a (possibly ragged) grid."""
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return ""


def find_placements(grid: List[List[str]], word: str) -> List[Placement]:
    """
    Find every placement of a word in the grid.

    A placement starts at a non-empty cell and reads rightward ('H') or
    downward ('V'), matching the word character by character.
    """
    word = word.upper()
    placements: List[Placement] = []

    if not word:
        return placements

    for row, cells in enumerate(grid):
        for col, start in enumerate(cells):
            if start == "" or start != word[0]:
                continue

            # Horizontal, rightward
            if all(_cell(grid, row, col + i) == ch for i, ch in enumerate(word)):
                placements.append(Placement(row, col, 'H'))

            # Vertical, downward
            if all(_cell(grid, row + i, col) == ch for i, ch in enumerate(word)):
                placements.append(Placement(row, col, 'V'))

    return placements


def revealed_cells(grid: List[List[str]], found_words: Iterable[str]) -> Set[Cell]:
    """Cells (row, col) where a found word starts, reading right or down."""
    revealed: Set[Cell] = set()

    for word in found_words:
        for placement in find_placements(grid, word):
            revealed.add((placement.row, placement.col))

    return revealed


def render_crossword(grid: List[List[str]], revealed: Set[Cell]) -> str:
    """
    Render the crossword to a string.

    Revealed cells show their letter, hidden cells show '_' and placeholders
    are blank.
    """
    if not grid:
        return ""

    lines = []
    for row, cells in enumerate(grid):
        line = ''.join(
            " " if cell == "" else (cell if (row, col) in revealed else "_")
            for col, cell in enumerate(cells)
        )
        lines.append(line.rstrip())

    return '\n'.join(lines)
