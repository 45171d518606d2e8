"""Letter ring geometry."""

import math
from typing import List, Sequence

from .models import LetterPosition


def compute_ring_positions(
    letters: Sequence[str],
    width: float,
    height: float,
    radius_ratio: float = 0.7,
) -> List[LetterPosition]:
    """
    Place letters evenly on a circle centered in the viewport.

    Index i sits at angle (i / N) * 2pi, clockwise in screen coordinates
    (y grows downward), on a circle of radius radius_ratio * min(w/2, h/2).

    Args:
        letters: Ring letters in order
        width: Viewport width
        height: Viewport height
        radius_ratio: Fraction of the half-extent used as radius

    Returns:
        One LetterPosition per letter; empty for no letters
    """
    count = len(letters)
    if count == 0:
        return []

    center_x = width / 2
    center_y = height / 2
    # A degenerate viewport collapses every letter onto the center
    radius = max(0.0, min(center_x, center_y) * radius_ratio)

    positions = []
    for index, letter in enumerate(letters):
        angle = (index / count) * 2 * math.pi
        positions.append(LetterPosition(
            letter_index=index,
            character=letter,
            x=center_x + radius * math.cos(angle),
            y=center_y + radius * math.sin(angle),
        ))

    return positions


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x1 - x2, y1 - y2)
