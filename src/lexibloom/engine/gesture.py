"""
Gesture tracking for the letter ring.

Turns press/move/release pointer events into an ordered, deduplicated list
of letter indices and the candidate word they spell.
"""

import logging
from typing import List, Optional, Literal

from pydantic import BaseModel, Field, ConfigDict

from .geometry import distance
from .models import LetterPosition, SelectionState


logger = logging.getLogger(__name__)

DEFAULT_SELECTION_RADIUS = 40.0

TrackerState = Literal["idle", "drawing"]


class GestureTracker(BaseModel):
    """
    Two-state (idle/drawing) tracker for one pointer.

    Attributes:
        positions: Current ring geometry
        selection_radius: A letter is picked up when the pointer is strictly closer than this
        state: 'idle' or 'drawing'
        selection: Letters traced so far in the current gesture
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    positions: List[LetterPosition] = Field(default_factory=list)
    selection_radius: float = Field(default=DEFAULT_SELECTION_RADIUS, gt=0)
    state: TrackerState = "idle"
    selection: SelectionState = Field(default_factory=SelectionState)

    @property
    def is_drawing(self) -> bool:
        return self.state == "drawing"

    def set_positions(self, positions: List[LetterPosition]) -> None:
        """Replace the ring geometry; an in-progress gesture is abandoned."""
        if self.is_drawing:
            logger.debug("Geometry changed mid-gesture; abandoning %r", self.selection.word)
        self.positions = list(positions)
        self._clear()

    def press(self, index: int) -> bool:
        """
        Start a gesture on a letter.

        Returns:
            True if drawing started; presses while drawing or on unknown
            indices are ignored
        """
        if self.is_drawing:
            return False
        if not 0 <= index < len(self.positions):
            return False

        self.state = "drawing"
        self.selection = SelectionState(indices=[index], word=self.positions[index].character)
        return True

    def move(self, x: float, y: float) -> List[int]:
        """
        Feed one pointer sample.

        Every unselected letter within the selection radius is appended, in
        ring index order.

        Returns:
            Indices added by this sample
        """
        if not self.is_drawing:
            return []

        added = []
        for position in self.positions:
            index = position.letter_index
            if index in self.selection.indices:
                continue
            if distance(x, y, position.x, position.y) < self.selection_radius:
                self.selection.indices.append(index)
                self.selection.word += position.character
                added.append(index)

        return added

    def release(self) -> Optional[str]:
        """
        End the gesture.

        Returns:
            The candidate word (possibly empty or a single letter), or None
            if no gesture was in progress
        """
        if not self.is_drawing:
            return None

        word = self.selection.word
        self._clear()
        return word

    def _clear(self) -> None:
        self.state = "idle"
        self.selection = SelectionState()
