"""
Pydantic models for the engine layer.

This module contains the data models (configuration, geometry, selection, hint
state and events) used throughout the engine layer. The logic classes
(GestureTracker, HintEngine, WordGame) remain in their respective files.
"""

from pathlib import Path
from typing import List, Optional, Literal, Tuple
from pydantic import BaseModel, Field

from ..puzzles.validate import DEFAULT_MIN_WORD_LENGTH


# Type aliases
HintOutcome = Literal["revealed", "exhausted", "cooling_down", "nothing_left"]
EventKind = Literal["word_found", "already_found", "not_a_target", "level_complete", "hint_expired"]

DEFAULT_STORE_PATH = Path("~/.lexibloom/state.json")  # expanded by JsonFileHintStore


class LetterPosition(BaseModel):
    """Position of one ring letter inside the viewport."""
    letter_index: int = Field(..., ge=0)
    character: str
    x: float
    y: float


class SelectionState(BaseModel):
    """Letters traced by the current gesture."""
    indices: List[int] = Field(default_factory=list)
    word: str = ""

    def segments(self) -> List[Tuple[int, int]]:
        """Consecutive (from, to) index pairs for drawing connector lines."""
        return list(zip(self.indices, self.indices[1:]))


class HintBudget(BaseModel):
    """Persisted hint pool and cooldown."""
    remaining_hints: int = Field(default=3, ge=0)
    cooldown_remaining_seconds: int = Field(default=0, ge=0)
    last_used_timestamp: Optional[float] = None  # epoch seconds the cooldown is anchored to


class ActiveHint(BaseModel):
    """A revealed partial path for one unsolved word."""
    target_word: str
    letter_indices: List[int] = Field(default_factory=list)
    expires_in_seconds: float = 0.0


class HintResult(BaseModel):
    """Outcome of a hint request."""
    outcome: HintOutcome
    hint: Optional[ActiveHint] = None
    remaining_hints: int = 0
    cooldown_remaining_seconds: int = 0

    @property
    def message(self) -> str:
        if self.outcome == "exhausted":
            return "No hints left"
        if self.outcome == "cooling_down":
            minutes, seconds = divmod(self.cooldown_remaining_seconds, 60)
            return f"Next hint in {minutes}:{seconds:02d}"
        if self.outcome == "nothing_left":
            return "Every word is already found"
        return f"Hint: a {len(self.hint.target_word)}-letter word starts with the highlighted letters"


class GameEvent(BaseModel):
    """Signal emitted to the presentation layer."""
    kind: EventKind
    level: int
    word: Optional[str] = None


class HintConfig(BaseModel):
    """Configuration for the hint pool."""
    max_hints: int = Field(default=3, ge=0)
    cooldown_seconds: int = Field(default=600, ge=0)
    display_seconds: float = Field(default=10.0, gt=0)
    reveal_cap: int = Field(default=3, ge=1)


class GameConfig(BaseModel):
    """Configuration for a game session."""
    min_word_length: int = Field(default=DEFAULT_MIN_WORD_LENGTH, ge=2)
    selection_radius: float = Field(default=40.0, gt=0)
    ring_radius_ratio: float = Field(default=0.7, gt=0, le=1)
    level_complete_delay: float = Field(default=1.5, ge=0)
    viewport_width: float = Field(default=320.0, gt=0)
    viewport_height: float = Field(default=320.0, gt=0)
    hints: HintConfig = Field(default_factory=HintConfig)
    hint_store_path: Path = DEFAULT_STORE_PATH
    puzzles_path: Optional[Path] = None
    seed: Optional[int] = None
