import logging
import math
import time
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from pydantic import BaseModel, Field, ConfigDict

from ..puzzles.catalog import PUZZLES, get_puzzle, level_title
from ..puzzles.crossword import revealed_cells, render_crossword
from ..puzzles.models import PuzzleDefinition, SubmissionResult
from ..puzzles.parsing import load_catalog
from ..puzzles.validate import LevelState
from .geometry import compute_ring_positions
from .gesture import GestureTracker
from .hints import HintEngine
from .models import EventKind, GameConfig, GameEvent, HintResult, LetterPosition
from .store import HintStateStore, JsonFileHintStore


logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent], None]

_OUTCOME_EVENTS: Dict[str, EventKind] = {
    "found": "word_found",
    "already_found": "already_found",
    "not_a_target": "not_a_target",
}


class WordGame(BaseModel):
    """
    Top-level session for the letter-wheel puzzle.

    Owns the current level and wires the gesture tracker, level state, hint
    engine and crossword projection together. The host forwards pointer
    events and calls tick() with elapsed time; results come back as
    GameEvents to subscribed listeners and in the event history.

    Attributes:
        config: Session configuration
        catalog: Puzzles in level order
        level: Current 1-based level number
        level_state: Found words and completion for the current level
        tracker: Gesture tracker bound to the current ring geometry
        hints: Hint engine with the persisted budget
        positions: Current ring geometry
        show_hint_text: Whether the puzzle's text hint is shown
        events: Every event emitted so far
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    catalog: List[PuzzleDefinition] = Field(default_factory=lambda: list(PUZZLES))
    level: int = 1
    level_state: Optional[LevelState] = None
    tracker: GestureTracker = Field(default_factory=GestureTracker)
    hints: Optional[HintEngine] = None
    positions: List[LetterPosition] = Field(default_factory=list)
    show_hint_text: bool = False
    events: List[GameEvent] = Field(default_factory=list)
    _listeners: List[Listener] = []
    _pending_complete: Optional[float] = None

    def model_post_init(self, __context) -> None:
        """Set up the first level after model creation."""
        self._listeners = []
        if self.hints is None:
            self.hints = HintEngine.create(config=self.config.hints, seed=self.config.seed)
        self.tracker.selection_radius = self.config.selection_radius
        self.set_level(self.level)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        store: Optional[HintStateStore] = None,
        catalog: Optional[List[PuzzleDefinition]] = None,
        clock: Callable[[], float] = time.time,
        **config_kwargs: Any
    ) -> "WordGame":
        """
        Factory method to create a session with its catalog and hint store.

        Args:
            config: Optional GameConfig instance
            store: HintStateStore; defaults to a JSON file at config.hint_store_path
            catalog: Puzzles to play; defaults to config.puzzles_path or the built-in levels
            clock: Time source for hint cooldowns
            **config_kwargs: Config parameters if config not provided

        Returns:
            Configured WordGame on level 1
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        if catalog is None:
            catalog = load_catalog(config.puzzles_path) if config.puzzles_path else list(PUZZLES)

        if store is None:
            store = JsonFileHintStore(config.hint_store_path)

        hints = HintEngine.create(config=config.hints, store=store, seed=config.seed, clock=clock)
        return cls(config=config, catalog=catalog, hints=hints)

    # -- Level management -------------------------------------------------

    @property
    def puzzle(self) -> PuzzleDefinition:
        return self.level_state.puzzle

    @property
    def title(self) -> str:
        return level_title(self.level, self.catalog)

    @property
    def is_final_level(self) -> bool:
        return self.level >= len(self.catalog)

    def set_level(self, level: int) -> None:
        """
        Switch to a level, starting it fresh.

        Unknown levels play the first puzzle. Found words, the active hint,
        the text hint and any pending completion signal are cleared; the
        hint budget is left alone.
        """
        self.level = max(level, 1)
        self.level_state = LevelState(
            puzzle=get_puzzle(self.level, self.catalog),
            level=self.level,
            min_word_length=self.config.min_word_length,
        )
        self._clear_level_extras()
        self._layout()
        logger.info("Level %d: %s", self.level, self.title)

    def advance_level(self) -> int:
        """Move to the next level, wrapping to level 1 after the last one."""
        self.set_level(1 if self.is_final_level else self.level + 1)
        return self.level

    def reset_level(self) -> None:
        """Clear progress on the current level; the hint budget is kept."""
        self.level_state.reset()
        self.tracker.set_positions(self.positions)
        self._clear_level_extras()

    def _clear_level_extras(self) -> None:
        self.hints.clear_active_hint()
        self.show_hint_text = False
        self._pending_complete = None

    # -- Geometry ----------------------------------------------------------

    def resize(self, width: float, height: float) -> None:
        """Recompute the ring for a new viewport; any gesture in progress is dropped."""
        self.config.viewport_width = width
        self.config.viewport_height = height
        self._layout()

    def _layout(self) -> None:
        self.positions = compute_ring_positions(
            self.puzzle.letters,
            self.config.viewport_width,
            self.config.viewport_height,
            self.config.ring_radius_ratio,
        )
        self.tracker.set_positions(self.positions)

    # -- Pointer input -----------------------------------------------------

    def press(self, index: int) -> bool:
        return self.tracker.press(index)

    def move(self, x: float, y: float) -> List[int]:
        return self.tracker.move(x, y)

    def release(self) -> Optional[SubmissionResult]:
        """
        Finish the gesture and validate the traced word.

        Returns:
            The submission result, or None if no gesture was in progress
        """
        candidate = self.tracker.release()
        if candidate is None:
            return None
        return self.submit_word(candidate)

    def trace_word(self, word: str) -> Optional[SubmissionResult]:
        """
        Trace a word through the ring as pointer samples.

        Each character is matched to the first unused ring letter and the
        pointer is moved onto it. A word the ring cannot spell is rejected
        as not_a_target without touching the tracker.
        """
        word = word.strip().upper()
        path: List[int] = []
        for character in word:
            for position in self.positions:
                if position.character == character and position.letter_index not in path:
                    path.append(position.letter_index)
                    break
            else:
                return self._reject_unspellable(word)

        if not path or not self.press(path[0]):
            return None
        for index in path[1:]:
            self.move(self.positions[index].x, self.positions[index].y)
        return self.release()

    def _reject_unspellable(self, word: str) -> SubmissionResult:
        logger.debug("Ring cannot spell %s", word)
        self._emit("not_a_target", word)
        return SubmissionResult(
            outcome="not_a_target",
            word=word,
            level=self.level,
            found_count=self.level_state.found_count,
            total_words=self.level_state.total_words,
        )

    def submit_word(self, candidate: str) -> SubmissionResult:
        """Validate a candidate word and emit the matching events."""
        result = self.level_state.submit(candidate)

        kind = _OUTCOME_EVENTS.get(result.outcome)
        if kind is not None:
            self._emit(kind, result.word)

        if result.level_complete:
            self._pending_complete = self.config.level_complete_delay
            if self._pending_complete <= 0:
                self._fire_level_complete()

        return result

    # -- Hints -------------------------------------------------------------

    def use_hint(self) -> HintResult:
        return self.hints.use_hint(self.puzzle, self.level_state.found_words)

    def toggle_hint_text(self) -> bool:
        self.show_hint_text = not self.show_hint_text
        return self.show_hint_text

    # -- Time --------------------------------------------------------------

    def tick(self, elapsed_seconds: float = 1.0) -> List[GameEvent]:
        """
        Advance every countdown by the elapsed time.

        Zero, negative and non-finite durations are ignored.

        Returns:
            Events emitted during this tick
        """
        if not math.isfinite(elapsed_seconds) or elapsed_seconds <= 0:
            return []

        emitted_from = len(self.events)

        if self.hints.tick(elapsed_seconds):
            self._emit("hint_expired")

        if self._pending_complete is not None:
            self._pending_complete -= elapsed_seconds
            if self._pending_complete <= 0:
                self._fire_level_complete()

        return self.events[emitted_from:]

    def _fire_level_complete(self) -> None:
        self._pending_complete = None
        self._emit("level_complete")

    # -- Events ------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _emit(self, kind: EventKind, word: Optional[str] = None) -> None:
        event = GameEvent(kind=kind, level=self.level, word=word)
        self.events.append(event)
        for listener in self._listeners:
            listener(event)

    # -- Rendering state ---------------------------------------------------

    def revealed_cells(self) -> Set[Tuple[int, int]]:
        return revealed_cells(self.puzzle.crossword, self.level_state.found_words)

    def render_crossword(self) -> str:
        return render_crossword(self.puzzle.crossword, self.revealed_cells())

    def get_state(self) -> Dict:
        """
        Get the current session state as a dictionary.

        Useful for serialization and for the presentation layer.
        """
        active = self.hints.active_hint
        return {
            "level": self.level,
            "title": self.title,
            "status": self.level_state.status,
            "found_words": list(self.level_state.found_words),
            "word_list": self.level_state.masked_words(),
            "progress": self.level_state.progress_text(),
            "selection": self.tracker.selection.model_dump(),
            "hint_text": self.puzzle.hint if self.show_hint_text else None,
            "hint_budget": self.hints.snapshot().model_dump(),
            "active_hint": active.model_dump() if active else None,
            "revealed_cells": sorted(self.revealed_cells()),
        }
