"""Gesture, hint and session engine for LexiBloom."""

from .models import (
    LetterPosition,
    SelectionState,
    HintBudget,
    ActiveHint,
    HintResult,
    HintOutcome,
    GameEvent,
    EventKind,
    HintConfig,
    GameConfig,
)
from .geometry import compute_ring_positions
from .gesture import GestureTracker, DEFAULT_SELECTION_RADIUS
from .store import HintStateStore, InMemoryHintStore, JsonFileHintStore, STORE_KEY
from .hints import HintEngine, reveal_path
from .game import WordGame

__all__ = [
    "LetterPosition",
    "SelectionState",
    "HintBudget",
    "ActiveHint",
    "HintResult",
    "HintOutcome",
    "GameEvent",
    "EventKind",
    "HintConfig",
    "GameConfig",
    "compute_ring_positions",
    "GestureTracker",
    "DEFAULT_SELECTION_RADIUS",
    "HintStateStore",
    "InMemoryHintStore",
    "JsonFileHintStore",
    "STORE_KEY",
    "HintEngine",
    "reveal_path",
    "WordGame",
]
