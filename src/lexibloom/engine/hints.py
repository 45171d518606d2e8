"""
Hint engine: a fixed pool of hints gated by a cooldown.

Each successful hint picks an unsolved word at random, highlights the ring
positions of its first few letters, spends one hint and restarts the
cooldown. The budget is persisted through a HintStateStore after every
change; countdowns advance only through tick().
"""

import logging
import math
import random
import time
from typing import Callable, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..puzzles.models import PuzzleDefinition
from .models import ActiveHint, HintBudget, HintConfig, HintResult
from .store import HintStateStore, InMemoryHintStore


logger = logging.getLogger(__name__)


def reveal_length(word: str, cap: int = 3) -> int:
    """Number of leading letters a hint reveals: half the word, rounded up, capped."""
    return min(math.ceil(len(word) / 2), cap)


def reveal_path(word: str, letters: Sequence[str], cap: int = 3) -> List[int]:
    """
    Ring indices of the first letters of a word.

    Each letter maps to the first ring index holding that character; letters
    missing from the ring are skipped.
    """
    indices = []
    for character in word[:reveal_length(word, cap)]:
        if character in letters:
            indices.append(list(letters).index(character))
    return indices


class HintEngine(BaseModel):
    """
    Manages the hint budget and the currently shown hint.

    Attributes:
        config: Pool size, cooldown and display durations
        store: HintStateStore the budget is loaded from and saved to
        rng: Random source used to choose the hinted word
        clock: Returns the current epoch time in seconds
        budget: Remaining hints and cooldown
        active_hint: The hint currently displayed, if any
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: HintConfig = Field(default_factory=HintConfig)
    store: Optional[HintStateStore] = None
    rng: random.Random = Field(default_factory=random.Random)
    clock: Callable[[], float] = time.time
    budget: Optional[HintBudget] = None
    active_hint: Optional[ActiveHint] = None
    _carry: float = 0.0

    def model_post_init(self, __context) -> None:
        """Attach a default store and load the persisted budget."""
        if self.store is None:
            self.store = InMemoryHintStore()
        if self.budget is None:
            self.budget = self.load()

    @classmethod
    def create(
        cls,
        config: Optional[HintConfig] = None,
        store: Optional[HintStateStore] = None,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ) -> "HintEngine":
        """
        Factory method to create an engine with a seeded random source.

        Args:
            config: Hint configuration (defaults apply when omitted)
            store: HintStateStore to persist the budget with
            seed: Optional random seed for reproducible word choice
            clock: Time source for the cooldown anchor

        Returns:
            A HintEngine with its budget restored from the store
        """
        return cls(
            config=config or HintConfig(),
            store=store,
            rng=random.Random(seed),
            clock=clock,
        )

    def fresh_budget(self) -> HintBudget:
        return HintBudget(remaining_hints=self.config.max_hints)

    def load(self) -> HintBudget:
        """
        Restore the budget from the store.

        Time elapsed since the cooldown anchor is subtracted from the saved
        cooldown. Missing or unusable data yields a fresh budget.
        """
        saved = self.store.load()
        if saved is None:
            return self.fresh_budget()

        remaining = min(max(saved.remaining_hints, 0), self.config.max_hints)
        cooldown = saved.cooldown_remaining_seconds

        if cooldown > 0 and saved.last_used_timestamp is not None:
            elapsed = max(0.0, self.clock() - saved.last_used_timestamp)
            cooldown = max(0, math.ceil(cooldown - elapsed))

        return HintBudget(
            remaining_hints=remaining,
            cooldown_remaining_seconds=cooldown,
            last_used_timestamp=saved.last_used_timestamp,
        )

    @property
    def remaining_hints(self) -> int:
        return self.budget.remaining_hints

    @property
    def cooldown_remaining_seconds(self) -> int:
        return self.budget.cooldown_remaining_seconds

    def snapshot(self) -> HintBudget:
        return self.budget.model_copy()

    def _result(self, outcome: str, hint: Optional[ActiveHint] = None) -> HintResult:
        return HintResult(
            outcome=outcome,
            hint=hint,
            remaining_hints=self.budget.remaining_hints,
            cooldown_remaining_seconds=self.budget.cooldown_remaining_seconds,
        )

    def use_hint(self, puzzle: PuzzleDefinition, found_words: Iterable[str]) -> HintResult:
        """
        Spend one hint on a random unsolved word.

        Returns:
            HintResult with outcome 'revealed', or one of 'exhausted',
            'cooling_down', 'nothing_left' when nothing changed
        """
        if self.budget.remaining_hints == 0:
            return self._result("exhausted")

        if self.budget.cooldown_remaining_seconds > 0:
            return self._result("cooling_down")

        found = set(found_words)
        unsolved = list(dict.fromkeys(w for w in puzzle.words if w not in found))
        if not unsolved:
            return self._result("nothing_left")

        word = self.rng.choice(unsolved)
        self.active_hint = ActiveHint(
            target_word=word,
            letter_indices=reveal_path(word, puzzle.letters, self.config.reveal_cap),
            expires_in_seconds=self.config.display_seconds,
        )

        self.budget.remaining_hints -= 1
        self.budget.cooldown_remaining_seconds = self.config.cooldown_seconds
        self.budget.last_used_timestamp = self.clock()
        self._carry = 0.0
        self.store.save(self.budget)

        logger.info(
            "Hint used for a %d-letter word; %d left, cooldown %ds",
            len(word), self.budget.remaining_hints, self.budget.cooldown_remaining_seconds,
        )
        return self._result("revealed", self.active_hint)

    def tick(self, elapsed_seconds: float = 1.0) -> bool:
        """
        Advance the cooldown and the active hint's display time.

        The cooldown drops in whole seconds; fractions carry over to the next
        tick. Zero, negative and non-finite durations are ignored.

        Returns:
            True if the active hint expired during this tick
        """
        if not math.isfinite(elapsed_seconds) or elapsed_seconds <= 0:
            return False

        if self.budget.cooldown_remaining_seconds > 0:
            self._carry += elapsed_seconds
            whole = int(self._carry)
            self._carry -= whole
            self.budget.cooldown_remaining_seconds = max(0, self.budget.cooldown_remaining_seconds - whole)
            if self.budget.cooldown_remaining_seconds == 0:
                self._carry = 0.0

        if self.active_hint is not None:
            self.active_hint.expires_in_seconds -= elapsed_seconds
            if self.active_hint.expires_in_seconds <= 0:
                self.active_hint = None
                return True

        return False

    def clear_active_hint(self) -> None:
        self.active_hint = None

    def reset_budget(self) -> None:
        """Restore a full pool with no cooldown and persist it."""
        self.budget = self.fresh_budget()
        self._carry = 0.0
        self.store.save(self.budget)
