"""
Word validation and per-level state.

A level is InProgress until every target word has been found, then Complete.
Only an explicit reset (or switching to another level) brings it back.
"""

import logging
from typing import List, Literal

from pydantic import BaseModel, Field

from .models import PuzzleDefinition, SubmissionResult


logger = logging.getLogger(__name__)

# Shortest candidate that is checked against the word list
DEFAULT_MIN_WORD_LENGTH = 3

LevelStatus = Literal["in_progress", "complete"]


class LevelState(BaseModel):
    """
    Tracks found words for one puzzle and detects completion.

    Attributes:
        puzzle: The active puzzle definition
        level: 1-based level number, reported back in results
        min_word_length: Candidates shorter than this are discarded silently
        found_words: Words found so far, in the order they were found
        status: 'in_progress' or 'complete'
    """

    puzzle: PuzzleDefinition
    level: int = Field(default=1, ge=1)
    min_word_length: int = Field(default=DEFAULT_MIN_WORD_LENGTH, ge=1)
    found_words: List[str] = Field(default_factory=list)
    status: LevelStatus = "in_progress"

    @property
    def total_words(self) -> int:
        return len(self.puzzle.word_set)

    @property
    def found_count(self) -> int:
        return len(self.found_words)

    @property
    def is_complete(self) -> bool:
        return self.status == "complete"

    @property
    def unsolved_words(self) -> List[str]:
        """Target words not yet found, in catalog order."""
        found = set(self.found_words)
        seen = set()
        unsolved = []
        for word in self.puzzle.words:
            if word not in found and word not in seen:
                unsolved.append(word)
                seen.add(word)
        return unsolved

    def submit(self, candidate: str) -> SubmissionResult:
        """
        Evaluate a candidate word against the puzzle.

        Never raises for any string input; every case maps to an outcome.
        """
        word = (candidate or "").strip().upper()

        if len(word) < self.min_word_length:
            outcome = "too_short"
        elif word in self.found_words:
            outcome = "already_found"
        elif word in self.puzzle.word_set:
            self.found_words.append(word)
            outcome = "found"
            logger.debug("Level %d: found %s (%d/%d)", self.level, word, self.found_count, self.total_words)
            self._check_complete()
        else:
            outcome = "not_a_target"

        return SubmissionResult(
            outcome=outcome,
            word=word,
            level=self.level,
            found_count=self.found_count,
            total_words=self.total_words,
            level_complete=outcome == "found" and self.is_complete,
        )

    def reset(self) -> None:
        """Clear found words and return to InProgress."""
        self.found_words = []
        self.status = "in_progress"

    def _check_complete(self) -> None:
        """Update the status once every target word is found."""
        if self.found_count >= self.total_words:
            self.status = "complete"
            logger.info("Level %d complete", self.level)

    def masked_words(self) -> List[str]:
        """Word list for display: found words in full, others as 'N letters'."""
        return [
            word if word in self.found_words else f"{len(word)} letters"
            for word in self.puzzle.words
        ]

    def progress_text(self) -> str:
        return f"{self.found_count} / {self.total_words} words found"
