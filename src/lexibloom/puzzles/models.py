"""Data models for puzzle definitions and word validation."""

from typing import List, Optional, Literal, NamedTuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


WordOutcome = Literal["too_short", "found", "already_found", "not_a_target"]
Direction = Literal["H", "V"]


class PuzzleDefinition(BaseModel):
    """One level: ring letters, target words, text hint and crossword layout."""

    model_config = ConfigDict(frozen=True)

    letters: List[str] = Field(..., min_length=1)
    words: List[str] = Field(default_factory=list)
    hint: str = ""
    crossword: List[List[str]] = Field(default_factory=list)  # '' marks a placeholder cell
    title: Optional[str] = None

    @field_validator("letters", "words")
    @classmethod
    def _upper(cls, values: List[str]) -> List[str]:
        return [v.strip().upper() for v in values]

    @field_validator("crossword")
    @classmethod
    def _upper_cells(cls, rows: List[List[str]]) -> List[List[str]]:
        return [[cell.strip().upper() for cell in row] for row in rows]

    @property
    def word_set(self) -> frozenset:
        return frozenset(self.words)


class Placement(NamedTuple):
    """Where a word sits in the crossword grid."""
    row: int
    col: int
    direction: str


class SubmissionResult(BaseModel):
    """Outcome of submitting one candidate word to a level."""
    outcome: WordOutcome
    word: str
    level: int
    found_count: int = 0
    total_words: int = 0
    level_complete: bool = False

    @property
    def accepted(self) -> bool:
        return self.outcome == "found"
