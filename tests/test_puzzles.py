"""Tests for the puzzle catalog and YAML parsing."""

import pytest

from lexibloom.puzzles import PUZZLES, get_puzzle, level_title, parse_catalog, load_catalog
from lexibloom.puzzles.parsing import parse_crossword_row


VALID_CATALOG = """
puzzles:
  - title: Test Level
    letters: [C, A, T, S, R, E]
    words: [cats, care, race]
    hint: Pets and speed
    crossword:
      - "CATS"
      - "A..."
      - "R..."
      - "E..."
"""


class TestBuiltInCatalog:
    """The shipped levels."""

    def test_three_levels(self):
        """Three puzzles ship with the package."""
        assert len(PUZZLES) == 3

    def test_first_level(self):
        """Level 1 ships with its seven words and grid."""
        puzzle = PUZZLES[0]
        assert puzzle.letters == list("APELTSR")
        assert "PEARL" in puzzle.words
        assert len(puzzle.words) == 7
        assert puzzle.hint == "Think of flowers and gentle movements"
        assert puzzle.crossword[1] == ["E", "", "", "", "E"]

    def test_titles(self):
        """Each level has its title; later levels share a fallback."""
        assert level_title(1) == "Blooming Start"
        assert level_title(2) == "Petal Power"
        assert level_title(3) == "Word Garden"
        assert level_title(4) == "Master Wordsmith"

    def test_get_puzzle(self):
        """Levels are 1-based."""
        assert get_puzzle(2) is PUZZLES[1]

    @pytest.mark.parametrize("level", [0, -1, 4, 99])
    def test_unknown_level_falls_back_to_first(self, level):
        """Out-of-range levels play the first puzzle."""
        assert get_puzzle(level) is PUZZLES[0]

    def test_empty_catalog_raises(self):
        """An empty custom catalog is a programming error."""
        with pytest.raises(ValueError):
            get_puzzle(1, [])


class TestParseCatalog:
    """Catalog YAML parsing and checks."""

    def test_valid_catalog(self):
        """A well-formed catalog parses."""
        puzzles = parse_catalog(VALID_CATALOG)
        assert len(puzzles) == 1
        assert puzzles[0].title == "Test Level"
        assert puzzles[0].words == ["CATS", "CARE", "RACE"]
        assert puzzles[0].crossword[0] == ["C", "A", "T", "S"]
        assert puzzles[0].crossword[1] == ["A", "", "", ""]

    def test_top_level_list(self):
        """A bare list of puzzles is accepted."""
        text = VALID_CATALOG.replace("puzzles:\n", "")
        assert len(parse_catalog(text)) == 1

    def test_letters_as_string(self):
        """Ring letters may be given as one string."""
        text = VALID_CATALOG.replace("[C, A, T, S, R, E]", "CATSRE")
        assert parse_catalog(text)[0].letters == list("CATSRE")

    def test_empty_catalog(self):
        """An empty document fails."""
        with pytest.raises(ValueError, match="empty"):
            parse_catalog("")

    def test_malformed_yaml(self):
        """YAML syntax errors surface as ValueError."""
        with pytest.raises(ValueError, match="not valid YAML"):
            parse_catalog("puzzles: [unclosed")

    def test_too_few_letters(self):
        """Rings need at least six letters."""
        text = VALID_CATALOG.replace("[C, A, T, S, R, E]", "[C, A, T]")
        with pytest.raises(ValueError, match="6-8 letters"):
            parse_catalog(text)

    def test_too_many_letters(self):
        """Rings hold at most eight letters."""
        text = VALID_CATALOG.replace("[C, A, T, S, R, E]", "CATSREDOG")
        with pytest.raises(ValueError, match="6-8 letters"):
            parse_catalog(text)

    def test_one_letter_word(self):
        """Target words need at least two letters."""
        text = VALID_CATALOG.replace("[cats, care, race]", "[cats, a]")
        with pytest.raises(ValueError, match="invalid target word"):
            parse_catalog(text)

    def test_missing_words(self):
        """A puzzle without words fails."""
        text = VALID_CATALOG.replace("words: [cats, care, race]", "words: []")
        with pytest.raises(ValueError, match="no target words"):
            parse_catalog(text)

    def test_missing_crossword(self):
        """A puzzle without a grid fails."""
        text = VALID_CATALOG.split("    crossword:")[0]
        with pytest.raises(ValueError, match="crossword"):
            parse_catalog(text)

    def test_unformable_word_allowed(self):
        """Words the ring cannot spell are accepted as unreachable."""
        text = VALID_CATALOG.replace("[cats, care, race]", "[cats, zebra]")
        assert parse_catalog(text)[0].words == ["CATS", "ZEBRA"]

    def test_row_as_list(self):
        """Rows may be lists with empty strings as placeholders."""
        assert parse_crossword_row(["a", "", "b"]) == ["A", "", "B"]

    def test_load_missing_file(self, tmp_path):
        """A missing catalog file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "nope.yaml")

    def test_load_file(self, tmp_path):
        """Catalogs load from disk."""
        path = tmp_path / "levels.yaml"
        path.write_text(VALID_CATALOG)
        assert load_catalog(path)[0].hint == "Pets and speed"
