"""Tests for the terminal front end."""

import pytest
from pydantic import ValidationError

from lexibloom.engine import InMemoryHintStore, WordGame
from lexibloom.main import execute, load_config


@pytest.fixture
def game():
    return WordGame.create(store=InMemoryHintStore(), seed=3)


class TestLoadConfig:
    """YAML configuration loading."""

    def test_load(self, tmp_path):
        """Values from the file override defaults."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "min_word_length: 2\n"
            "seed: 42\n"
            "hints:\n"
            "  max_hints: 5\n"
            "  cooldown_seconds: 60\n"
        )
        config = load_config(str(path))
        assert config.min_word_length == 2
        assert config.seed == 42
        assert config.hints.max_hints == 5
        assert config.hints.cooldown_seconds == 60
        assert config.hints.display_seconds == 10

    def test_empty_file_gives_defaults(self, tmp_path):
        """An empty file is a default config."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)).min_word_length == 3

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_invalid_value(self, tmp_path):
        """Out-of-range values are rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("min_word_length: 1\n")
        with pytest.raises(ValidationError):
            load_config(str(path))


class TestCommands:
    """Command handling."""

    def test_trace(self, game):
        """trace reports the outcome."""
        assert execute(game, "trace petal") == ["Found PETAL!"]
        assert execute(game, "trace petal") == ["Word already found!"]
        assert execute(game, "trace pe") == ["Too short"]
        assert execute(game, "trace pleat") == ["PLEAT is not one of the words"]

    def test_press_and_release(self, game):
        """Raw pointer commands build a word."""
        p = game.positions
        assert execute(game, "press 1") == []
        assert execute(game, f"move {p[2].x} {p[2].y}") == ["Selection: PE"]
        execute(game, f"move {p[0].x} {p[0].y}")
        execute(game, f"move {p[6].x} {p[6].y}")
        assert execute(game, "release") == ["Found PEAR!"]

    def test_release_without_gesture(self, game):
        """A stray release is reported."""
        assert execute(game, "release") == ["No gesture in progress"]

    def test_press_ignored(self, game):
        """Out-of-range presses are reported."""
        assert execute(game, "press 12") == ["Press ignored"]

    def test_hint_then_cooldown(self, game):
        """A second hint is refused while cooling down."""
        output = execute(game, "hint")
        assert output[0].startswith("Hint:")
        assert output[1].startswith("Hint path:")
        assert execute(game, "hint") == ["Next hint in 10:00"]

    def test_wait_reports_completion(self, game):
        """Waiting lets the completion signal fire."""
        for word in game.puzzle.words[:-1]:
            execute(game, f"trace {word}")
        assert execute(game, f"trace {game.puzzle.words[-1]}")[-1] == "All words found!"
        assert execute(game, "wait 2") == ["Level 1 completed! Type 'next' for the next level."]

    def test_wait_with_bad_durations(self, game):
        """Infinite or NaN waits are ignored and later waits still count down."""
        execute(game, "hint")
        assert execute(game, "wait inf") == []
        assert execute(game, "wait nan") == []
        execute(game, "wait 60")
        assert execute(game, "hint") == ["Next hint in 9:00"]

    def test_trace_letters_not_on_ring(self, game):
        """Extra letters make the word fail instead of being dropped."""
        assert execute(game, "trace pexarl") == ["PEXARL is not one of the words"]

    def test_next_and_level(self, game):
        """Level commands switch puzzles and print the board."""
        assert execute(game, "next")[0] == "Level 2: Petal Power"
        assert execute(game, "level 3")[0] == "Level 3: Word Garden"

    def test_reset(self, game):
        """reset clears progress."""
        execute(game, "trace petal")
        assert execute(game, "reset") == ["Level 1 reset"]
        assert game.level_state.found_words == []

    def test_show_hint(self, game):
        """show-hint toggles the text hint."""
        assert execute(game, "show-hint") == ["Hint: Think of flowers and gentle movements"]
        assert execute(game, "show-hint") == ["Hint hidden"]

    def test_status(self, game):
        """status renders level, grid and progress."""
        output = execute(game, "status")
        assert output[0] == "Level 1: Blooming Start"
        assert "0 / 7 words found" in output

    @pytest.mark.parametrize("line", ["dance", "press x", "level", "move 1"])
    def test_bad_commands(self, game, line):
        """Unknown or malformed commands produce a message."""
        output = execute(game, line)
        assert len(output) == 1
        assert "Unknown command" in output[0] or "Invalid arguments" in output[0]

    def test_blank_line(self, game):
        """Blank input does nothing."""
        assert execute(game, "   ") == []
