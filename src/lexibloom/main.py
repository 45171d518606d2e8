"""
Main entry point for playing LexiBloom in a terminal.

Usage:
    python -m lexibloom.main
    python -m lexibloom.main config.yaml --level 2 --verbose
"""

import argparse
import logging
import shlex
import sys
import time
from pathlib import Path
from typing import List, Optional

import yaml

from .engine import GameConfig, GameEvent, WordGame


HELP_TEXT = """Commands:
  trace WORD     trace a word across the letter ring
  press I        press ring letter I (0-based)
  move X Y       move the pointer
  release        release the pointer and check the word
  hint           spend a hint on an unsolved word
  show-hint      show or hide the level's text hint
  wait SECONDS   let time pass (cooldowns, hint display)
  reset          restart the current level
  next           go to the next level
  level N        jump to level N
  status         show the board
  quit           leave the game"""

_FEEDBACK = {
    "too_short": "Too short",
    "found": "Found {word}!",
    "already_found": "Word already found!",
    "not_a_target": "{word} is not one of the words",
}


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def format_event(event: GameEvent, game: WordGame) -> Optional[str]:
    """Toast-style line for events that arrive outside a direct command reply."""
    if event.kind == "level_complete":
        if game.is_final_level:
            return f"Level {event.level} completed! You've completed all levels! Type 'next' to play again."
        return f"Level {event.level} completed! Type 'next' for the next level."
    if event.kind == "hint_expired":
        return "Hint faded"
    return None


def render_status(game: WordGame) -> List[str]:
    state = game.get_state()
    lines = [
        f"Level {game.level}: {game.title}",
        "Letters: " + "  ".join(f"{p.letter_index}:{p.character}" for p in game.positions),
        game.render_crossword(),
        "Words: " + ", ".join(state["word_list"]),
        state["progress"],
    ]
    budget = game.hints.snapshot()
    lines.append(f"Hints left: {budget.remaining_hints} (cooldown {budget.cooldown_remaining_seconds}s)")
    if state["active_hint"]:
        indices = state["active_hint"]["letter_indices"]
        lines.append("Hint path: " + " -> ".join(game.positions[i].character for i in indices))
    if state["hint_text"]:
        lines.append(f"Hint: {state['hint_text']}")
    return lines


def execute(game: WordGame, line: str) -> List[str]:
    """
    Run one command against the game.

    Returns:
        Lines to print; malformed commands produce a usage message
    """
    try:
        parts = shlex.split(line)
    except ValueError as e:
        return [f"Could not parse command: {e}"]
    if not parts:
        return []

    command, args = parts[0].lower(), parts[1:]
    output: List[str] = []

    def report(result) -> None:
        if result is None:
            output.append("No gesture in progress")
            return
        output.append(_FEEDBACK[result.outcome].format(word=result.word))
        if result.level_complete:
            output.append("All words found!")

    try:
        if command == "trace" and len(args) == 1:
            report(game.trace_word(args[0]))
        elif command == "press" and len(args) == 1:
            if not game.press(int(args[0])):
                output.append("Press ignored")
        elif command == "move" and len(args) == 2:
            game.move(float(args[0]), float(args[1]))
            output.append(f"Selection: {game.tracker.selection.word}")
        elif command == "release" and not args:
            report(game.release())
        elif command == "hint" and not args:
            result = game.use_hint()
            output.append(result.message)
            if result.hint:
                output.append("Hint path: " + " -> ".join(
                    game.positions[i].character for i in result.hint.letter_indices
                ))
        elif command == "show-hint" and not args:
            output.append(f"Hint: {game.puzzle.hint}" if game.toggle_hint_text() else "Hint hidden")
        elif command == "wait" and len(args) == 1:
            for event in game.tick(float(args[0])):
                message = format_event(event, game)
                if message:
                    output.append(message)
        elif command == "reset" and not args:
            game.reset_level()
            output.append(f"Level {game.level} reset")
        elif command == "next" and not args:
            game.advance_level()
            output.extend(render_status(game))
        elif command == "level" and len(args) == 1:
            game.set_level(int(args[0]))
            output.extend(render_status(game))
        elif command == "status" and not args:
            output.extend(render_status(game))
        elif command == "help":
            output.append(HELP_TEXT)
        else:
            output.append(f"Unknown command: {line.strip()} (type 'help')")
    except ValueError:
        output.append(f"Invalid arguments: {line.strip()}")

    return output


def main():
    parser = argparse.ArgumentParser(
        description="Play LexiBloom in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  min_word_length: 3
  seed: 42
  hint_store_path: ~/.lexibloom/state.json
  hints:
    max_hints: 3
    cooldown_seconds: 600
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults apply when omitted)"
    )
    parser.add_argument(
        "--level", "-l",
        type=int,
        default=1,
        help="Level to start on (default: 1)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log engine activity to stderr"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config) if args.config else GameConfig()
        game = WordGame.create(config=config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    if args.level != 1:
        game.set_level(args.level)

    print("\n".join(render_status(game)))
    print("Type 'help' for commands.")

    try:
        last_tick = time.monotonic()
        for line in sys.stdin:
            now = time.monotonic()
            for event in game.tick(now - last_tick):
                message = format_event(event, game)
                if message:
                    print(message)
            last_tick = now

            if line.strip().lower() in ("quit", "exit"):
                break
            for out in execute(game, line):
                print(out)
    except KeyboardInterrupt:
        print()

    print()
    print("=== Session Summary ===")
    print(f"Level: {game.level} ({game.title})")
    print(game.level_state.progress_text())

    return 0


if __name__ == "__main__":
    sys.exit(main())
