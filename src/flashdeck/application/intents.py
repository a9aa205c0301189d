"""
Normalized user actions and the raw-input tables that produce them.

Text commands and key presses differ per review mode ("n" means "no" while
learning but "next" while flipping), so each mode gets its own table.
"""

from enum import Enum


class Intent(Enum):
    FLIP = "flip"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    NEXT = "next"
    PREVIOUS = "previous"
    RANDOM = "random"
    SHOW = "show"
    QUIT = "quit"
    UNKNOWN = "unknown"


LEARN_COMMANDS: dict[str, Intent] = {
    "flip": Intent.FLIP,
    "f": Intent.FLIP,
    "yes": Intent.CORRECT,
    "y": Intent.CORRECT,
    "no": Intent.INCORRECT,
    "n": Intent.INCORRECT,
    "show": Intent.SHOW,
    "s": Intent.SHOW,
    "quit": Intent.QUIT,
    "q": Intent.QUIT,
}

FLIP_COMMANDS: dict[str, Intent] = {
    "flip": Intent.FLIP,
    "f": Intent.FLIP,
    "next": Intent.NEXT,
    "n": Intent.NEXT,
    "back": Intent.PREVIOUS,
    "b": Intent.PREVIOUS,
    "random": Intent.RANDOM,
    "r": Intent.RANDOM,
    "show": Intent.SHOW,
    "s": Intent.SHOW,
    "quit": Intent.QUIT,
    "q": Intent.QUIT,
}

LEARN_KEYS: dict[str, Intent] = {
    "f": Intent.FLIP,
    "y": Intent.CORRECT,
    "n": Intent.INCORRECT,
    "q": Intent.QUIT,
}

FLIP_KEYS: dict[str, Intent] = {
    "f": Intent.FLIP,
    "n": Intent.NEXT,
    "b": Intent.PREVIOUS,
    "r": Intent.RANDOM,
    "q": Intent.QUIT,
}


def parse_intent(raw: str, table: dict[str, Intent]) -> Intent:
    """Map raw text or a key to an Intent; unknown input yields Intent.UNKNOWN."""
    return table.get(raw.strip().lower(), Intent.UNKNOWN)


def help_line(table: dict[str, Intent]) -> str:
    """Summarize a table as ``flip/f: flip, ...`` for prompts."""
    by_intent: dict[Intent, list[str]] = {}
    for raw, intent in table.items():
        by_intent.setdefault(intent, []).append(raw)
    return ", ".join(f"{'/'.join(raws)}: {intent.value}" for intent, raws in by_intent.items())
