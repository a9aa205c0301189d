"""
YAML Deck Repository — Infrastructure adapter for the deck file.

Document layout:

    current_index: 0
    cards:
      - front: 2+2
        back: '4'
        correct: 0
        incorrect: 1
"""

import logging
from pathlib import Path
from typing import Any

import yaml  # type: ignore

from flashdeck.domain.errors import PersistenceFailure
from flashdeck.domain.models import Deck, Flashcard
from flashdeck.domain.ports import DeckRepository

logger = logging.getLogger(__name__)


class DeckFormatError(ValueError):
    """Raised internally when a YAML document does not describe a deck."""


def deck_from_dict(data: Any) -> Deck:
    if not isinstance(data, dict):
        raise DeckFormatError("top level must be a mapping")

    raw_cards = data.get("cards", [])
    if not isinstance(raw_cards, list):
        raise DeckFormatError("'cards' must be a list")

    cards: list[Flashcard] = []
    for i, raw in enumerate(raw_cards):
        if not isinstance(raw, dict):
            raise DeckFormatError(f"card {i} must be a mapping")
        try:
            front = raw["front"]
            back = raw["back"]
        except KeyError as e:
            raise DeckFormatError(f"card {i} is missing {e.args[0]!r}") from e
        for name, value in (("front", front), ("back", back)):
            if not isinstance(value, str):
                raise DeckFormatError(f"card {i} has non-text {name} {value!r}")

        correct = raw.get("correct", 0)
        incorrect = raw.get("incorrect", 0)
        for name, value in (("correct", correct), ("incorrect", incorrect)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise DeckFormatError(f"card {i} has invalid {name} count {value!r}")

        cards.append(Flashcard(front, back, correct, incorrect))

    current_index = data.get("current_index", 0)
    if isinstance(current_index, bool) or not isinstance(current_index, int):
        raise DeckFormatError(f"invalid current_index {current_index!r}")

    deck = Deck(cards=cards, current_index=current_index)
    deck.clamp_cursor()
    return deck


def deck_to_dict(deck: Deck) -> dict[str, Any]:
    return {
        "current_index": deck.current_index,
        "cards": [
            {
                "front": c.front,
                "back": c.back,
                "correct": c.correct,
                "incorrect": c.incorrect,
            }
            for c in deck.cards
        ],
    }


class YamlDeckRepository(DeckRepository):
    """
    Stores the deck as a single YAML document.

    Concurrent invocations against the same file are not coordinated; the
    last writer wins.
    """

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> Deck:
        """
        Read the deck file.

        A missing file or one that does not parse as a deck yields an empty Deck.
        """
        if not self.path.exists():
            logger.debug(f"No deck at {self.path}, starting fresh")
            return Deck()

        try:
            text = self.path.read_text(encoding="utf-8")
            data = yaml.safe_load(text)
            if data is None:
                return Deck()
            return deck_from_dict(data)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, DeckFormatError) as e:
            logger.warning(f"Could not read deck {self.path} ({e}); starting with an empty deck")
            return Deck()

    def save(self, deck: Deck) -> None:
        text = yaml.safe_dump(
            deck_to_dict(deck),
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise PersistenceFailure(f"Could not write deck to {self.path}: {e}") from e
        logger.debug(f"Saved {len(deck)} cards to {self.path}")
