"""
Deck command service: the add / remove / list / stats surface.

Each command loads the deck, applies one change and writes the whole deck
back, so the file always reflects the last command.
"""

import logging
from dataclasses import dataclass

from flashdeck.domain.errors import OutOfBounds
from flashdeck.domain.models import Deck, Flashcard
from flashdeck.domain.ports import DeckRepository

from .selector import card_weight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardListing:
    """One card as shown to the user, with its 1-based position."""

    position: int
    front: str
    back: str
    correct: int
    incorrect: int
    weight: float


class DeckService:
    """
    Application service for editing and inspecting a persisted deck.
    """

    def __init__(self, repo: DeckRepository):
        self._repo = repo

    def load(self) -> Deck:
        return self._repo.load()

    def save(self, deck: Deck) -> None:
        self._repo.save(deck)

    def add(self, front: str, back: str) -> Flashcard:
        deck = self._repo.load()
        card = Flashcard(front=front, back=back)
        deck.add_card(card)
        self._repo.save(deck)
        logger.info(f"Added card {len(deck)}")
        return card

    def remove(self, position: int) -> Flashcard:
        """
        Remove the card at 1-based ``position``.

        Raises:
            OutOfBounds: If no card has that position. Nothing is written.
        """
        deck = self._repo.load()
        if position < 1:
            raise OutOfBounds(position - 1, len(deck))
        removed = deck.remove_card(position - 1)
        self._repo.save(deck)
        logger.info(f"Removed card {position}")
        return removed

    def list(self) -> list[CardListing]:
        deck = self._repo.load()
        listing = [
            CardListing(
                position=i,
                front=card.front,
                back=card.back,
                correct=card.correct,
                incorrect=card.incorrect,
                weight=card_weight(card),
            )
            for i, card in enumerate(deck.cards, start=1)
        ]
        self._repo.save(deck)
        return listing
