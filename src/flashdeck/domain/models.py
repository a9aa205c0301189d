"""
Domain models for decks and cards.

These are pure data structures with no I/O or external dependencies.
"""

from dataclasses import dataclass, field
from enum import Enum

from .errors import OutOfBounds


class Side(Enum):
    """Which face of a card is currently displayed."""

    FRONT = "front"
    BACK = "back"

    def flipped(self) -> "Side":
        return Side.BACK if self is Side.FRONT else Side.FRONT


@dataclass
class Flashcard:
    """
    A single front/back card with its answer history.

    Attributes:
        front: Prompt text.
        back: Answer text.
        correct: Times the card was answered correctly.
        incorrect: Times the card was answered incorrectly.
    """

    front: str
    back: str
    correct: int = 0
    incorrect: int = 0

    @property
    def attempts(self) -> int:
        return self.correct + self.incorrect

    def mark_correct(self) -> None:
        self.correct += 1

    def mark_incorrect(self) -> None:
        self.incorrect += 1


@dataclass
class Deck:
    """
    Ordered collection of flashcards plus the flip-mode cursor.

    Indices are 0-based here; the CLI translates from 1-based positions.
    """

    cards: list[Flashcard] = field(default_factory=list)
    current_index: int = 0

    def __len__(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return not self.cards

    def add_card(self, card: Flashcard) -> None:
        self.cards.append(card)

    def card_at(self, index: int) -> Flashcard:
        self._check_index(index)
        return self.cards[index]

    def remove_card(self, index: int) -> Flashcard:
        """
        Remove and return the card at ``index``.

        Raises:
            OutOfBounds: If ``index`` is outside ``[0, len)``. The deck is untouched.
        """
        self._check_index(index)
        removed = self.cards.pop(index)
        self.clamp_cursor()
        return removed

    def move_cursor(self, index: int) -> None:
        self._check_index(index)
        self.current_index = index

    def clamp_cursor(self) -> None:
        """Pull ``current_index`` back inside the deck (0 when empty)."""
        if not self.cards:
            self.current_index = 0
        else:
            self.current_index = min(max(self.current_index, 0), len(self.cards) - 1)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.cards):
            raise OutOfBounds(index, len(self.cards))
