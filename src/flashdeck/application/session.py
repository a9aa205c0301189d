"""
Review session state machine.

A session owns its deck for the lifetime of one review loop. It consumes
Intents one at a time and moves between SHOWING_FRONT, SHOWING_BACK and
EXITED. How the next card is chosen is delegated to a ReviewMode:

- LearnMode: weighted by answer history, answering is mandatory.
- FlipMode: strictly sequential, nothing is scored.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from flashdeck.domain.errors import EmptyDeck, UnrecognizedInput
from flashdeck.domain.models import Deck, Side

from .intents import FLIP_COMMANDS, FLIP_KEYS, LEARN_COMMANDS, LEARN_KEYS, Intent
from .selector import WeightedSelector

logger = logging.getLogger(__name__)


class SessionState(Enum):
    SHOWING_FRONT = "showing_front"
    SHOWING_BACK = "showing_back"
    EXITED = "exited"


@dataclass(frozen=True)
class ReviewView:
    """
    Read-only snapshot handed to the renderer after every transition.

    Attributes:
        mode: Name of the review mode ("learn" or "flip").
        text: Text of the visible side.
        side: Which side ``text`` comes from.
        position: 1-based position of the card in the deck.
        total: Number of cards in the deck.
        correct: Active card's correct count (learn mode only).
        incorrect: Active card's incorrect count (learn mode only).
    """

    mode: str
    text: str
    side: Side
    position: int
    total: int
    correct: int | None = None
    incorrect: int | None = None


@dataclass(frozen=True)
class Transition:
    """Outcome of handling one intent."""

    intent: Intent
    state: SessionState
    answered: bool = False


class ReviewMode(ABC):
    """Strategy deciding which card comes next."""

    name: str
    commands: dict[str, Intent]
    keys: dict[str, Intent]
    scores_answers: bool = False
    tracks_cursor: bool = False

    def __init__(self, selector: WeightedSelector | None = None):
        self.selector = selector if selector is not None else WeightedSelector()

    @property
    def accepted(self) -> frozenset[Intent]:
        return frozenset(self.commands.values())

    @abstractmethod
    def first_index(self, deck: Deck) -> int:
        pass

    @abstractmethod
    def next_index(self, deck: Deck, current: int, intent: Intent) -> int:
        """Index to show after ``intent`` moved away from ``current``."""
        pass


class LearnMode(ReviewMode):
    name = "learn"
    commands = LEARN_COMMANDS
    keys = LEARN_KEYS
    scores_answers = True

    def first_index(self, deck: Deck) -> int:
        return self.selector.select(deck.cards)

    def next_index(self, deck: Deck, current: int, intent: Intent) -> int:
        return self.selector.select(deck.cards)


class FlipMode(ReviewMode):
    name = "flip"
    commands = FLIP_COMMANDS
    keys = FLIP_KEYS
    tracks_cursor = True

    def first_index(self, deck: Deck) -> int:
        deck.clamp_cursor()
        return deck.current_index

    def next_index(self, deck: Deck, current: int, intent: Intent) -> int:
        last = len(deck) - 1
        if intent is Intent.NEXT:
            return min(current + 1, last)
        if intent is Intent.PREVIOUS:
            return max(current - 1, 0)
        if intent is Intent.RANDOM:
            return self.selector.random_index(deck.cards)
        return current


_MOVES = frozenset({Intent.CORRECT, Intent.INCORRECT, Intent.NEXT, Intent.PREVIOUS, Intent.RANDOM})


class ReviewSession:
    """
    Drives one review run over a deck.

    Raises:
        EmptyDeck: On construction, if the deck has no cards.
    """

    def __init__(self, deck: Deck, mode: ReviewMode):
        if deck.is_empty:
            raise EmptyDeck(f"Cannot start {mode.name} mode: the deck is empty.")

        self.deck = deck
        self.mode = mode
        self.current_card_index = mode.first_index(deck)
        self.visible_side = Side.FRONT
        self.exit_requested = False

        self.reviewed = 0
        self.correct = 0
        self.incorrect = 0

    @property
    def state(self) -> SessionState:
        if self.exit_requested:
            return SessionState.EXITED
        if self.visible_side is Side.BACK:
            return SessionState.SHOWING_BACK
        return SessionState.SHOWING_FRONT

    @property
    def exited(self) -> bool:
        return self.exit_requested

    def handle(self, intent: Intent) -> Transition:
        """
        Apply one intent.

        Raises:
            UnrecognizedInput: If the intent is UNKNOWN or the mode does not
                accept it. The session is left unchanged.
        """
        if self.exit_requested:
            return Transition(intent, self.state)

        if intent is Intent.QUIT:
            self.exit_requested = True
            logger.debug(f"{self.mode.name} session exited after {self.reviewed} answers")
            return Transition(intent, self.state)

        if intent not in self.mode.accepted:
            raise UnrecognizedInput(intent.value)

        if intent is Intent.FLIP:
            self.visible_side = self.visible_side.flipped()
            return Transition(intent, self.state)

        answered = False
        if intent in (Intent.CORRECT, Intent.INCORRECT) and self.mode.scores_answers:
            self._record(intent)
            answered = True

        if intent in _MOVES:
            self._go_to(self.mode.next_index(self.deck, self.current_card_index, intent))

        return Transition(intent, self.state, answered=answered)

    def view(self) -> ReviewView:
        card = self.deck.card_at(self.current_card_index)
        text = card.front if self.visible_side is Side.FRONT else card.back
        scored = self.mode.scores_answers
        return ReviewView(
            mode=self.mode.name,
            text=text,
            side=self.visible_side,
            position=self.current_card_index + 1,
            total=len(self.deck),
            correct=card.correct if scored else None,
            incorrect=card.incorrect if scored else None,
        )

    def _record(self, intent: Intent) -> None:
        card = self.deck.card_at(self.current_card_index)
        if intent is Intent.CORRECT:
            card.mark_correct()
            self.correct += 1
        else:
            card.mark_incorrect()
            self.incorrect += 1
        self.reviewed += 1

    def _go_to(self, index: int) -> None:
        self.current_card_index = index
        self.visible_side = Side.FRONT
        if self.mode.tracks_cursor:
            self.deck.move_cursor(index)
