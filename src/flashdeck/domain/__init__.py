# Domain Package
from .errors import (
    EmptyDeck,
    FlashdeckError,
    InvalidDistribution,
    OutOfBounds,
    PersistenceFailure,
    UnrecognizedInput,
)
from .models import Deck, Flashcard, Side
from .ports import DeckRepository, InputProvider, Renderer

__all__ = [
    "Deck",
    "Flashcard",
    "Side",
    "DeckRepository",
    "InputProvider",
    "Renderer",
    "FlashdeckError",
    "OutOfBounds",
    "EmptyDeck",
    "InvalidDistribution",
    "UnrecognizedInput",
    "PersistenceFailure",
]
