"""
Ports (interfaces) for the review engine's collaborators.

These define the contract that infrastructure adapters must implement.
Application services depend on these abstractions, not concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .models import Deck

if TYPE_CHECKING:
    from flashdeck.application.intents import Intent
    from flashdeck.application.session import ReviewView


class DeckRepository(ABC):
    """
    Port for loading and saving a deck.

    Implementations:
        - YamlDeckRepository: Stores the deck as a YAML document on disk.
    """

    @abstractmethod
    def load(self) -> Deck:
        """
        Load the persisted deck.

        Returns:
            The stored deck, or an empty Deck when nothing valid is stored.
        """
        pass

    @abstractmethod
    def save(self, deck: Deck) -> None:
        """
        Persist the full deck.

        Raises:
            PersistenceFailure: If the deck could not be written.
        """
        pass


class InputProvider(ABC):
    """Port for reading the next user action."""

    @abstractmethod
    def next_intent(self) -> "Intent":
        """Block until the user acts and return the normalized intent."""
        pass


class Renderer(ABC):
    """Port for drawing review state. Must never mutate the session."""

    @abstractmethod
    def render(self, view: "ReviewView") -> None:
        pass

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show a transient message such as an unknown-command warning."""
        pass
