"""Exception hierarchy shared by every layer."""


class FlashdeckError(Exception):
    """Base class for all flashdeck errors."""


class OutOfBounds(FlashdeckError):
    """A card index fell outside ``[0, len)``."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index out of bounds: {index} (deck has {size} cards)")


class EmptyDeck(FlashdeckError):
    """A review session was requested on a deck with no cards."""

    def __init__(self, message: str = "The deck is empty. Add cards with 'flashdeck add'."):
        super().__init__(message)


class InvalidDistribution(FlashdeckError):
    """Weighted selection was asked to sample from an unusable weight vector."""


class UnrecognizedInput(FlashdeckError):
    """Raw input or intent the current review mode does not handle."""

    def __init__(self, raw: str | None = None):
        self.raw = raw
        super().__init__("Command does not exist")


class PersistenceFailure(FlashdeckError):
    """The deck could not be written to its store."""
