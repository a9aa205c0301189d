import random

import pytest

from flashdeck.domain.models import Deck, Flashcard


@pytest.fixture
def mock_home(tmp_path, monkeypatch):
    """Mocks Path.home() to point to a temp dir."""
    home = tmp_path / "home"
    home.mkdir()

    # Isolate config and the default deck file from the real home directory
    monkeypatch.setenv("HOME", str(home))
    for var in ("FLASHDECK_DECK_FILE", "FLASHDECK_INPUT_MODE", "FLASHDECK_AUTOSAVE", "FLASHDECK_SEED"):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def deck_file(tmp_path):
    return tmp_path / "deck.yaml"


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def math_deck():
    return Deck(cards=[Flashcard("2+2", "4"), Flashcard("3+3", "6")])


@pytest.fixture
def three_card_deck():
    return Deck(
        cards=[
            Flashcard("one", "uno"),
            Flashcard("two", "dos"),
            Flashcard("three", "tres"),
        ]
    )
