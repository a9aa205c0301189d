"""Tests for Flashcard and Deck domain models."""

import pytest

from flashdeck.domain.errors import OutOfBounds
from flashdeck.domain.models import Deck, Flashcard, Side


class TestFlashcard:
    def test_new_card_has_no_history(self):
        card = Flashcard("front", "back")
        assert card.correct == 0
        assert card.incorrect == 0
        assert card.attempts == 0

    def test_mark_correct_then_incorrect(self):
        card = Flashcard("front", "back")
        card.mark_correct()
        card.mark_incorrect()
        assert (card.correct, card.incorrect) == (1, 1)

    def test_each_mark_counts(self):
        card = Flashcard("front", "back")
        for _ in range(3):
            card.mark_incorrect()
        assert card.incorrect == 3
        assert card.correct == 0


class TestSide:
    def test_flipped(self):
        assert Side.FRONT.flipped() is Side.BACK
        assert Side.BACK.flipped() is Side.FRONT

    def test_flip_is_involutive(self):
        for side in Side:
            assert side.flipped().flipped() is side


class TestDeck:
    def test_add_keeps_insertion_order(self):
        deck = Deck()
        deck.add_card(Flashcard("a", "1"))
        deck.add_card(Flashcard("b", "2"))
        assert [c.front for c in deck.cards] == ["a", "b"]
        assert len(deck) == 2

    def test_remove_valid_index(self, three_card_deck):
        removed = three_card_deck.remove_card(1)
        assert removed.front == "two"
        assert len(three_card_deck) == 2
        assert "two" not in [c.front for c in three_card_deck.cards]

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_remove_invalid_index_leaves_deck_untouched(self, three_card_deck, index):
        before = list(three_card_deck.cards)
        with pytest.raises(OutOfBounds):
            three_card_deck.remove_card(index)
        assert three_card_deck.cards == before

    def test_remove_from_empty_deck(self):
        with pytest.raises(OutOfBounds):
            Deck().remove_card(0)

    def test_remove_clamps_cursor(self, three_card_deck):
        three_card_deck.current_index = 2
        three_card_deck.remove_card(2)
        assert three_card_deck.current_index == 1

    def test_remove_last_card_resets_cursor(self):
        deck = Deck(cards=[Flashcard("a", "1")])
        deck.remove_card(0)
        assert deck.is_empty
        assert deck.current_index == 0

    def test_move_cursor_out_of_range(self, three_card_deck):
        with pytest.raises(OutOfBounds):
            three_card_deck.move_cursor(3)
        assert three_card_deck.current_index == 0

    def test_card_at(self, three_card_deck):
        assert three_card_deck.card_at(2).back == "tres"
        with pytest.raises(OutOfBounds):
            three_card_deck.card_at(5)
