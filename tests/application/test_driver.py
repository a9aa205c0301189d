"""Tests for the review driver loop."""

import random
from collections import Counter
from unittest.mock import MagicMock

import pytest

from flashdeck.application.driver import run_review
from flashdeck.application.intents import Intent
from flashdeck.application.selector import WeightedSelector
from flashdeck.application.session import FlipMode, LearnMode, ReviewSession
from flashdeck.domain.errors import EmptyDeck
from flashdeck.domain.models import Deck, Side
from flashdeck.domain.ports import InputProvider, Renderer


def scripted_input(*intents):
    inputs = MagicMock(spec=InputProvider)
    inputs.next_intent.side_effect = list(intents)
    return inputs


@pytest.fixture
def renderer():
    return MagicMock(spec=Renderer)


def test_renders_initial_view_and_after_each_transition(three_card_deck, renderer):
    session = ReviewSession(three_card_deck, FlipMode())
    run_review(session, scripted_input(Intent.FLIP, Intent.NEXT, Intent.QUIT), renderer)

    views = [c.args[0] for c in renderer.render.call_args_list]
    assert [(v.position, v.side) for v in views] == [
        (1, Side.FRONT),
        (1, Side.BACK),
        (2, Side.FRONT),
    ]
    renderer.notify.assert_not_called()


def test_unknown_input_is_reported_and_loop_continues(three_card_deck, renderer):
    session = ReviewSession(three_card_deck, FlipMode())
    inputs = scripted_input(Intent.UNKNOWN, Intent.CORRECT, Intent.NEXT, Intent.QUIT)

    run_review(session, inputs, renderer)

    assert renderer.notify.call_count == 2
    renderer.notify.assert_called_with("Command does not exist")
    assert inputs.next_intent.call_count == 4
    assert three_card_deck.current_index == 1


def test_quit_stops_reading_input(three_card_deck, renderer):
    session = ReviewSession(three_card_deck, FlipMode())
    inputs = scripted_input(Intent.QUIT, Intent.NEXT)

    run_review(session, inputs, renderer)

    assert inputs.next_intent.call_count == 1
    assert renderer.render.call_count == 1


def test_checkpoint_after_each_answer(math_deck, renderer):
    session = ReviewSession(math_deck, LearnMode(WeightedSelector(seed=3)))
    checkpoint = MagicMock()
    inputs = scripted_input(Intent.FLIP, Intent.CORRECT, Intent.INCORRECT, Intent.QUIT)

    summary = run_review(session, inputs, renderer, checkpoint=checkpoint)

    assert checkpoint.call_count == 2
    checkpoint.assert_called_with(math_deck)
    assert (summary.reviewed, summary.correct, summary.incorrect) == (2, 1, 1)
    assert summary.mode == "learn"
    assert sum(c.correct for c in math_deck.cards) == 1
    assert sum(c.incorrect for c in math_deck.cards) == 1


def test_renderer_cannot_see_later_mutations(math_deck, renderer):
    session = ReviewSession(math_deck, LearnMode(WeightedSelector(seed=5)))
    run_review(session, scripted_input(Intent.CORRECT, Intent.QUIT), renderer)

    first_view = renderer.render.call_args_list[0].args[0]
    assert (first_view.correct, first_view.incorrect) == (0, 0)


def test_empty_deck_never_renders(renderer):
    with pytest.raises(EmptyDeck):
        run_review(ReviewSession(Deck(), FlipMode()), scripted_input(Intent.QUIT), renderer)
    renderer.render.assert_not_called()
    renderer.notify.assert_not_called()


def test_missed_card_then_weighted_draws(math_deck, renderer):
    """Missing "2+2" once gives weights 2.0 vs 3.0, so "3+3" still comes up more."""
    # First draw lands on "2+2" (index 0), which is then answered wrong
    selector = MagicMock(spec=WeightedSelector)
    selector.select.side_effect = [0, 1]
    session = ReviewSession(math_deck, LearnMode(selector))
    run_review(session, scripted_input(Intent.INCORRECT, Intent.QUIT), renderer)

    assert (math_deck.cards[0].correct, math_deck.cards[0].incorrect) == (0, 1)

    real = WeightedSelector(random.Random(99))
    counts = Counter(real.select(math_deck.cards) for _ in range(1000))
    assert counts[0] / 1000 == pytest.approx(2 / 5, abs=0.05)
    assert counts[1] / 1000 == pytest.approx(3 / 5, abs=0.05)
