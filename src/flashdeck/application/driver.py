"""
Review driver loop.

Glues a ReviewSession to the input and render ports. Strictly synchronous:
one blocking read, one transition, one render per iteration.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from flashdeck.domain.errors import UnrecognizedInput
from flashdeck.domain.models import Deck
from flashdeck.domain.ports import InputProvider, Renderer

from .session import ReviewSession

logger = logging.getLogger(__name__)


@dataclass
class ReviewSummary:
    """Counts for one review run."""

    mode: str
    reviewed: int = 0
    correct: int = 0
    incorrect: int = 0


def run_review(
    session: ReviewSession,
    inputs: InputProvider,
    renderer: Renderer,
    checkpoint: Callable[[Deck], None] | None = None,
) -> ReviewSummary:
    """
    Run the review loop until the session exits.

    Args:
        session: The session to drive; it owns the deck.
        inputs: Source of intents. Blocks per call.
        renderer: Receives a fresh view after every transition.
        checkpoint: Called with the deck after each recorded answer, so
            statistics can be written back before the loop ends.

    Returns:
        ReviewSummary for this run.
    """
    renderer.render(session.view())

    while not session.exited:
        intent = inputs.next_intent()
        try:
            transition = session.handle(intent)
        except UnrecognizedInput as e:
            logger.debug(f"Ignoring {intent.value} in {session.mode.name} mode")
            renderer.notify(str(e))
            continue

        if transition.answered and checkpoint is not None:
            checkpoint(session.deck)

        if session.exited:
            break

        renderer.render(session.view())

    return ReviewSummary(
        mode=session.mode.name,
        reviewed=session.reviewed,
        correct=session.correct,
        incorrect=session.incorrect,
    )
