"""
Weighted card selection for adaptive review.

Cards with a worse answer history get a larger weight and therefore
resurface more often. The sampling functions are pure: randomness is always
passed in, never taken from the module-level generator.
"""

import logging
import math
import random
from bisect import bisect_right
from collections.abc import Sequence
from itertools import accumulate

from flashdeck.domain.constants import UNSEEN_WEIGHT
from flashdeck.domain.errors import InvalidDistribution
from flashdeck.domain.models import Flashcard

logger = logging.getLogger(__name__)


def card_weight(card: Flashcard) -> float:
    """
    Sampling weight for a card.

    Unseen cards get the fixed prior UNSEEN_WEIGHT. Otherwise the weight is
    the Laplace-smoothed error rate (incorrect + 1) / (correct + incorrect).
    """
    attempts = card.correct + card.incorrect
    if attempts == 0:
        return UNSEEN_WEIGHT
    return (card.incorrect + 1) / attempts


def weighted_index(weights: Sequence[float], rng: random.Random) -> int:
    """
    Draw an index with probability proportional to its weight.

    Raises:
        InvalidDistribution: If ``weights`` is empty, holds a negative or
            non-finite value, or sums to zero.
    """
    if not weights:
        raise InvalidDistribution("Cannot sample from an empty set of weights")

    for i, w in enumerate(weights):
        if not math.isfinite(w) or w < 0:
            raise InvalidDistribution(f"Invalid weight {w!r} at index {i}")

    cumulative = list(accumulate(weights))
    total = cumulative[-1]
    if total <= 0:
        raise InvalidDistribution("All weights are zero")

    # bisect_right skips zero-weight entries since their cumulative value repeats
    index = bisect_right(cumulative, rng.random() * total)
    if index == len(cumulative):
        # float rounding pushed the draw onto the total; take the last positive weight
        index = max(i for i, w in enumerate(weights) if w > 0)
    return index


def uniform_index(count: int, rng: random.Random) -> int:
    """Pick an index in ``[0, count)`` with equal probability."""
    if count <= 0:
        raise InvalidDistribution("Cannot pick from an empty set")
    return rng.randrange(count)


class WeightedSelector:
    """
    Chooses the next card to show.

    Holds the randomness source so callers (and tests) can pin it.
    """

    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        """
        Args:
            rng: Randomness source to draw from.
            seed: Used to build a private generator when ``rng`` is not given.
        """
        self._rng = rng if rng is not None else random.Random(seed)

    def weight(self, card: Flashcard) -> float:
        return card_weight(card)

    def weights(self, cards: Sequence[Flashcard]) -> tuple[float, ...]:
        return tuple(card_weight(c) for c in cards)

    def select(self, cards: Sequence[Flashcard]) -> int:
        """Weighted draw over ``cards``; see ``weighted_index``."""
        weights = self.weights(cards)
        index = weighted_index(weights, self._rng)
        logger.debug(f"Selected card {index} (weight {weights[index]:.3f} of {sum(weights):.3f})")
        return index

    def random_index(self, cards: Sequence[Flashcard]) -> int:
        return uniform_index(len(cards), self._rng)
