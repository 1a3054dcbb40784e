"""Selection engine: move random batches of cards from remaining to selected."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from .errors import PartitionError
from .models import SelectionState

DEFAULT_BATCH_SIZE = 10

logger = logging.getLogger(__name__)


def shuffled(cards: Iterable[str], rng: random.Random) -> list[str]:
    """Return a uniformly shuffled copy of the given cards."""
    result = list(cards)
    rng.shuffle(result)
    return result


def draw(state: SelectionState, rng: random.Random, batch_size: int = DEFAULT_BATCH_SIZE) -> SelectionState:
    """Draw up to `batch_size` random cards from `remaining` into `selected`.

    The batch is appended to `selected` in shuffle order. Cards left behind
    keep their relative order in `remaining`. Drawing from an empty remainder
    returns the same state.
    """
    if batch_size < 0:
        raise ValueError(f"Batch size must be non-negative, got {batch_size}.")
    if not state.remaining or batch_size == 0:
        return state

    batch = shuffled(state.remaining, rng)[:batch_size]
    drawn = set(batch)
    updated = SelectionState(
        selected=state.selected + tuple(batch),
        remaining=tuple(card for card in state.remaining if card not in drawn),
    )
    _check_draw(state, updated, len(batch))
    logger.debug("Drew %d cards, %d remaining", len(batch), len(updated.remaining))
    return updated


def draw_until_exhausted(
    state: SelectionState, rng: random.Random, batch_size: int = DEFAULT_BATCH_SIZE
) -> list[SelectionState]:
    """Draw repeatedly until nothing remains; return every state after each draw."""
    if batch_size <= 0:
        raise ValueError(f"Batch size must be positive to exhaust the deck, got {batch_size}.")
    states: list[SelectionState] = []
    while state.remaining:
        state = draw(state, rng, batch_size)
        states.append(state)
    return states


def _check_draw(before: SelectionState, after: SelectionState, drawn: int) -> None:
    """Verify a draw kept the partition of the deck intact."""
    if after.cards() != before.cards():
        raise PartitionError("Draw changed the set of cards in the deck.")
    if len(after.selected) - len(before.selected) != drawn:
        raise PartitionError("Draw did not move the expected number of cards.")
    if after.selected[: len(before.selected)] != before.selected:
        raise PartitionError("Draw reordered previously selected cards.")
