"""Build the full deck of short-name tokens and the starting selection state."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import RANKS, SUITS, Card, SelectionState
from .naming import parse_short, short_name


def build_deck(ranks: Sequence[str] = RANKS, suits: Sequence[str] = SUITS) -> frozenset[str]:
    """Return one short-name token per (suit, rank) pair."""
    if len(set(ranks)) != len(ranks):
        raise ValueError("Rank set contains duplicates.")
    if len(set(suits)) != len(suits):
        raise ValueError("Suit set contains duplicates.")
    return frozenset(short_name(Card(suit=suit, rank=rank)) for suit in suits for rank in ranks)


def ordered_deck(deck: Iterable[str]) -> list[str]:
    """Return deck tokens in canonical order: by suit, then by rank."""
    return sorted(deck, key=_canonical_key)


def initial_state(cards: Iterable[str]) -> SelectionState:
    """Start with nothing selected and every card remaining.

    Sequences keep their given order; sets are put in canonical order so the
    starting state never depends on set iteration order.
    """
    if isinstance(cards, set | frozenset):
        remaining = tuple(ordered_deck(cards))
    else:
        remaining = tuple(cards)
    return SelectionState(selected=(), remaining=remaining)


def _canonical_key(token: str) -> tuple[int, int]:
    card = parse_short(token)
    return (SUITS.index(card.suit), RANKS.index(card.rank))
