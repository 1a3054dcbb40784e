"""Core domain models for the partitioned card deck."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import PartitionError

SUITS = ("hearts", "clubs", "diamonds", "spades")
# "0" is the joker/zero placeholder rank.
RANKS = ("0", "A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
STANDARD_RANKS = RANKS[1:]


@dataclass(frozen=True)
class Card:
    """One playing card identity."""

    suit: str
    rank: str

    def __post_init__(self) -> None:
        if self.suit not in SUITS:
            raise ValueError(f"Unknown suit: {self.suit!r}")
        if self.rank not in RANKS:
            raise ValueError(f"Unknown rank: {self.rank!r}")


@dataclass(frozen=True)
class SelectionState:
    """Partition of the deck into drawn and undrawn short-name tokens.

    `selected` keeps draw order, oldest first. `remaining` keeps a stable
    order that is only used to recover order indices on persistence.
    """

    selected: tuple[str, ...] = ()
    remaining: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for token in (*self.selected, *self.remaining):
            if token in seen:
                raise PartitionError(f"Card {token!r} appears more than once in the selection state.")
            seen.add(token)

    def cards(self) -> frozenset[str]:
        """Return every card tracked by this state."""
        return frozenset(self.selected) | frozenset(self.remaining)


@dataclass(frozen=True)
class FlatRecord:
    """Backend-agnostic row: one card, its partition, and its position there."""

    short_name: str
    is_selected: bool
    order_index: int
