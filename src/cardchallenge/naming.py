"""Translate cards between structured identity and short/long text forms."""

from __future__ import annotations

from .errors import MalformedCardToken
from .models import RANKS, STANDARD_RANKS, SUITS, Card

__all__ = [
    "RANKS",
    "STANDARD_RANKS",
    "SUITS",
    "SUIT_CODES",
    "SUIT_NAMES",
    "long_name",
    "parse_short",
    "short_name",
    "short_to_long",
]

SUIT_CODES: dict[str, str] = {
    "HE": "hearts",
    "CL": "clubs",
    "DI": "diamonds",
    "SP": "spades",
}
SUIT_NAMES: dict[str, str] = {name: code for code, name in SUIT_CODES.items()}


def short_name(card: Card) -> str:
    """Return the compact token, e.g. ``"9 HE"``."""
    return f"{card.rank} {SUIT_NAMES[card.suit]}"


def long_name(card: Card) -> str:
    """Return the display form, e.g. ``"9 of hearts"``."""
    return f"{card.rank} of {card.suit}"


def parse_short(token: str) -> Card:
    """Parse a short-name token back into a card.

    The token must be exactly ``<rank> <suit-code>`` with a single space. Rank is
    matched as an opaque token against the fixed rank set; no numeric coercion.
    """
    if not isinstance(token, str):
        raise MalformedCardToken(f"Card token must be a string, got {type(token).__name__}.")
    parts = token.split(" ")
    if len(parts) != 2:
        raise MalformedCardToken(f"Card token {token!r} is not '<rank> <suit-code>'.")
    rank, code = parts
    suit = SUIT_CODES.get(code)
    if suit is None:
        raise MalformedCardToken(f"Card token {token!r} has unknown suit code {code!r}.")
    if rank not in RANKS:
        raise MalformedCardToken(f"Card token {token!r} has unknown rank {rank!r}.")
    return Card(suit=suit, rank=rank)


def short_to_long(token: str) -> str:
    """Convert a short-name token straight to its long display name."""
    return long_name(parse_short(token))
