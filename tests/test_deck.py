from cardchallenge.deck import build_deck, initial_state, ordered_deck
from cardchallenge.models import RANKS, STANDARD_RANKS, SUITS
from cardchallenge.naming import parse_short


def test_default_deck_covers_every_suit_and_rank_once() -> None:
    deck = build_deck()
    assert len(deck) == len(SUITS) * len(RANKS) == 56
    pairs = {(parse_short(token).suit, parse_short(token).rank) for token in deck}
    assert pairs == {(suit, rank) for suit in SUITS for rank in RANKS}


def test_standard_ranks_build_52_cards() -> None:
    deck = build_deck(STANDARD_RANKS)
    assert len(deck) == 52
    assert "0 HE" not in deck
    assert "A SP" in deck


def test_build_deck_is_deterministic() -> None:
    assert build_deck() == build_deck()


def test_build_deck_rejects_duplicate_ranks() -> None:
    try:
        build_deck(["A", "A"])
        raise AssertionError("Expected ValueError for duplicate ranks.")
    except ValueError as exc:
        assert "duplicates" in str(exc)


def test_ordered_deck_is_canonical() -> None:
    ordered = ordered_deck(build_deck(["A", "2"], ["spades", "hearts"]))
    assert ordered == ["A HE", "2 HE", "A SP", "2 SP"]


def test_initial_state_from_set_uses_canonical_order() -> None:
    deck = build_deck()
    state = initial_state(deck)
    assert state.selected == ()
    assert list(state.remaining) == ordered_deck(deck)


def test_initial_state_keeps_sequence_order() -> None:
    state = initial_state(["K CL", "Q SP", "9 HE"])
    assert state.selected == ()
    assert state.remaining == ("K CL", "Q SP", "9 HE")
