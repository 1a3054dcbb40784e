"""Demonstration sequence: draw cards, persist the state, and verify it round-trips."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .config import Settings
from .deck import build_deck, initial_state, ordered_deck
from .errors import PersistenceUnavailable, RoundTripMismatch
from .models import FlatRecord, SelectionState
from .naming import short_to_long
from .persistence import CsvRecordStore, RecordStore, SqliteRecordStore
from .selection import draw, shuffled
from .transcode import records_to_state, state_to_records

PrintFn = Callable[[str], None]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundTripReport:
    """Outcome of one demonstration run."""

    state: SelectionState
    written: tuple[str, ...]
    verified: tuple[str, ...]


def default_stores(settings: Settings) -> list[RecordStore]:
    """Return the SQLite and CSV stores configured by settings."""
    return [SqliteRecordStore(settings.db_path), CsvRecordStore(settings.csv_path)]


def format_state(state: SelectionState) -> list[str]:
    """Render both partitions using long card names."""
    lines = ["Selected cards:"]
    lines.extend(short_to_long(card) for card in state.selected)
    lines.append("Remaining cards:")
    lines.extend(short_to_long(card) for card in state.remaining)
    return lines


def persist_best_effort(store: RecordStore, records: Sequence[FlatRecord]) -> bool:
    """Write records, logging and swallowing backend unavailability."""
    try:
        store.write(records)
    except PersistenceUnavailable as exc:
        logger.warning("Unable to persist cards to %s: %s", store.label, exc)
        return False
    return True


def verify_round_trip(store: RecordStore, state: SelectionState) -> SelectionState:
    """Read the stored records back and require them to rebuild `state` exactly."""
    restored = records_to_state(store.read())
    if restored != state:
        raise RoundTripMismatch(f"State read back from {store.label} does not match the in-memory state.")
    logger.info("Round trip through %s verified (%d cards)", store.label, len(state.cards()))
    return restored


def run_demonstration(
    settings: Settings,
    rng: random.Random,
    print_fn: PrintFn = print,
    stores: Sequence[RecordStore] | None = None,
) -> RoundTripReport:
    """Run every step: build, shuffle, draw, persist, verify, and print read-back state."""
    backends = list(stores) if stores is not None else default_stores(settings)

    print_fn("Creating a deck of cards")
    deck = ordered_deck(build_deck())
    print_fn("Card deck:")
    print_fn(", ".join(deck))

    print_fn("Shuffling the cards")
    deck = shuffled(deck, rng)
    print_fn("Card deck:")
    print_fn(", ".join(deck))

    state = initial_state(deck)
    for number in range(1, settings.draws + 1):
        print_fn(f"Draw {number}: picking {settings.batch_size} cards at random")
        state = draw(state, rng, settings.batch_size)
        for line in format_state(state):
            print_fn(line)

    records = state_to_records(state)
    written: list[str] = []
    for store in backends:
        print_fn(f"Writing to {store.label}")
        if persist_best_effort(store, records):
            written.append(store.label)

    verified: list[str] = []
    restored_states: list[tuple[str, SelectionState]] = []
    for store in backends:
        print_fn(f"Performing checks on {store.label}")
        restored_states.append((store.label, verify_round_trip(store, state)))
        verified.append(store.label)

    for label, restored in restored_states:
        print_fn(f"Printing results from {label}")
        for line in format_state(restored):
            print_fn(line)

    return RoundTripReport(state=state, written=tuple(written), verified=tuple(verified))
