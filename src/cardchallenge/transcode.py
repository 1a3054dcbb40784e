"""Convert selection state to and from flat, backend-agnostic records."""

from __future__ import annotations

import ast
from collections import Counter
from collections.abc import Iterable, Sequence

from .errors import InconsistentRecordSet
from .models import FlatRecord, SelectionState

CSV_HEADER = ("short_name", "is_selected", "order_index")


def state_to_records(state: SelectionState) -> list[FlatRecord]:
    """Emit one record per card, tagged with its partition and position."""
    records = [
        FlatRecord(short_name=card, is_selected=True, order_index=index) for index, card in enumerate(state.selected)
    ]
    records.extend(
        FlatRecord(short_name=card, is_selected=False, order_index=index)
        for index, card in enumerate(state.remaining)
    )
    return records


def records_to_state(records: Iterable[FlatRecord]) -> SelectionState:
    """Rebuild a selection state from flat records in any order."""
    items = list(records)
    for record in items:
        _validate_record(record)

    counts = Counter(record.short_name for record in items)
    duplicates = sorted(card for card, count in counts.items() if count > 1)
    if duplicates:
        raise InconsistentRecordSet(f"Cards appear more than once: {', '.join(duplicates)}")

    selected = _partition(items, is_selected=True)
    remaining = _partition(items, is_selected=False)
    return SelectionState(selected=selected, remaining=remaining)


def _partition(records: list[FlatRecord], *, is_selected: bool) -> tuple[str, ...]:
    """Return one partition's tokens ordered by a contiguous 0-based index."""
    members = sorted((record for record in records if record.is_selected is is_selected), key=lambda r: r.order_index)
    indices = [record.order_index for record in members]
    if indices != list(range(len(members))):
        label = "selected" if is_selected else "remaining"
        raise InconsistentRecordSet(
            f"Order indices for {label} cards are not contiguous from 0: {sorted(indices)}"
        )
    return tuple(record.short_name for record in members)


def _validate_record(record: FlatRecord) -> None:
    if not isinstance(record.short_name, str):
        raise InconsistentRecordSet(f"short_name must be a string: {record!r}")
    if not isinstance(record.is_selected, bool):
        raise InconsistentRecordSet(f"is_selected must be a boolean: {record!r}")
    if isinstance(record.order_index, bool) or not isinstance(record.order_index, int):
        raise InconsistentRecordSet(f"order_index must be an integer: {record!r}")


def records_to_rows(records: Iterable[FlatRecord]) -> list[list[object]]:
    """Return CSV data: the header row followed by one row per record."""
    rows: list[list[object]] = [list(CSV_HEADER)]
    rows.extend([record.short_name, record.is_selected, record.order_index] for record in records)
    return rows


def rows_to_records(rows: Iterable[Sequence[str]]) -> list[FlatRecord]:
    """Decode raw CSV rows (header first) into typed records.

    Booleans go through literal parsing rather than string comparison, so only
    ``True`` and ``False`` are accepted.
    """
    iterator = iter(rows)
    header = next(iterator, None)
    if header is None:
        raise InconsistentRecordSet("CSV data has no header row.")
    if tuple(header) != CSV_HEADER:
        raise InconsistentRecordSet(f"Unexpected CSV header: {list(header)}")

    records: list[FlatRecord] = []
    for line_number, row in enumerate(iterator, start=2):
        if len(row) != len(CSV_HEADER):
            raise InconsistentRecordSet(f"Row {line_number} has {len(row)} fields, expected {len(CSV_HEADER)}.")
        short_name, raw_selected, raw_index = row
        records.append(
            FlatRecord(
                short_name=short_name,
                is_selected=_parse_bool(raw_selected, line_number),
                order_index=_parse_int(raw_index, line_number),
            )
        )
    return records


def _parse_bool(raw: str, line_number: int) -> bool:
    try:
        value = ast.literal_eval(raw.strip())
    except (ValueError, TypeError, SyntaxError, MemoryError, RecursionError) as exc:
        raise InconsistentRecordSet(f"Row {line_number}: is_selected {raw!r} is not a literal.") from exc
    if not isinstance(value, bool):
        raise InconsistentRecordSet(f"Row {line_number}: is_selected {raw!r} is not a boolean.")
    return value


def _parse_int(raw: str, line_number: int) -> int:
    text = raw.strip()
    # ASCII digits only; int() would also take "1_0", signs, and non-ASCII digits.
    if not (text.isascii() and text.isdigit()):
        raise InconsistentRecordSet(f"Row {line_number}: order_index {raw!r} is not a non-negative integer.")
    return int(text)
