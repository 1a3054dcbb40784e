from cardchallenge.errors import InconsistentRecordSet
from cardchallenge.models import FlatRecord, SelectionState
from cardchallenge.transcode import (
    CSV_HEADER,
    records_to_rows,
    records_to_state,
    rows_to_records,
    state_to_records,
)


def _state() -> SelectionState:
    return SelectionState(selected=("Q SP",), remaining=("K CL",))


def test_state_to_records_small_state() -> None:
    records = state_to_records(_state())
    assert set(records) == {
        FlatRecord(short_name="Q SP", is_selected=True, order_index=0),
        FlatRecord(short_name="K CL", is_selected=False, order_index=0),
    }


def test_order_index_is_per_partition() -> None:
    state = SelectionState(selected=("A HE", "2 HE", "3 HE"), remaining=("4 HE", "5 HE"))
    records = state_to_records(state)
    selected = {record.short_name: record.order_index for record in records if record.is_selected}
    remaining = {record.short_name: record.order_index for record in records if not record.is_selected}
    assert selected == {"A HE": 0, "2 HE": 1, "3 HE": 2}
    assert remaining == {"4 HE": 0, "5 HE": 1}


def test_records_to_state_ignores_record_order() -> None:
    state = SelectionState(selected=("A HE", "2 HE", "3 HE"), remaining=("4 HE", "5 HE"))
    records = list(reversed(state_to_records(state)))
    assert records_to_state(records) == state


def test_round_trip_of_empty_partitions() -> None:
    for state in [SelectionState(), SelectionState(remaining=("A HE",)), SelectionState(selected=("A HE",))]:
        assert records_to_state(state_to_records(state)) == state


def test_gap_in_selected_indices_raises() -> None:
    records = [
        FlatRecord("A HE", True, 0),
        FlatRecord("2 HE", True, 1),
        FlatRecord("3 HE", True, 3),
        FlatRecord("4 HE", False, 0),
    ]
    try:
        records_to_state(records)
        raise AssertionError("Expected InconsistentRecordSet for gap in order_index.")
    except InconsistentRecordSet as exc:
        assert "selected" in str(exc)


def test_indices_not_starting_at_zero_raise() -> None:
    try:
        records_to_state([FlatRecord("A HE", False, 1)])
        raise AssertionError("Expected InconsistentRecordSet.")
    except InconsistentRecordSet:
        pass


def test_repeated_index_raises() -> None:
    try:
        records_to_state([FlatRecord("A HE", True, 0), FlatRecord("2 HE", True, 0)])
        raise AssertionError("Expected InconsistentRecordSet.")
    except InconsistentRecordSet:
        pass


def test_token_in_both_partitions_raises() -> None:
    try:
        records_to_state([FlatRecord("Q SP", True, 0), FlatRecord("Q SP", False, 0)])
        raise AssertionError("Expected InconsistentRecordSet for duplicate token.")
    except InconsistentRecordSet as exc:
        assert "Q SP" in str(exc)


def test_wrongly_typed_fields_raise() -> None:
    bad = [
        FlatRecord("Q SP", 1, 0),  # type: ignore[arg-type]
        FlatRecord("Q SP", True, "0"),  # type: ignore[arg-type]
        FlatRecord("Q SP", True, False),
        FlatRecord(7, True, 0),  # type: ignore[arg-type]
    ]
    for record in bad:
        try:
            records_to_state([record])
            raise AssertionError(f"Expected InconsistentRecordSet for {record!r}.")
        except InconsistentRecordSet:
            pass


def test_records_to_rows_has_header_and_literal_values() -> None:
    rows = records_to_rows(state_to_records(_state()))
    assert rows[0] == ["short_name", "is_selected", "order_index"]
    assert {tuple(row) for row in rows[1:]} == {("Q SP", True, 0), ("K CL", False, 0)}


def test_rows_to_records_parses_literals() -> None:
    rows = [list(CSV_HEADER), ["Q SP", "True", "0"], ["K CL", "False", "0"]]
    records = rows_to_records(rows)
    assert records == [FlatRecord("Q SP", True, 0), FlatRecord("K CL", False, 0)]
    assert all(isinstance(record.is_selected, bool) for record in records)


def test_rows_to_records_rejects_non_boolean_literals() -> None:
    for raw in ["1", "true", "yes", "None", ""]:
        try:
            rows_to_records([list(CSV_HEADER), ["Q SP", raw, "0"]])
            raise AssertionError(f"Expected InconsistentRecordSet for is_selected={raw!r}.")
        except InconsistentRecordSet:
            pass


def test_rows_to_records_rejects_bad_header_and_width() -> None:
    bad_inputs = [
        [],
        [["short_name", "order_index", "is_selected"]],
        [list(CSV_HEADER), ["Q SP", "True"]],
        [list(CSV_HEADER), ["Q SP", "True", "zero"]],
        [list(CSV_HEADER), ["Q SP", "True", "1_0"]],
        [list(CSV_HEADER), ["Q SP", "True", "-1"]],
        [list(CSV_HEADER), ["Q SP", "True", "\uff11"]],
    ]
    for rows in bad_inputs:
        try:
            rows_to_records(rows)
            raise AssertionError(f"Expected InconsistentRecordSet for {rows!r}.")
        except InconsistentRecordSet:
            pass


def test_rows_to_records_rejects_unparseable_literals() -> None:
    for raw in ["{[]: 1}", "[" * 100_000]:
        try:
            rows_to_records([list(CSV_HEADER), ["Q SP", raw, "0"]])
            raise AssertionError(f"Expected InconsistentRecordSet for is_selected={raw[:10]!r}.")
        except InconsistentRecordSet:
            pass
