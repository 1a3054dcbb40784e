"""SQLite and CSV persistence for flat card records."""

from __future__ import annotations

import csv
import logging
import os
import sqlite3
import tempfile
from collections.abc import Iterable
from contextlib import closing
from pathlib import Path
from typing import Protocol

from .errors import InconsistentRecordSet, PersistenceUnavailable
from .models import FlatRecord
from .transcode import records_to_rows, rows_to_records

DEFAULT_TABLE = "card"

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Storage backend that keeps exactly one complete record set."""

    label: str

    def write(self, records: Iterable[FlatRecord]) -> None:
        """Replace everything stored with these records."""
        ...

    def read(self) -> set[FlatRecord]:
        """Return every stored record with semantic field types."""
        ...


class SqliteRecordStore:
    """Records kept in one SQLite table that is recreated on every write."""

    label = "database"

    def __init__(self, db_path: Path | str, table: str = DEFAULT_TABLE) -> None:
        """Remember where the table lives; no connection is held open."""
        if not table.isidentifier():
            raise ValueError(f"Invalid table name: {table!r}")
        self.db_path = Path(db_path)
        self.table = table

    def write(self, records: Iterable[FlatRecord]) -> None:
        """Drop, recreate, and fill the table in a single transaction."""
        rows = [(record.short_name, record.order_index, int(record.is_selected)) for record in records]
        try:
            with closing(sqlite3.connect(self.db_path, isolation_level=None)) as conn:
                conn.execute("BEGIN IMMEDIATE")
                try:
                    conn.execute(f"DROP TABLE IF EXISTS {self.table}")
                    conn.execute(f"""
                        CREATE TABLE {self.table} (
                            id INTEGER PRIMARY KEY AUTOINCREMENT,
                            short_name VARCHAR(32),
                            order_index INTEGER,
                            is_selected BOOLEAN
                        )
                        """)
                    conn.executemany(
                        f"INSERT INTO {self.table} (short_name, order_index, is_selected) VALUES (?, ?, ?)",
                        rows,
                    )
                except BaseException:
                    conn.execute("ROLLBACK")
                    raise
                conn.execute("COMMIT")
        except sqlite3.Error as exc:
            raise PersistenceUnavailable(f"Could not write card table to {self.db_path}: {exc}") from exc
        logger.info("Wrote %d card rows to %s", len(rows), self.db_path)

    def read(self) -> set[FlatRecord]:
        """Return all rows from the card table."""
        if not self.db_path.exists():
            raise PersistenceUnavailable(f"Database file {self.db_path} does not exist.")
        uri = f"{self.db_path.resolve().as_uri()}?mode=ro"
        try:
            with closing(sqlite3.connect(uri, uri=True)) as conn:
                conn.row_factory = sqlite3.Row
                rows = conn.execute(f"SELECT * FROM {self.table}").fetchall()
        except sqlite3.Error as exc:
            raise PersistenceUnavailable(f"Could not read card table from {self.db_path}: {exc}") from exc
        return {
            FlatRecord(
                short_name=_decode_str(row["short_name"]),
                is_selected=_decode_bool(row["is_selected"]),
                order_index=_decode_int(row["order_index"]),
            )
            for row in rows
        }


class CsvRecordStore:
    """Records kept in a delimited text file with a header row."""

    label = "csv"

    def __init__(self, path: Path | str) -> None:
        """Remember the file location; nothing is opened until used."""
        self.path = Path(path)

    def write(self, records: Iterable[FlatRecord]) -> None:
        """Write to a sibling temp file, then move it over the target."""
        rows = records_to_rows(records)
        tmp_path: Path | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", newline="", encoding="utf-8") as handle:
                csv.writer(handle).writerows(rows)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise PersistenceUnavailable(f"Could not write {self.path}: {exc}") from exc
        finally:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
        logger.info("Wrote %d card rows to %s", len(rows) - 1, self.path)

    def read(self) -> set[FlatRecord]:
        """Parse the file back into typed records."""
        try:
            with self.path.open(newline="", encoding="utf-8") as handle:
                raw_rows = list(csv.reader(handle))
        except OSError as exc:
            raise PersistenceUnavailable(f"Could not read {self.path}: {exc}") from exc
        except (UnicodeDecodeError, csv.Error) as exc:
            raise InconsistentRecordSet(f"Could not parse {self.path}: {exc}") from exc
        return set(rows_to_records(raw_rows))


def _decode_bool(value: object) -> bool:
    """Map SQLite's stored boolean (0/1) back to a Python bool."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise InconsistentRecordSet(f"Stored is_selected value {value!r} is not a boolean.")


def _decode_int(value: object) -> int:
    """Accept only a stored integer; NULLs and REALs are rejected, never truncated."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise InconsistentRecordSet(f"Stored order_index value {value!r} is not an integer.")


def _decode_str(value: object) -> str:
    if isinstance(value, str):
        return value
    raise InconsistentRecordSet(f"Stored short_name value {value!r} is not text.")
