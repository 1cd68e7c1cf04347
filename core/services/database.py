# Path: core/services/database.py
# Purpose: Own the SQLite connection settings and schema for seller data.
# Layer: core/services.
# Details: Translates sqlite3 failures into DbError so callers only handle one data access error type.

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

from core.exceptions import DbError
from core.logging import logger


class Database:
    """Handles connections and schema creation for the seller database."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection committed on success and closed afterwards.

        Any ``sqlite3.Error`` raised inside the block surfaces as ``DbError``.
        ``py_lower`` is available for Unicode-aware lowercasing in queries.
        """

        try:
            conn = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            logger.error("db_error", path=str(self.path), error=str(exc))
            raise DbError(str(exc)) from exc
        conn.row_factory = sqlite3.Row
        try:
            conn.execute("PRAGMA foreign_keys = ON")
            conn.create_function("py_lower", 1, _unicode_lower, deterministic=True)
            with conn:
                yield conn
        except sqlite3.Error as exc:
            logger.error("db_error", path=str(self.path), error=str(exc))
            raise DbError(str(exc)) from exc
        finally:
            conn.close()

    def _ensure_schema(self) -> None:
        with self.connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS department (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS seller (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    email TEXT NOT NULL,
                    birth_date TEXT,
                    base_salary REAL,
                    department_id INTEGER REFERENCES department(id)
                )
                """
            )


def _unicode_lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if value is not None else None


def to_storage_instant(value: Optional[datetime]) -> Optional[str]:
    """Serialize an instant as a UTC ISO-8601 string with second precision."""

    if value is None:
        return None
    return value.astimezone(timezone.utc).isoformat(timespec="seconds")


def from_storage_instant(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value)


__all__ = ["Database", "from_storage_instant", "to_storage_instant"]
