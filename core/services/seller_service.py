# Path: core/services/seller_service.py
# Purpose: Provide data access for sellers, including filtered searches.
# Layer: core/services.
# Details: Builds the seller search query from whichever filter criteria were supplied.

from __future__ import annotations

import sqlite3
from datetime import datetime, time, timedelta
from typing import List, Optional, Tuple

from core.exceptions import DbError
from core.logging import logger
from core.models.domain import Department, Seller, SellerFilter
from .database import Database, from_storage_instant, to_storage_instant

_SELECT_SELLER = """
    SELECT s.id, s.name, s.email, s.birth_date, s.base_salary,
           s.department_id, d.name AS department_name
    FROM seller s
    LEFT JOIN department d ON d.id = s.department_id
"""


def _like_pattern(text: str) -> str:
    escaped = text.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _next_local_midnight(instant: datetime) -> datetime:
    next_day = instant.astimezone().date() + timedelta(days=1)
    return datetime.combine(next_day, time.min).astimezone()


def _row_to_seller(row: sqlite3.Row) -> Seller:
    department = None
    if row["department_id"] is not None:
        department = Department(id=row["department_id"], name=row["department_name"])
    return Seller(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        birth_date=from_storage_instant(row["birth_date"]),
        base_salary=row["base_salary"],
        department=department,
    )


class SellerService:
    """CRUD and search operations over the seller table."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def find_all(self) -> List[Seller]:
        with self.database.connect() as conn:
            rows = conn.execute(f"{_SELECT_SELLER} ORDER BY s.name").fetchall()
        return [_row_to_seller(row) for row in rows]

    def find_by_id(self, seller_id: int) -> Optional[Seller]:
        with self.database.connect() as conn:
            row = conn.execute(f"{_SELECT_SELLER} WHERE s.id = ?", (seller_id,)).fetchone()
        return _row_to_seller(row) if row is not None else None

    def find_sellers(self, criteria: SellerFilter) -> List[Seller]:
        """Return sellers matching every supplied criterion, ordered by name.

        Blank strings and ``None`` values are ignored. Name and email match as
        case-insensitive substrings, the birth date by calendar day, the salary
        to two decimals, and the department by id.
        """

        clauses, params = self._build_where(criteria)
        query = _SELECT_SELLER
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        query += " ORDER BY s.name"
        with self.database.connect() as conn:
            rows = conn.execute(query, params).fetchall()
        logger.debug("seller_search_executed", criteria=len(clauses), matches=len(rows))
        return [_row_to_seller(row) for row in rows]

    @staticmethod
    def _build_where(criteria: SellerFilter) -> Tuple[List[str], list]:
        clauses: List[str] = []
        params: list = []
        if criteria.name and criteria.name.strip():
            clauses.append("py_lower(s.name) LIKE ? ESCAPE '\\'")
            params.append(_like_pattern(criteria.name.strip()))
        if criteria.email and criteria.email.strip():
            clauses.append("py_lower(s.email) LIKE ? ESCAPE '\\'")
            params.append(_like_pattern(criteria.email.strip()))
        if criteria.birth_date is not None:
            # birth_date is local midnight; the day ends at the next local midnight.
            clauses.append("s.birth_date >= ? AND s.birth_date < ?")
            params.append(to_storage_instant(criteria.birth_date))
            params.append(to_storage_instant(_next_local_midnight(criteria.birth_date)))
        if criteria.base_salary is not None:
            clauses.append("ROUND(s.base_salary, 2) = ROUND(?, 2)")
            params.append(criteria.base_salary)
        if criteria.department is not None and criteria.department.id is not None:
            clauses.append("s.department_id = ?")
            params.append(criteria.department.id)
        return clauses, params

    def save_or_update(self, seller: Seller) -> Seller:
        department_id = seller.department.id if seller.department else None
        values = (
            seller.name,
            seller.email,
            to_storage_instant(seller.birth_date),
            seller.base_salary,
            department_id,
        )
        with self.database.connect() as conn:
            if seller.id is None:
                cursor = conn.execute(
                    """
                    INSERT INTO seller (name, email, birth_date, base_salary, department_id)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    values,
                )
                seller.id = cursor.lastrowid
            else:
                cursor = conn.execute(
                    """
                    UPDATE seller
                    SET name = ?, email = ?, birth_date = ?, base_salary = ?, department_id = ?
                    WHERE id = ?
                    """,
                    (*values, seller.id),
                )
                if cursor.rowcount == 0:
                    raise DbError(f"Seller {seller.id} not found")
        return seller

    def remove(self, seller: Seller) -> None:
        with self.database.connect() as conn:
            conn.execute("DELETE FROM seller WHERE id = ?", (seller.id,))
