# Path: core/services/department_service.py
# Purpose: Provide data access for departments.
# Layer: core/services.
# Details: Supplies the department options shown by the seller forms.

from __future__ import annotations

from typing import List, Optional

from core.exceptions import DbError
from core.models.domain import Department
from .database import Database


class DepartmentService:
    """CRUD operations over the department table."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def find_all(self) -> List[Department]:
        with self.database.connect() as conn:
            rows = conn.execute("SELECT id, name FROM department ORDER BY name").fetchall()
        return [Department(id=row["id"], name=row["name"]) for row in rows]

    def find_by_id(self, department_id: int) -> Optional[Department]:
        with self.database.connect() as conn:
            row = conn.execute("SELECT id, name FROM department WHERE id = ?", (department_id,)).fetchone()
        if row is None:
            return None
        return Department(id=row["id"], name=row["name"])

    def save_or_update(self, department: Department) -> Department:
        with self.database.connect() as conn:
            if department.id is None:
                cursor = conn.execute("INSERT INTO department (name) VALUES (?)", (department.name,))
                department.id = cursor.lastrowid
            else:
                cursor = conn.execute(
                    "UPDATE department SET name = ? WHERE id = ?",
                    (department.name, department.id),
                )
                if cursor.rowcount == 0:
                    raise DbError(f"Department {department.id} not found")
        return department

    def remove(self, department: Department) -> None:
        """Delete a department; fails with DbError while sellers still reference it."""

        with self.database.connect() as conn:
            conn.execute("DELETE FROM department WHERE id = ?", (department.id,))
