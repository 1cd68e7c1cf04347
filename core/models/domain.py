# Path: core/models/domain.py
# Purpose: Define domain models shared across the persistence layer and the GUI.
# Layer: core/models.
# Details: Lightweight dataclasses describing departments, sellers, and seller search filters.

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Department:
    """Organizational unit a seller belongs to."""

    id: Optional[int] = None
    name: str = ""


@dataclass
class Seller:
    """Salesperson record persisted in the seller table."""

    id: Optional[int] = None
    name: str = ""
    email: str = ""
    birth_date: Optional[datetime] = None
    base_salary: Optional[float] = None
    department: Optional[Department] = None


@dataclass
class SellerFilter:
    """Search criteria collected from the seller search form.

    Blank text fields and ``None`` values mean "do not filter on this field".
    ``birth_date`` is a timezone-aware instant at local start of day.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    birth_date: Optional[datetime] = None
    base_salary: Optional[float] = None
    department: Optional[Department] = None
