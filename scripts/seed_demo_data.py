# Path: scripts/seed_demo_data.py
# Purpose: CLI tool to populate the seller database with demo departments and sellers.
# Layer: scripts.
# Details: Useful for trying the search dialog against a non-empty database.

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import AppSettings
from core.logging import configure_logging
from core.models.domain import Department, Seller
from core.services import Database, DepartmentService, SellerService

DEMO_DEPARTMENTS = ["Computers", "Electronics", "Fashion", "Books"]

DEMO_SELLERS = [
    ("Bob Brown", "bob@gmail.com", (1998, 4, 21), 1000.0, "Computers"),
    ("Maria Green", "maria@gmail.com", (1979, 12, 31), 3500.0, "Electronics"),
    ("Alex Grey", "alex@gmail.com", (1988, 1, 15), 2200.0, "Computers"),
    ("Martha Red", "martha@gmail.com", (1993, 11, 30), 3000.0, "Books"),
    ("Donald Blue", "donald@gmail.com", (2000, 1, 9), 4000.0, "Fashion"),
    ("Alex Pink", "bob@gmail.com", (1997, 3, 4), 3000.0, "Electronics"),
]


def main() -> None:
    """Insert the demo departments and sellers."""

    parser = argparse.ArgumentParser(description="Seed the SellerDesk database with demo data")
    parser.add_argument("--database", type=Path, default=None, help="SQLite file to populate")
    args = parser.parse_args()

    settings = AppSettings.from_env()
    if args.database is not None:
        settings = AppSettings(database_path=args.database, log_level=settings.log_level)
    configure_logging(settings.log_level)

    database = Database(settings.database_path)
    department_service = DepartmentService(database)
    seller_service = SellerService(database)

    departments = {name: department_service.save_or_update(Department(name=name)) for name in DEMO_DEPARTMENTS}
    for name, email, (year, month, day), salary, department_name in DEMO_SELLERS:
        seller_service.save_or_update(
            Seller(
                name=name,
                email=email,
                birth_date=datetime(year, month, day).astimezone(),
                base_salary=salary,
                department=departments[department_name],
            )
        )
    print(f"Seeded {len(departments)} departments and {len(DEMO_SELLERS)} sellers into {settings.database_path}")


if __name__ == "__main__":
    main()
