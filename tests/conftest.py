from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from datetime import datetime

import pytest
from PySide6.QtWidgets import QApplication

from core.models.domain import Department, Seller
from core.services import Database, DepartmentService, SellerService


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def database(tmp_path):
    return Database(tmp_path / "db" / "sellers.sqlite3")


@pytest.fixture
def department_service(database):
    return DepartmentService(database)


@pytest.fixture
def seller_service(database):
    return SellerService(database)


@pytest.fixture
def seeded(department_service, seller_service):
    computers = department_service.save_or_update(Department(name="Computers"))
    books = department_service.save_or_update(Department(name="Books"))
    sellers = [
        Seller(
            name="Bob Brown",
            email="bob@gmail.com",
            birth_date=datetime(1998, 4, 21).astimezone(),
            base_salary=1000.0,
            department=computers,
        ),
        Seller(
            name="Maria Green",
            email="maria@gmail.com",
            birth_date=datetime(1979, 12, 31).astimezone(),
            base_salary=3500.5,
            department=books,
        ),
        Seller(
            name="Alex Grey",
            email="alex@yahoo.com",
            birth_date=datetime(1988, 1, 15).astimezone(),
            base_salary=2200.0,
            department=computers,
        ),
    ]
    for seller in sellers:
        seller_service.save_or_update(seller)
    return {"departments": {"Computers": computers, "Books": books}, "sellers": sellers}
