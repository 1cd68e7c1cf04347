from __future__ import annotations

from datetime import datetime

from core.models.domain import Department, Seller
from gui.view_models import SellerListViewModel


class StubSellerService:
    def __init__(self, sellers):
        self.sellers = sellers

    def find_all(self):
        return list(self.sellers)


def test_rows_format_dates_salaries_and_departments():
    seller = Seller(
        id=7,
        name="Bob Brown",
        email="bob@gmail.com",
        birth_date=datetime(1998, 4, 21).astimezone(),
        base_salary=1000,
        department=Department(id=1, name="Computers"),
    )
    view_model = SellerListViewModel(StubSellerService([seller]))

    view_model.load_all()

    assert view_model.rows() == [("7", "Bob Brown", "bob@gmail.com", "21/04/1998", "1000.00", "Computers")]


def test_rows_leave_missing_values_blank():
    view_model = SellerListViewModel(StubSellerService([]))
    view_model.show_only([Seller(name="New", email="new@example.com")])

    assert view_model.rows() == [("", "New", "new@example.com", "", "", "")]


def test_show_only_replaces_loaded_sellers():
    view_model = SellerListViewModel(StubSellerService([Seller(id=1, name="A"), Seller(id=2, name="B")]))
    view_model.load_all()

    view_model.show_only([Seller(id=2, name="B")])

    assert [row[1] for row in view_model.rows()] == ["B"]
