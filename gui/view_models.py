# Path: gui/view_models.py
# Purpose: Provide view models mediating between the seller list window and the seller service.
# Layer: gui.
# Details: Loads sellers and turns them into display rows suitable for table rendering.

from __future__ import annotations

from typing import List, Sequence, Tuple

from config.settings import FormSettings
from core.models.domain import Seller
from core.services import SellerService
from .utils import department_display_name, format_salary, to_local_date

SellerRow = Tuple[str, str, str, str, str, str]


class SellerListViewModel:
    """View model encapsulating seller loading and formatting for the GUI."""

    columns = ("Id", "Name", "Email", "Birth date", "Base salary", "Department")

    def __init__(self, service: SellerService, settings: FormSettings | None = None) -> None:
        self.service = service
        self.settings = settings or FormSettings()
        self.sellers: List[Seller] = []

    def load_all(self) -> List[Seller]:
        """Replace the current sellers with every stored seller.

        External calls:
        - core/services/seller_service.py::SellerService.find_all - fetch all sellers ordered by name.
        """

        self.sellers = self.service.find_all()
        return self.sellers

    def show_only(self, sellers: Sequence[Seller]) -> List[Seller]:
        self.sellers = list(sellers)
        return self.sellers

    def rows(self) -> List[SellerRow]:
        return [self.to_row(seller) for seller in self.sellers]

    def to_row(self, seller: Seller) -> SellerRow:
        birth_date = ""
        if seller.birth_date is not None:
            birth_date = to_local_date(seller.birth_date).strftime(self.settings.table_date_format)
        return (
            "" if seller.id is None else str(seller.id),
            seller.name,
            seller.email,
            birth_date,
            format_salary(seller.base_salary, self.settings.salary_decimals),
            department_display_name(seller.department),
        )
