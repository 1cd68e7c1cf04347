# Path: gui/main_window.py
# Purpose: Define the seller list window that opens the search dialog and shows its results.
# Layer: gui.
# Details: Implements DataChangeListener so search outcomes replace or reload the table contents.

from __future__ import annotations

from typing import List, Optional

from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from config.settings import FormSettings
from core.models.domain import Seller
from core.services import DepartmentService, SellerService
from .seller_search_dialog import SellerSearchDialog
from .view_models import SellerListViewModel


class SellerListWindow(QMainWindow):
    """Main window listing sellers, with a search dialog to narrow the list."""

    def __init__(
        self,
        seller_service: SellerService,
        department_service: DepartmentService,
        settings: Optional[FormSettings] = None,
    ) -> None:
        super().__init__()
        self.seller_service = seller_service
        self.department_service = department_service
        self.settings = settings or FormSettings()
        self.view_model = SellerListViewModel(seller_service, self.settings)
        self.setWindowTitle("Sellers")
        self.table = QTableWidget(0, len(SellerListViewModel.columns))
        self._build_ui()

    def _build_ui(self) -> None:
        container = QWidget()
        layout = QVBoxLayout(container)

        buttons_row = QHBoxLayout()
        search_btn = QPushButton("Search")
        show_all_btn = QPushButton("Show all")
        search_btn.clicked.connect(self.open_search_dialog)
        show_all_btn.clicked.connect(self.on_data_changed)
        buttons_row.addWidget(search_btn)
        buttons_row.addWidget(show_all_btn)
        buttons_row.addStretch(1)
        layout.addLayout(buttons_row)

        self.table.setHorizontalHeaderLabels(list(SellerListViewModel.columns))
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.horizontalHeader().setStretchLastSection(True)
        layout.addWidget(self.table)

        self.setCentralWidget(container)
        self.resize(900, 500)

    def create_search_dialog(self) -> SellerSearchDialog:
        dialog = SellerSearchDialog(self.settings, parent=self)
        controller = dialog.controller
        controller.set_seller(Seller())
        controller.set_services(self.seller_service, self.department_service)
        controller.subscribe_data_change_listener(self)
        controller.load_associated_objects()
        controller.update_form_data()
        return dialog

    def open_search_dialog(self) -> None:
        self.create_search_dialog().exec()

    # DataChangeListener
    def on_data_changed(self) -> None:
        self.view_model.load_all()
        self._render_rows()

    def on_data_changed_search(self, sellers: List[Seller]) -> None:
        self.view_model.show_only(sellers)
        self._render_rows()

    def _render_rows(self) -> None:
        rows = self.view_model.rows()
        self.table.setRowCount(len(rows))
        for row_index, row in enumerate(rows):
            for column_index, value in enumerate(row):
                self.table.setItem(row_index, column_index, QTableWidgetItem(value))
