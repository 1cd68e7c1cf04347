# Path: gui/seller_search_dialog.py
# Purpose: Build the seller search dialog and wire its widgets to SellerSearchController.
# Layer: gui.
# Details: Owns layout only; validation, querying, and notification live in the controller.

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from config.settings import FormSettings
from .seller_search_controller import SellerSearchController, SellerSearchForm
from .utils import show_alert
from .widgets.optional_date_edit import OptionalDateEdit


class SellerSearchDialog(QDialog):
    """Modal dialog collecting seller search filters."""

    def __init__(self, settings: Optional[FormSettings] = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Search sellers")
        self.form = SellerSearchForm(
            name_input=QLineEdit(),
            email_input=QLineEdit(),
            birth_date_input=OptionalDateEdit(),
            base_salary_input=QLineEdit(),
            department_combo=QComboBox(),
            error_label=QLabel(),
        )
        self.controller = SellerSearchController(
            self.form,
            close_window=self.close,
            show_alert=lambda title, header, content, alert_type: show_alert(
                title, header, content, alert_type, parent=self
            ),
            settings=settings,
        )
        self._build_ui()

    def _build_ui(self) -> None:
        root_layout = QVBoxLayout(self)

        fields = QFormLayout()
        fields.addRow("Name", self.form.name_input)
        fields.addRow("Email", self.form.email_input)
        fields.addRow("Birth date", self.form.birth_date_input)
        fields.addRow("Base salary", self.form.base_salary_input)
        fields.addRow("Department", self.form.department_combo)
        root_layout.addLayout(fields)

        self.form.error_label.setStyleSheet("color: #e74c3c;")
        self.form.error_label.setWordWrap(True)
        root_layout.addWidget(self.form.error_label)

        buttons_row = QHBoxLayout()
        self.filter_button = QPushButton("Filter")
        self.cancel_button = QPushButton("Cancel")
        self.filter_button.setDefault(True)
        self.filter_button.clicked.connect(self.controller.on_filter_action)
        self.cancel_button.clicked.connect(self.controller.on_cancel_action)
        buttons_row.addStretch(1)
        buttons_row.addWidget(self.filter_button)
        buttons_row.addWidget(self.cancel_button)
        root_layout.addLayout(buttons_row)
