# Path: gui/widgets/optional_date_edit.py
# Purpose: Provide a date editor that can hold "no date".
# Layer: gui.
# Details: Uses the minimum date as a blank sentinel rendered through the special value text.

from __future__ import annotations

from datetime import date
from typing import Optional

from PySide6.QtCore import QDate
from PySide6.QtWidgets import QDateEdit, QWidget

BLANK_SENTINEL = QDate(100, 1, 1)


class OptionalDateEdit(QDateEdit):
    """QDateEdit variant whose value may be cleared, like a date picker with no selection.

    January 1st of year 100 is reserved as the blank value.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumDate(BLANK_SENTINEL)
        # Qt only shows the special value text when it is non-empty.
        self.setSpecialValueText(" ")
        self.setCalendarPopup(True)
        self.clear_date()

    def selected_date(self) -> Optional[date]:
        current = self.date()
        if current == self.minimumDate():
            return None
        return date(current.year(), current.month(), current.day())

    def set_selected_date(self, value: Optional[date]) -> None:
        if value is None:
            self.clear_date()
            return
        self.setDate(QDate(value.year, value.month, value.day))

    def clear_date(self) -> None:
        self.setDate(self.minimumDate())
