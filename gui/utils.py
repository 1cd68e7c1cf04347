# Path: gui/utils.py
# Purpose: Shared helpers for seller forms: alerts, field constraints, parsing, and formatting.
# Layer: gui.
# Details: Keeps Qt widget tweaks and locale/timezone conversions out of the controllers.

from __future__ import annotations

from datetime import date, datetime, time
from enum import Enum
from typing import Optional

from PySide6.QtCore import QRegularExpression
from PySide6.QtGui import QRegularExpressionValidator
from PySide6.QtWidgets import QDateEdit, QLineEdit, QMessageBox, QWidget

from core.models.domain import Department

DOUBLE_PATTERN = r"\d*([.]\d*)?"


class AlertType(Enum):
    """Severity of an alert dialog."""

    INFORMATION = QMessageBox.Icon.Information
    WARNING = QMessageBox.Icon.Warning
    ERROR = QMessageBox.Icon.Critical


def show_alert(
    title: str,
    header: Optional[str],
    content: str,
    alert_type: AlertType,
    parent: QWidget | None = None,
) -> None:
    """Show a modal message box; ``header`` becomes the bold text when given."""

    box = QMessageBox(parent)
    box.setIcon(alert_type.value)
    box.setWindowTitle(title)
    if header:
        box.setText(header)
        box.setInformativeText(content)
    else:
        box.setText(content)
    box.exec()


def set_text_field_max_length(field: QLineEdit, max_length: int) -> None:
    field.setMaxLength(max_length)


def set_text_field_double(field: QLineEdit) -> None:
    """Restrict a line edit to unsigned decimal input such as ``1500`` or ``1500.25``."""

    validator = QRegularExpressionValidator(QRegularExpression(DOUBLE_PATTERN), field)
    field.setValidator(validator)


def format_date_edit(editor: QDateEdit, pattern: str) -> None:
    editor.setDisplayFormat(pattern)


def try_parse_to_double(text: Optional[str]) -> Optional[float]:
    if text is None:
        return None
    try:
        return float(text.strip())
    except ValueError:
        return None


def format_salary(value: Optional[float], decimals: int = 2) -> str:
    """Render a salary with a fixed number of decimals, ``.`` separator and no grouping."""

    if value is None:
        return ""
    return f"{value:.{decimals}f}"


def to_local_start_of_day(value: date) -> datetime:
    """Anchor a calendar day to midnight in the local time zone."""

    return datetime.combine(value, time.min).astimezone()


def to_local_date(instant: datetime) -> date:
    return instant.astimezone().date()


def department_display_name(department: Optional[Department]) -> str:
    return "" if department is None else department.name


__all__ = [
    "AlertType",
    "department_display_name",
    "format_date_edit",
    "format_salary",
    "set_text_field_double",
    "set_text_field_max_length",
    "show_alert",
    "to_local_date",
    "to_local_start_of_day",
    "try_parse_to_double",
]
