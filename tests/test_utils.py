"""Tests for GUI helper functions and the optional date editor."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest
from PySide6.QtWidgets import QLineEdit

from core.models.domain import Department
from gui.utils import (
    department_display_name,
    format_salary,
    set_text_field_double,
    to_local_date,
    to_local_start_of_day,
    try_parse_to_double,
)
from gui.widgets.optional_date_edit import OptionalDateEdit


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1500", 1500.0),
        (" 12.5 ", 12.5),
        ("", None),
        ("abc", None),
        (None, None),
    ],
)
def test_try_parse_to_double(text, expected):
    assert try_parse_to_double(text) == expected


def test_format_salary_uses_two_decimals_without_grouping():
    assert format_salary(3000) == "3000.00"
    assert format_salary(1234567.891) == "1234567.89"
    assert format_salary(None) == ""


def test_local_start_of_day_is_timezone_aware_midnight():
    instant = to_local_start_of_day(date(2001, 2, 3))

    assert instant.tzinfo is not None
    assert (instant.hour, instant.minute, instant.second) == (0, 0, 0)
    assert to_local_date(instant) == date(2001, 2, 3)


def test_local_date_converts_from_utc():
    local_midnight = datetime(1990, 5, 17).astimezone()
    as_utc = local_midnight.astimezone(timezone.utc)

    assert to_local_date(as_utc) == date(1990, 5, 17)


def test_department_display_name():
    assert department_display_name(None) == ""
    assert department_display_name(Department(id=1, name="Books")) == "Books"


def test_double_validator_accepts_decimal_text(qapp):
    field = QLineEdit()
    set_text_field_double(field)

    field.setText("1500.25")
    assert field.hasAcceptableInput()

    field.setText("15a")
    assert not field.hasAcceptableInput()


def test_optional_date_edit_starts_blank_and_clears(qapp):
    editor = OptionalDateEdit()
    assert editor.selected_date() is None

    editor.set_selected_date(date(2020, 2, 29))
    assert editor.selected_date() == date(2020, 2, 29)

    editor.set_selected_date(None)
    assert editor.selected_date() is None


def test_optional_date_edit_keeps_dates_before_1752(qapp):
    editor = OptionalDateEdit()

    editor.set_selected_date(date(1700, 6, 15))

    assert editor.selected_date() == date(1700, 6, 15)
