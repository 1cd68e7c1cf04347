"""Tests for the seller list window and the search dialog wiring."""

from __future__ import annotations

import pytest

from gui.main_window import SellerListWindow


@pytest.fixture
def window(qapp, seeded, seller_service, department_service):
    return SellerListWindow(seller_service, department_service)


def test_data_changed_reloads_every_seller(window):
    window.on_data_changed()

    assert window.table.rowCount() == 3
    assert window.table.item(0, 1).text() == "Alex Grey"


def test_search_results_replace_table_rows(window, seeded):
    window.on_data_changed()

    window.on_data_changed_search([seeded["sellers"][1]])

    assert window.table.rowCount() == 1
    assert window.table.item(0, 1).text() == "Maria Green"
    assert window.table.item(0, 4).text() == "3500.50"


def test_search_dialog_filters_into_window(window):
    dialog = window.create_search_dialog()
    form = dialog.form

    assert form.department_combo.count() == 2
    assert form.department_combo.currentIndex() == -1
    assert form.name_input.text() == ""

    form.name_input.setText("bob")
    dialog.show()
    dialog.filter_button.click()

    assert not dialog.isVisible()
    assert window.table.rowCount() == 1
    assert window.table.item(0, 1).text() == "Bob Brown"


def test_search_dialog_cancel_closes(window):
    dialog = window.create_search_dialog()
    dialog.show()

    dialog.cancel_button.click()

    assert not dialog.isVisible()
    assert window.table.rowCount() == 0
