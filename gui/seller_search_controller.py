# Path: gui/seller_search_controller.py
# Purpose: Drive the seller search form: validate filters, query sellers, and broadcast results.
# Layer: gui.
# Details: Receives widget handles and window callbacks at construction instead of binding them implicitly.

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from PySide6.QtWidgets import QComboBox, QLabel, QLineEdit

from config.settings import FormSettings
from core.exceptions import DbError, ValidationError
from core.logging import logger
from core.models.domain import Department, Seller, SellerFilter
from core.services import DepartmentService, SellerService
from .listeners import DataChangeListener
from .utils import (
    AlertType,
    department_display_name,
    format_date_edit,
    format_salary,
    set_text_field_double,
    set_text_field_max_length,
    show_alert,
    to_local_date,
    to_local_start_of_day,
    try_parse_to_double,
)
from .widgets.optional_date_edit import OptionalDateEdit

EMPTY_FIELD_MESSAGE = "Field can't be empty"
EMPTY_DEPARTMENT_MESSAGE = "Please select a department"
FILTER_ERROR_MESSAGE = "You must fill out\nat least one field"
FILTER_FIELD_COUNT = 5

AlertCallback = Callable[[str, Optional[str], str, AlertType], None]


@dataclass
class SellerSearchForm:
    """Widget handles making up the seller search form."""

    name_input: QLineEdit
    email_input: QLineEdit
    birth_date_input: OptionalDateEdit
    base_salary_input: QLineEdit
    department_combo: QComboBox
    error_label: QLabel


class SellerSearchController:
    """Controller for the seller search form.

    The form is a partial-criteria search: any subset of the five fields may be
    filled in, and only a completely empty form is rejected.
    """

    def __init__(
        self,
        form: SellerSearchForm,
        close_window: Callable[[], None],
        show_alert: AlertCallback = show_alert,
        render_department: Callable[[Optional[Department]], str] = department_display_name,
        settings: Optional[FormSettings] = None,
    ) -> None:
        self.form = form
        self.settings = settings or FormSettings()
        self.entity: Optional[Seller] = None
        self.service: Optional[SellerService] = None
        self.department_service: Optional[DepartmentService] = None
        self._close_window = close_window
        self._show_alert = show_alert
        self._render_department = render_department
        self._data_change_listeners: List[DataChangeListener] = []
        self._initialize_nodes()

    def _initialize_nodes(self) -> None:
        set_text_field_max_length(self.form.name_input, self.settings.name_max_length)
        set_text_field_double(self.form.base_salary_input)
        set_text_field_max_length(self.form.email_input, self.settings.email_max_length)
        format_date_edit(self.form.birth_date_input, self.settings.date_format)

    # Wiring
    def set_services(self, service: SellerService, department_service: DepartmentService) -> None:
        self.service = service
        self.department_service = department_service

    def set_seller(self, entity: Optional[Seller]) -> None:
        self.entity = entity

    def subscribe_data_change_listener(self, listener: DataChangeListener) -> None:
        self._data_change_listeners.append(listener)

    # Form population
    def load_associated_objects(self) -> None:
        """Fill the department selector with every department.

        External calls:
        - core/services/department_service.py::DepartmentService.find_all - load the selectable departments.
        """

        if self.department_service is None:
            raise RuntimeError("Department service was null")
        departments = self.department_service.find_all()
        combo = self.form.department_combo
        combo.clear()
        for department in departments:
            combo.addItem(self._render_department(department), department)
        combo.setCurrentIndex(-1)

    def update_form_data(self) -> None:
        """Write the seed seller into the form widgets."""

        if self.entity is None:
            raise RuntimeError("Entity was null")
        entity = self.entity
        self.form.name_input.setText(entity.name or "")
        self.form.email_input.setText(entity.email or "")
        self.form.base_salary_input.setText(format_salary(entity.base_salary, self.settings.salary_decimals))
        if entity.birth_date is not None:
            self.form.birth_date_input.set_selected_date(to_local_date(entity.birth_date))
        if entity.department is None:
            self.form.department_combo.setCurrentIndex(-1)
        else:
            self._select_department(entity.department)

    def _select_department(self, department: Department) -> None:
        combo = self.form.department_combo
        for index in range(combo.count()):
            candidate = combo.itemData(index)
            if candidate is not None and candidate.id == department.id:
                combo.setCurrentIndex(index)
                return
        combo.setCurrentIndex(-1)

    # Actions
    def on_filter_action(self) -> None:
        """Validate the form, run the seller search, and notify listeners.

        External calls:
        - core/services/seller_service.py::SellerService.find_sellers - run the filtered query.
        """

        if self.service is None:
            raise RuntimeError("Service was null")
        self.form.error_label.setText("")
        try:
            criteria = self.collect_filter()
            logger.info("seller_search_started")
            sellers = self.service.find_sellers(criteria)

            if not sellers:
                self._show_alert("Error finding seller", None, "No seller was found", AlertType.ERROR)
                self._notify_data_changed()
            else:
                self._notify_data_changed_search(sellers)
            logger.info("seller_search_finished", matches=len(sellers))

            self._close_window()
        except DbError as exc:
            logger.warning("seller_search_failed", error=str(exc))
            self._show_alert("Error searching sellers", None, str(exc), AlertType.ERROR)
        except ValidationError as exc:
            logger.info("seller_search_rejected", fields=list(exc.errors))
            self._set_error_messages(exc.errors)

    def on_cancel_action(self) -> None:
        self._close_window()

    def collect_filter(self) -> SellerFilter:
        """Read the widgets into a SellerFilter.

        Each empty field records an error, but its value is still copied onto
        the filter. The filter is rejected only when every field is empty.
        """

        criteria = SellerFilter()
        exception = ValidationError("Validation error")

        name = self.form.name_input.text()
        if not name.strip():
            exception.add_error("name", EMPTY_FIELD_MESSAGE)
        criteria.name = name

        email = self.form.email_input.text()
        if not email.strip():
            exception.add_error("email", EMPTY_FIELD_MESSAGE)
        criteria.email = email

        birth_date = self.form.birth_date_input.selected_date()
        if birth_date is None:
            exception.add_error("birthDate", EMPTY_FIELD_MESSAGE)
        else:
            criteria.birth_date = to_local_start_of_day(birth_date)

        base_salary = self.form.base_salary_input.text()
        if not base_salary.strip():
            exception.add_error("baseSalary", EMPTY_FIELD_MESSAGE)
        criteria.base_salary = try_parse_to_double(base_salary)

        department = self.form.department_combo.currentData()
        if department is None:
            exception.add_error("department", EMPTY_DEPARTMENT_MESSAGE)
        criteria.department = department

        if len(exception.errors) >= FILTER_FIELD_COUNT:
            exception.add_error("filterError", FILTER_ERROR_MESSAGE)
            raise exception

        return criteria

    def _notify_data_changed(self) -> None:
        for listener in self._data_change_listeners:
            listener.on_data_changed()

    def _notify_data_changed_search(self, sellers: List[Seller]) -> None:
        for listener in self._data_change_listeners:
            listener.on_data_changed_search(sellers)

    def _set_error_messages(self, errors: Dict[str, str]) -> None:
        # Per-field messages are not shown on the search form.
        if "filterError" in errors:
            self.form.error_label.setText(errors["filterError"])
