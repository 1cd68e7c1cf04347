# Path: gui/app.py
# Purpose: Desktop entrypoint wiring settings, logging, services, and the seller list window.
# Layer: gui.
# Details: Exposed as the ``sellerdesk`` console script.

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from config import AppSettings
from core.logging import configure_logging, logger
from core.services import Database, DepartmentService, SellerService
from .main_window import SellerListWindow


def main() -> int:
    """Launch the seller management window."""

    settings = AppSettings.from_env()
    configure_logging(settings.log_level)

    database = Database(settings.database_path)
    seller_service = SellerService(database)
    department_service = DepartmentService(database)
    logger.info("app_starting", database=str(settings.database_path))

    app = QApplication(sys.argv)
    window = SellerListWindow(seller_service, department_service, settings.form)
    window.on_data_changed()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
