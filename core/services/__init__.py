# Path: core/services/__init__.py
# Purpose: Package initializer for persistence services.
# Layer: core/services.
# Details: Exposes the SQLite database handle and the department and seller services.

from .database import Database
from .department_service import DepartmentService
from .seller_service import SellerService

__all__ = ["Database", "DepartmentService", "SellerService"]
