# Path: gui/__init__.py
# Purpose: Package initializer for GUI layer.
# Layer: gui.
# Details: Provide lightweight exports without importing SellerListWindow to avoid side effects.

from .seller_search_controller import SellerSearchController, SellerSearchForm
from .seller_search_dialog import SellerSearchDialog
from .view_models import SellerListViewModel

__all__ = ["SellerListViewModel", "SellerSearchController", "SellerSearchDialog", "SellerSearchForm"]
