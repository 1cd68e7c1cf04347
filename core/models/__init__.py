# Path: core/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes dataclasses used by the persistence and GUI layers.

from .domain import Department, Seller, SellerFilter

__all__ = ["Department", "Seller", "SellerFilter"]
