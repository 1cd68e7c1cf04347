# Path: gui/listeners.py
# Purpose: Define the observer interface used to broadcast seller data changes.
# Layer: gui.
# Details: Views showing seller lists implement this protocol to react to form outcomes.

from __future__ import annotations

from typing import List, Protocol

from core.models.domain import Seller


class DataChangeListener(Protocol):
    """Observer notified when the seller data shown to the user should change."""

    def on_data_changed(self) -> None:
        """Seller data was cleared or modified; reload from the source."""

    def on_data_changed_search(self, sellers: List[Seller]) -> None:
        """A search produced ``sellers``; show exactly these records."""
