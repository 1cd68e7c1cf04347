# Path: gui/widgets/__init__.py
# Purpose: Package initializer for reusable GUI widgets.
# Layer: gui.
# Details: Exposes the clearable date editor used by seller forms.

from .optional_date_edit import OptionalDateEdit

__all__ = ["OptionalDateEdit"]
