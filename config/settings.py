# Path: config/settings.py
# Purpose: Provide typed application configuration models.
# Layer: config.
# Details: Centralizes the database location, logging verbosity, and seller form formatting rules.

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

ENV_PREFIX = "SELLERDESK_"


class FormSettings(BaseModel):
    """Settings controlling how seller form fields are constrained and rendered."""

    date_format: str = Field(default="dd/MM/yyyy", description="Qt display pattern for date editors.")
    name_max_length: int = Field(default=70, description="Maximum number of characters in the name field.")
    email_max_length: int = Field(default=60, description="Maximum number of characters in the email field.")
    salary_decimals: int = Field(default=2, description="Decimal places used when rendering salaries.")
    table_date_format: str = Field(default="%d/%m/%Y", description="strftime pattern for dates shown in tables.")


class AppSettings(BaseModel):
    """Top-level application settings shared across services and interfaces."""

    database_path: Path = Field(default=Path("storage/db/sellers.sqlite3"), description="Path to the seller database.")
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")
    form: FormSettings = Field(default_factory=FormSettings)

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Instantiate settings, applying ``SELLERDESK_*`` environment overrides when present."""

        overrides: dict = {}
        database_path = os.environ.get(f"{ENV_PREFIX}DATABASE_PATH")
        if database_path:
            overrides["database_path"] = Path(database_path)
        log_level = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.upper()
        return cls(**overrides)


__all__ = ["AppSettings", "FormSettings"]
