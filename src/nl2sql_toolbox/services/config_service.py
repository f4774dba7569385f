"""Configuration service for nl2sql-toolbox.

This module centralizes environment variable handling for the server: the
completion model credential and identifier, the schema document location,
and the behaviour switches of individual tools.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from nl2sql_toolbox.constants import Constants

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str, *, default: bool) -> bool:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return val.strip().lower() in _TRUE_VALUES


class ConfigService:
    """Service for reading configuration from the process environment."""

    @staticmethod
    def get_gemini_api_key() -> str | None:
        """Get the completion model credential.

        Returns:
            The API key, or None when GEMINI_API_KEY is unset or blank
        """
        key = os.getenv(Constants.API_KEY_ENV, "").strip()
        return key or None

    @staticmethod
    def get_model_name() -> str:
        """Model identifier passed to the hosted completion model."""
        name = os.getenv("NL2SQL_TOOLBOX_MODEL", "").strip()
        return name or Constants.DEFAULT_MODEL

    @staticmethod
    def get_schema_dir() -> Path:
        """Directory holding table-definition documents.

        Falls back to the ``schemas`` directory shipped inside the package
        when NL2SQL_TOOLBOX_SCHEMA_DIR is unset.
        """
        configured = os.getenv("NL2SQL_TOOLBOX_SCHEMA_DIR", "").strip()
        if configured:
            return Path(configured).expanduser()
        return Path(__file__).resolve().parent.parent / "schemas"

    @staticmethod
    def get_schema_suffix() -> str:
        """File suffix identifying table-definition documents."""
        suffix = os.getenv("NL2SQL_TOOLBOX_SCHEMA_SUFFIX", "").strip()
        if not suffix:
            return Constants.DEFAULT_SCHEMA_SUFFIX
        return suffix if suffix.startswith(".") else f".{suffix}"

    @staticmethod
    def sort_schema_tables() -> bool:
        """Whether schema blocks are ordered by table name in the prompt."""
        return _env_flag("NL2SQL_TOOLBOX_SORT_TABLES", default=True)

    @staticmethod
    def calculator_strict() -> bool:
        """Whether `calculate` rejects disallowed characters instead of stripping them."""
        return _env_flag("NL2SQL_TOOLBOX_CALC_STRICT", default=False)
