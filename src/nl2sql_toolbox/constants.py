"""Constants shared across nl2sql-toolbox."""

from __future__ import annotations

from typing import Final


class Constants:
    """Configuration constants for the toolbox server."""

    # Completion model
    API_KEY_ENV: Final[str] = "GEMINI_API_KEY"
    DEFAULT_MODEL: Final[str] = "gemini-2.0-flash"

    # Schema documents
    DEFAULT_SCHEMA_SUFFIX: Final[str] = ".sql"

    # Logging
    MAX_QUERY_DISPLAY: Final[int] = 100

    # Prompt fragments
    PROMPT_PREAMBLE: Final[str] = (
        "You are a SQL expert that converts natural language queries to precise SQL. "
        "Based on the following database schema:\n\n"
    )
    PROMPT_INSTRUCTION: Final[str] = (
        "Respond only with the SQL query, no explanation or other text."
    )

    # Result labels
    ECHO_PREFIX: Final[str] = "Tool echo: "
    RESULT_PREFIX: Final[str] = "Result: "
    PROVENANCE_PREFIX: Final[str] = "\n\nGenerated from natural language query: "
