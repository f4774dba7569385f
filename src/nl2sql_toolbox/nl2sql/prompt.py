"""Prompt assembly for natural-language-to-SQL conversion."""

from __future__ import annotations

from collections.abc import Mapping

from nl2sql_toolbox.constants import Constants


def format_table_block(name: str, definition: str) -> str:
    """Render one schema document as a prompt block."""
    return f"Table: {name}\n{definition}\n\n"


def build_prompt(schemas: Mapping[str, str], query: str, *, sort_tables: bool = True) -> str:
    """Assemble the completion prompt for a natural-language query.

    The prompt is the fixed preamble, one block per schema document, the
    quoted query and a closing instruction to answer with SQL only.

    Args:
        schemas: Mapping of table name to definition text
        query: The caller's natural-language question
        sort_tables: Order blocks by table name instead of mapping order

    Returns:
        The prompt text
    """
    items = sorted(schemas.items()) if sort_tables else list(schemas.items())
    parts = [Constants.PROMPT_PREAMBLE]
    parts.extend(format_table_block(name, ddl) for name, ddl in items)
    parts.append(f'Convert this natural language query to valid SQL:\n"{query}"\n\n')
    parts.append(Constants.PROMPT_INSTRUCTION)
    return "".join(parts)
