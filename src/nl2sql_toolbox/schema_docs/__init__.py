"""Schema document loading.

Reads the static table-definition documents that ground the NL-to-SQL
prompt.
"""

from __future__ import annotations

from .loader import load_schema_documents, read_schema_document, table_name_for

__all__ = [
    "load_schema_documents",
    "read_schema_document",
    "table_name_for",
]
