"""nl2sql-toolbox package.

Provides a Model Context Protocol (FastMCP) server with small utility tools
and a natural-language-to-SQL tool grounded in static schema documents.
"""

from nl2sql_toolbox.exceptions import ToolboxError
from nl2sql_toolbox.nl2sql import CompletionClient, NlToSqlService, build_prompt
from nl2sql_toolbox.schema_docs import load_schema_documents
from nl2sql_toolbox.services import ConfigService, SchemaRegistry

__all__ = [  # noqa: RUF022
    # Core operations
    "build_prompt",
    "load_schema_documents",
    # Services
    "CompletionClient",
    "ConfigService",
    "NlToSqlService",
    "SchemaRegistry",
    # Errors
    "ToolboxError",
]
