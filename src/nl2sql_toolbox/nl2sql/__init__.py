"""Natural-language-to-SQL tool package.

Prompt assembly, the hosted completion client and MCP tool registration.
"""

from __future__ import annotations

from .client import CompletionClient, SupportsCompletion
from .mcp_tools import register_nl_to_sql_tool
from .prompt import build_prompt
from .service import NlToSqlService

__all__ = [
    "CompletionClient",
    "NlToSqlService",
    "SupportsCompletion",
    "build_prompt",
    "register_nl_to_sql_tool",
]
