"""MCP tool registration for the nl-to-sql tool.

Exposes `register_nl_to_sql_tool`, which attaches `nl-to-sql` to a FastMCP
instance. The completion credential and model identifier are read once at
registration time; schema documents come from the `SchemaRegistry`.
"""

from __future__ import annotations

from typing import Annotated

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from fastmcp.utilities.logging import get_logger
from pydantic import Field

from nl2sql_toolbox.builders import text_result
from nl2sql_toolbox.constants import Constants
from nl2sql_toolbox.nl2sql.client import SupportsCompletion
from nl2sql_toolbox.nl2sql.service import NlToSqlService
from nl2sql_toolbox.services.config_service import ConfigService
from nl2sql_toolbox.services.schema_registry import SchemaRegistry

_logger = get_logger(__name__)

QUERY_DESCRIPTION = (
    "Convert natural language to SQL for our HR database. "
    "Available tables: employees (with personal details, salary, department_id, manager_id), "
    "departments (id, name, location, budget), "
    "projects (id, name, dates, status, budget), "
    "employee_projects (assignments of employees to projects). "
    "Examples: 'Find employees in IT earning over 70k', 'List projects ending this year', "
    "'Show managers with most direct reports'"
)


def register_nl_to_sql_tool(
    mcp: FastMCP,
    *,
    registry: SchemaRegistry | None = None,
    client: SupportsCompletion | None = None,
) -> None:
    """Register the `nl-to-sql` MCP tool on the given server instance.

    Args:
        mcp: The FastMCP server instance.
        registry: Schema registry; the process-wide singleton when None.
        client: Completion client; a Gemini-backed client is created on first use when None.
    """

    reg = registry or SchemaRegistry.get_instance()
    api_key = ConfigService.get_gemini_api_key()
    if not api_key:
        _logger.warning(
            "%s not found in environment variables. The nl-to-sql tool will not work properly.",
            Constants.API_KEY_ENV,
        )

    service = NlToSqlService(
        reg.schemas,
        api_key=api_key,
        model_name=ConfigService.get_model_name(),
        sort_tables=ConfigService.sort_schema_tables(),
        schema_dir=reg.directory,
        client=client,
    )

    @mcp.tool(name="nl-to-sql")
    async def nl_to_sql(
        query: Annotated[str, Field(description=QUERY_DESCRIPTION)],
    ) -> ToolResult:  # pyright: ignore[reportUnusedFunction]
        """Convert natural language to SQL using database schemas."""
        preview = query[: Constants.MAX_QUERY_DISPLAY] + (
            "..." if len(query) > Constants.MAX_QUERY_DISPLAY else ""
        )
        _logger.info("nl-to-sql: %s", preview)
        segments = await service.generate(query)
        return text_result(*segments)

    _ = nl_to_sql
