"""FastMCP server implementation for nl2sql-toolbox."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import dotenv
from fastmcp import FastMCP
from fastmcp.utilities.logging import get_logger
from starlette.requests import Request
from starlette.responses import JSONResponse

from nl2sql_toolbox.nl2sql.mcp_tools import register_nl_to_sql_tool
from nl2sql_toolbox.services.schema_registry import SchemaRegistry
from nl2sql_toolbox.utilities.mcp_tools import register_utility_tools

# Load environment variables
dotenv.load_dotenv()

# Configure a module-level logger for local server logs.
_logger = get_logger(__name__)


# -- Context Manager for schema registry lifecycle ---------------------------
@asynccontextmanager
async def lifespan(_mcp_instance: FastMCP) -> AsyncGenerator[None]:
    """Load schema documents before serving and release them on shutdown."""
    registry = SchemaRegistry.get_instance()
    _logger.info("Loading schema documents from %s", registry.directory)
    registry.load()
    try:
        yield
    finally:
        _logger.info("Shutting down schema registry during lifespan shutdown")
        registry.shutdown()


# Create the main MCP server instance with lifespan
mcp = FastMCP(
    name="nl2sql-toolbox",
    instructions=(
        "Utility tools (echo, calculate, convert, format-date) plus an nl-to-sql "
        "tool that turns natural language questions about the HR database into SQL."
    ),
    lifespan=lifespan,
)

# -- Tool Registration -------------------------------------------------------
register_utility_tools(mcp)
register_nl_to_sql_tool(mcp)


# -- Health Check ----------------------------------------------------------
@mcp.custom_route("/health", methods=["GET"])
async def health_check(_request: Request) -> JSONResponse:
    state = SchemaRegistry.get_instance().status()
    return JSONResponse(
        {
            "status": "healthy",
            "service": "nl2sql-toolbox",
            "schemas": {"phase": state.phase.name.lower(), "tables": state.table_count},
        }
    )


# -- Main Entrypoint -------------------------------------------------------

# Use fastmcp command to start the server
# fastmcp run src/nl2sql_toolbox/server.py:mcp
