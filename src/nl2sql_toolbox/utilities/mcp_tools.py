"""MCP tool registration for the utility tools.

Exposes `register_utility_tools`, which attaches `echo`, `calculate`,
`convert` and `format-date` to a FastMCP instance. Argument shapes are
validated by FastMCP before the handlers run; handler failures come back
as ordinary text results.
"""

from __future__ import annotations

from typing import Annotated

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from fastmcp.utilities.logging import get_logger
from pydantic import Field

from nl2sql_toolbox.builders import text_result
from nl2sql_toolbox.services.config_service import ConfigService
from nl2sql_toolbox.utilities import handlers

_logger = get_logger(__name__)


def register_utility_tools(mcp: FastMCP, *, strict_calculator: bool | None = None) -> None:
    """Register the stateless utility tools on the given server instance.

    Args:
        mcp: The FastMCP server instance.
        strict_calculator: Reject disallowed characters in `calculate` instead of
            stripping them; read from configuration when None.
    """

    strict = ConfigService.calculator_strict() if strict_calculator is None else strict_calculator
    _logger.debug("Registering utility tools (strict calculator=%s)", strict)

    @mcp.tool(name="echo")
    async def echo(
        message: Annotated[str, Field(description="Message to echo back")],
    ) -> ToolResult:  # pyright: ignore[reportUnusedFunction]
        """Echo a message."""
        return text_result(handlers.echo(message))

    @mcp.tool(name="calculate")
    async def calculate(
        expression: Annotated[
            str, Field(description="The mathematical expression to evaluate")
        ],
    ) -> ToolResult:  # pyright: ignore[reportUnusedFunction]
        """Calculate a mathematical expression.

        Supports numbers, + - * / ** and parentheses.
        """
        return text_result(handlers.calculate(expression, strict=strict))

    @mcp.tool(name="convert")
    async def convert(
        value: Annotated[float, Field(strict=True, description="The value to convert")],
        fromUnit: Annotated[str, Field(description="The unit to convert from")],  # noqa: N803
        toUnit: Annotated[str, Field(description="The unit to convert to")],  # noqa: N803
    ) -> ToolResult:  # pyright: ignore[reportUnusedFunction]
        """Convert between different units.

        Supported: celsius/fahrenheit, kilometers/miles, kilograms/pounds,
        meters/feet, liters/gallons.
        """
        return text_result(handlers.convert(value, fromUnit, toUnit))

    @mcp.tool(name="format-date")
    async def format_date(
        date: Annotated[
            str | None,
            Field(description="Date string to format (defaults to current date)"),
        ] = None,
        format: Annotated[  # noqa: A002
            str | None,
            Field(description="Format string (e.g., 'YYYY-MM-DD')"),
        ] = None,
    ) -> ToolResult:  # pyright: ignore[reportUnusedFunction]
        """Format a date according to a specified pattern."""
        return text_result(handlers.format_date_text(date, format))

    # Hint to static analyzers that nested functions are intentionally used
    _ = (echo, calculate, convert, format_date)
