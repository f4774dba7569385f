"""Tests for the MCP tool registrations over an in-memory client."""

from __future__ import annotations

from pathlib import Path

from fastmcp import Client, FastMCP
from fastmcp.exceptions import ToolError
import pytest

from nl2sql_toolbox.nl2sql.mcp_tools import register_nl_to_sql_tool
from nl2sql_toolbox.services.schema_registry import SchemaRegistry
from nl2sql_toolbox.utilities.mcp_tools import register_utility_tools

from .fakes import FakeCompletionClient


def _texts(result: object) -> list[str]:
    return [block.text for block in result.content]  # type: ignore[attr-defined]


def _server(
    registry: SchemaRegistry, client: FakeCompletionClient, *, strict: bool = False
) -> FastMCP:
    mcp = FastMCP(name="nl2sql-toolbox-test")
    register_utility_tools(mcp, strict_calculator=strict)
    register_nl_to_sql_tool(mcp, registry=registry, client=client)
    return mcp


@pytest.mark.asyncio
async def test_tool_catalog(schema_dir: Path) -> None:
    mcp = _server(SchemaRegistry(schema_dir), FakeCompletionClient())
    async with Client(mcp) as client:
        tools = await client.list_tools()

    assert {t.name for t in tools} == {"echo", "calculate", "convert", "format-date", "nl-to-sql"}
    convert = next(t for t in tools if t.name == "convert")
    assert set(convert.inputSchema["required"]) == {"value", "fromUnit", "toUnit"}


@pytest.mark.asyncio
async def test_utility_tools_return_text(schema_dir: Path) -> None:
    mcp = _server(SchemaRegistry(schema_dir), FakeCompletionClient())
    async with Client(mcp) as client:
        echo = await client.call_tool("echo", {"message": "hi"})
        calc = await client.call_tool("calculate", {"expression": "2+2"})
        conv = await client.call_tool(
            "convert", {"value": 0, "fromUnit": "celsius", "toUnit": "fahrenheit"}
        )
        date = await client.call_tool(
            "format-date", {"date": "2024-01-15T10:30:00", "format": "YYYY-MM-DD"}
        )

    assert _texts(echo) == ["Tool echo: hi"]
    assert _texts(calc) == ["Result: 4"]
    assert _texts(conv) == ["0 celsius = 32.0000 fahrenheit"]
    assert _texts(date) == ["2024-01-15"]


@pytest.mark.asyncio
async def test_handler_failures_are_in_band(schema_dir: Path) -> None:
    mcp = _server(SchemaRegistry(schema_dir), FakeCompletionClient())
    async with Client(mcp) as client:
        calc = await client.call_tool("calculate", {"expression": "nonsense"})
        conv = await client.call_tool(
            "convert", {"value": 10, "fromUnit": "celsius", "toUnit": "kelvin"}
        )
        date = await client.call_tool("format-date", {"date": "yesterday-ish"})

    assert calc.is_error is False
    assert _texts(calc) == ["Error: Could not evaluate expression 'nonsense'"]
    assert _texts(conv) == ["Error: Conversion from celsius to kelvin is not supported."]
    assert _texts(date) == ["Error formatting date: Invalid date 'yesterday-ish'"]


@pytest.mark.asyncio
async def test_strict_calculator(schema_dir: Path) -> None:
    mcp = _server(SchemaRegistry(schema_dir), FakeCompletionClient(), strict=True)
    async with Client(mcp) as client:
        calc = await client.call_tool("calculate", {"expression": "1;1"})

    assert _texts(calc) == ["Error: Expression '1;1' contains unsupported characters: ;"]


@pytest.mark.asyncio
async def test_malformed_arguments_are_protocol_errors(schema_dir: Path) -> None:
    mcp = _server(SchemaRegistry(schema_dir), FakeCompletionClient())
    async with Client(mcp) as client:
        with pytest.raises(ToolError):
            await client.call_tool(
                "convert", {"value": "lots", "fromUnit": "celsius", "toUnit": "fahrenheit"}
            )
        for loose in ("10", True):
            with pytest.raises(ToolError):
                await client.call_tool(
                    "convert", {"value": loose, "fromUnit": "celsius", "toUnit": "fahrenheit"}
                )
        conv = await client.call_tool(
            "convert", {"value": 10, "fromUnit": "celsius", "toUnit": "fahrenheit"}
        )
        assert _texts(conv) == ["10 celsius = 50.0000 fahrenheit"]
        with pytest.raises(ToolError):
            await client.call_tool("echo", {})


@pytest.mark.asyncio
async def test_nl_to_sql_returns_two_segments(
    schema_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    fake = FakeCompletionClient(reply="SELECT * FROM employees;")
    mcp = _server(SchemaRegistry(schema_dir), fake)
    async with Client(mcp) as client:
        result = await client.call_tool("nl-to-sql", {"query": "all employees"})

    assert _texts(result) == [
        "SELECT * FROM employees;",
        "\n\nGenerated from natural language query: all employees",
    ]
    prompt = fake.prompts[0]
    assert prompt.index("Table: departments") < prompt.index("Table: employees")
    assert "README" not in prompt


@pytest.mark.asyncio
async def test_nl_to_sql_without_credential(schema_dir: Path) -> None:
    fake = FakeCompletionClient()
    mcp = _server(SchemaRegistry(schema_dir), fake)
    async with Client(mcp) as client:
        result = await client.call_tool("nl-to-sql", {"query": "all employees"})

    assert len(result.content) == 1
    assert _texts(result)[0].startswith("Error: GEMINI_API_KEY is not set")
    assert fake.prompts == []


@pytest.mark.asyncio
async def test_nl_to_sql_without_schemas(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    fake = FakeCompletionClient()
    mcp = _server(SchemaRegistry(tmp_path), fake)
    async with Client(mcp) as client:
        result = await client.call_tool("nl-to-sql", {"query": "all employees"})

    assert _texts(result)[0].startswith("Error: Database schemas not loaded.")
    assert str(tmp_path) in _texts(result)[0]
    assert fake.prompts == []
