"""Stateless utility tools: echo, calculate, convert and format-date."""

from __future__ import annotations

from .handlers import calculate, convert, echo, format_date_text
from .mcp_tools import register_utility_tools

__all__ = [
    "calculate",
    "convert",
    "echo",
    "format_date_text",
    "register_utility_tools",
]
