"""Builders package for nl2sql-toolbox.

Builders turn handler output into the protocol's response envelope.

Main Components:
- text_result: Wraps text segments in a FastMCP ToolResult
"""

from .response_builders import text_result

__all__ = [
    "text_result",
]
