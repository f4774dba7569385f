"""Response builders for nl2sql-toolbox.

Every tool answers with one or more plain-text content segments. This
module is the single place where handler output is wrapped in the
protocol envelope.
"""

from __future__ import annotations

from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent


def text_result(*segments: str) -> ToolResult:
    """Build a tool result holding one text content block per segment.

    Args:
        segments: Text segments in display order

    Returns:
        ToolResult with unstructured text content only
    """
    if not segments:
        msg = "text_result requires at least one segment"
        raise ValueError(msg)
    return ToolResult(content=[TextContent(type="text", text=segment) for segment in segments])
