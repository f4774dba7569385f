"""Command-line entrypoint for the nl2sql-toolbox FastMCP server.

Runs the server over the default (stdio) transport, equivalent to
`fastmcp run` against `nl2sql_toolbox.server:mcp`.
"""

from __future__ import annotations

import traceback

from fastmcp.utilities.logging import get_logger

from nl2sql_toolbox.server import mcp

# Configure a module-level logger for local server logs.
_logger = get_logger(__name__)


def main() -> None:
    """Start the nl2sql-toolbox FastMCP server via CLI."""
    try:
        mcp.run()
    except KeyboardInterrupt:
        _logger.info("Interrupted by user. Exiting cleanly.")
    except Exception:  # noqa: BLE001
        traceback.print_exc(limit=1)


if __name__ == "__main__":
    # Delegate to main() so behavior is consistent across execution paths.
    main()
