"""Loading of table-definition documents from disk.

Each definition document holds the DDL for one table (or a small group of
related tables). The table name is derived from the file name with the
definition suffix removed, e.g. ``departments.sql`` -> ``departments``.
"""

from __future__ import annotations

from pathlib import Path

from fastmcp.utilities.logging import get_logger

from nl2sql_toolbox.constants import Constants
from nl2sql_toolbox.exceptions import SchemaLoadError

_logger = get_logger(__name__)


def table_name_for(path: Path, suffix: str = Constants.DEFAULT_SCHEMA_SUFFIX) -> str | None:
    """Return the table name for a definition file, or None for other files."""
    name = path.name
    if not name.endswith(suffix) or len(name) == len(suffix):
        return None
    return name.removesuffix(suffix)


def read_schema_document(path: Path) -> str:
    """Read one definition document as UTF-8 text.

    Raises:
        SchemaLoadError: If the file cannot be read or decoded
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Could not read schema document {path}: {exc}"
        raise SchemaLoadError(msg) from exc


def load_schema_documents(
    directory: Path | str,
    suffix: str = Constants.DEFAULT_SCHEMA_SUFFIX,
) -> dict[str, str]:
    """Load every definition document found directly inside ``directory``.

    Files are visited in file-name order. A file that cannot be read is
    logged and skipped; a missing or unreadable directory yields an empty
    mapping. Neither case is fatal.

    Args:
        directory: Directory to scan (not recursive)
        suffix: File suffix that marks a definition document

    Returns:
        Mapping of table name to definition text
    """
    root = Path(directory)
    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError:
        _logger.exception("Error loading database schemas from %s", root)
        return {}

    schemas: dict[str, str] = {}
    for path in entries:
        table = table_name_for(path, suffix)
        if table is None or not path.is_file():
            continue
        try:
            schemas[table] = read_schema_document(path)
        except SchemaLoadError as exc:
            _logger.warning("Skipping schema document: %s", exc)
    return schemas
