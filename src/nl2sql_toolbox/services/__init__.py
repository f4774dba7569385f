"""Services package for nl2sql-toolbox.

Main Components:
- ConfigService: Environment-backed configuration
- SchemaRegistry: Process-wide, read-only schema document mapping
"""

from .config_service import ConfigService
from .schema_registry import SchemaRegistry

__all__ = [
    "ConfigService",
    "SchemaRegistry",
]
