"""Process-wide schema registry for nl2sql-toolbox.

Holds the schema mapping loaded once per process. The FastMCP lifespan
loads it synchronously before the first request is served; any access
that happens earlier (for example an in-memory client in tests) performs
the same load through `schemas()`. After loading, the mapping is exposed
read-only and never changes until `shutdown()`.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
import threading
import time
from types import MappingProxyType
from typing import ClassVar

from fastmcp.utilities.logging import get_logger

from nl2sql_toolbox.schema_docs.loader import load_schema_documents
from nl2sql_toolbox.services.config_service import ConfigService
from nl2sql_toolbox.services.state import SchemaLoadPhase, SchemaLoadState

_EMPTY: MappingProxyType[str, str] = MappingProxyType({})


class SchemaRegistry:
    """Singleton owner of the loaded schema documents."""

    _instance: ClassVar[SchemaRegistry | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, directory: Path | str | None = None, suffix: str | None = None) -> None:
        """Initialize the registry.

        Args:
            directory: Schema directory; defaults to `ConfigService.get_schema_dir()`
            suffix: Definition suffix; defaults to `ConfigService.get_schema_suffix()`
        """
        self._directory = Path(directory) if directory is not None else None
        self._suffix = suffix
        self._schemas: MappingProxyType[str, str] = _EMPTY
        self._load_lock = threading.Lock()
        self._state = SchemaLoadState(phase=SchemaLoadPhase.IDLE)
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> SchemaRegistry:
        """Get the singleton instance of SchemaRegistry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        with cls._lock:
            cls._instance = None

    @property
    def directory(self) -> Path:
        """Directory the schema documents are read from."""
        return self._directory or ConfigService.get_schema_dir()

    def load(self) -> MappingProxyType[str, str]:
        """Load schema documents once per lifecycle and return the read-only mapping."""
        with self._load_lock:
            if self._state.phase is SchemaLoadPhase.READY:
                return self._schemas
            if self._state.phase is SchemaLoadPhase.STOPPED:
                self._logger.info("Reloading schema documents after shutdown")

            directory = self.directory
            suffix = self._suffix or ConfigService.get_schema_suffix()
            schemas = load_schema_documents(directory, suffix)
            self._schemas = MappingProxyType(schemas)
            self._state = replace(
                self._state,
                phase=SchemaLoadPhase.READY,
                loaded_at=time.time(),
                directory=str(directory),
                table_count=len(schemas),
            )
            self._logger.info(
                "Loaded %d database schema(s): %s", len(schemas), ", ".join(schemas) or "-"
            )
            return self._schemas

    def schemas(self) -> MappingProxyType[str, str]:
        """Return the schema mapping, loading it first when not yet READY."""
        if self._state.phase is SchemaLoadPhase.READY:
            return self._schemas
        return self.load()

    def shutdown(self) -> None:
        """Drop the loaded mapping; the next access loads it again."""
        with self._load_lock:
            self._schemas = _EMPTY
            self._state = replace(self._state, phase=SchemaLoadPhase.STOPPED, table_count=0)
        self._logger.info("Schema registry shut down")

    @property
    def is_ready(self) -> bool:
        """True once the schema documents have been loaded."""
        return self._state.phase is SchemaLoadPhase.READY

    def status(self) -> SchemaLoadState:
        """Return a snapshot of the registry state."""
        return self._state
