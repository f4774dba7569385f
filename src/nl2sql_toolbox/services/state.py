"""Typed lifecycle state for the schema registry.

Internal module providing strongly-typed lifecycle state for
`SchemaRegistry`. Not exposed outside the process.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class SchemaLoadPhase(Enum):
    """Lifecycle phase of the process-wide schema mapping."""

    IDLE = auto()
    READY = auto()
    STOPPED = auto()


@dataclass(frozen=True)
class SchemaLoadState:
    """Snapshot of the registry state with timestamps and load details."""

    phase: SchemaLoadPhase
    loaded_at: float | None = None
    directory: str | None = None
    table_count: int = 0
