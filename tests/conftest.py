"""Shared fixtures for the nl2sql-toolbox test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from nl2sql_toolbox.services.schema_registry import SchemaRegistry


@pytest.fixture
def schema_dir(tmp_path: Path) -> Path:
    (tmp_path / "departments.sql").write_text(
        "CREATE TABLE departments (department_id INT PRIMARY KEY);", encoding="utf-8"
    )
    (tmp_path / "employees.sql").write_text(
        "CREATE TABLE employees (employee_id INT PRIMARY KEY);", encoding="utf-8"
    )
    (tmp_path / "README.md").write_text("not a schema", encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (
        "GEMINI_API_KEY",
        "NL2SQL_TOOLBOX_MODEL",
        "NL2SQL_TOOLBOX_SCHEMA_DIR",
        "NL2SQL_TOOLBOX_SCHEMA_SUFFIX",
        "NL2SQL_TOOLBOX_SORT_TABLES",
        "NL2SQL_TOOLBOX_CALC_STRICT",
    ):
        monkeypatch.delenv(name, raising=False)
    SchemaRegistry.reset_instance()
    yield
    SchemaRegistry.reset_instance()
