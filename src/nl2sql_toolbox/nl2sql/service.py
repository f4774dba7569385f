"""Natural-language-to-SQL orchestration.

Checks preconditions, assembles the prompt from the loaded schema
documents and forwards it to the completion client. Every failure is
returned as a text segment so the calling agent always gets a readable
answer.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path

from fastmcp.utilities.logging import get_logger

from nl2sql_toolbox.constants import Constants
from nl2sql_toolbox.exceptions import CompletionError
from nl2sql_toolbox.nl2sql.client import CompletionClient, SupportsCompletion
from nl2sql_toolbox.nl2sql.prompt import build_prompt

_logger = get_logger(__name__)

MISSING_KEY_MESSAGE = (
    f"Error: {Constants.API_KEY_ENV} is not set in environment variables. "
    "The nl-to-sql tool cannot function without it."
)


class NlToSqlService:
    """Generate SQL text for a natural-language query."""

    def __init__(
        self,
        schema_provider: Callable[[], Mapping[str, str]],
        *,
        api_key: str | None,
        model_name: str = Constants.DEFAULT_MODEL,
        sort_tables: bool = True,
        schema_dir: Path | str | None = None,
        client: SupportsCompletion | None = None,
    ) -> None:
        self._schema_provider = schema_provider
        self._api_key = api_key
        self._model_name = model_name
        self._sort_tables = sort_tables
        self._schema_dir = str(schema_dir) if schema_dir is not None else "schemas"
        self._client = client

    def _get_client(self) -> SupportsCompletion:
        if self._client is None:
            self._client = CompletionClient(self._api_key, self._model_name)
        return self._client

    def missing_schemas_message(self) -> str:
        return (
            "Error: Database schemas not loaded. Please ensure SQL schema files "
            f"exist in the {self._schema_dir} directory."
        )

    async def generate(self, query: str) -> list[str]:
        """Convert a natural-language query to SQL.

        Returns:
            ``[sql, provenance]`` on success, or a single error segment
        """
        if not self._api_key:
            return [MISSING_KEY_MESSAGE]
        schemas = self._schema_provider()
        if not schemas:
            return [self.missing_schemas_message()]

        prompt = build_prompt(schemas, query, sort_tables=self._sort_tables)
        try:
            sql = await self._get_client().complete(prompt)
        except CompletionError as exc:
            _logger.exception("Error in nl-to-sql tool")
            return [f"Error generating SQL from natural language: {exc}"]
        return [sql, f"{Constants.PROVENANCE_PREFIX}{query}"]
