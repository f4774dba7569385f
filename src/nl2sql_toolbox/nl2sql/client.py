"""Completion client for the hosted Gemini text model.

A thin wrapper around a PydanticAI `Agent` with plain-text output. The
agent (and the underlying Google provider) is created on first use so a
missing credential never triggers network setup.
"""

from __future__ import annotations

from typing import Protocol

from fastmcp.utilities.logging import get_logger
from pydantic_ai import Agent
from pydantic_ai.models import Model
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider

from nl2sql_toolbox.constants import Constants
from nl2sql_toolbox.exceptions import CompletionError, MissingCredentialError

_logger = get_logger(__name__)


class SupportsCompletion(Protocol):
    """Anything that turns a prompt into completion text."""

    async def complete(self, prompt: str) -> str: ...


class CompletionClient:
    """Send prompts to a hosted text-generation model and return its text."""

    def __init__(
        self,
        api_key: str | None,
        model_name: str = Constants.DEFAULT_MODEL,
        *,
        model: Model | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Gemini API key
            model_name: Model identifier, e.g. ``gemini-2.0-flash``
            model: Pre-built PydanticAI model; replaces the Google model when given

        Raises:
            MissingCredentialError: If no API key is given and no model is injected
        """
        if not api_key and model is None:
            msg = f"{Constants.API_KEY_ENV} is not set"
            raise MissingCredentialError(msg)
        self._api_key = api_key
        self.model_name = model_name
        self._model = model
        self._agent: Agent[None, str] | None = None

    def _build_agent(self) -> Agent[None, str]:
        model = self._model
        if model is None:
            provider = GoogleProvider(api_key=self._api_key)
            model = GoogleModel(self.model_name, provider=provider)
        _logger.debug("Created completion agent for model %s", self.model_name)
        return Agent(model=model, output_type=str)

    async def complete(self, prompt: str) -> str:
        """Run the prompt through the model.

        Returns:
            The completion text with surrounding whitespace removed

        Raises:
            CompletionError: If the model call fails for any reason
        """
        if self._agent is None:
            self._agent = self._build_agent()
        try:
            result = await self._agent.run(prompt)
        except Exception as exc:  # noqa: BLE001 - provider errors are not a closed set
            raise CompletionError(str(exc) or type(exc).__name__) from exc
        return result.output.strip()
