"""Custom exception hierarchy for nl2sql-toolbox.

Tool handlers raise these typed errors internally and convert them to
in-band text results before anything reaches the protocol layer. Only
argument validation (performed by FastMCP/pydantic) surfaces as a
protocol-level fault.

Exception Categories:
- Schema errors for schema document loading failures
- Expression errors for the arithmetic evaluator
- Conversion and date errors for the utility tools
- Completion errors for the hosted text-generation model
"""

from __future__ import annotations


class ToolboxError(Exception):
    """Base exception for nl2sql-toolbox operations."""


class SchemaLoadError(ToolboxError):
    """Raised when a schema document or directory cannot be read."""


class ExpressionError(ToolboxError):
    """Base class for arithmetic expression failures."""


class ExpressionSyntaxError(ExpressionError):
    """Raised when a sanitized expression is not valid arithmetic.

    This covers empty input, dangling operators, unbalanced parentheses
    and malformed numbers such as ``1.2.3``.
    """


class UnsupportedCharacterError(ExpressionError):
    """Raised in strict mode when an expression holds disallowed characters."""

    def __init__(self, expression: str, characters: str) -> None:
        self.expression = expression
        self.characters = characters
        super().__init__(
            f"Expression '{expression}' contains unsupported characters: {characters}"
        )


class UnsupportedConversionError(ToolboxError):
    """Raised when no conversion is registered for a unit pair."""

    def __init__(self, from_unit: str, to_unit: str) -> None:
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(f"Conversion from {from_unit} to {to_unit} is not supported.")


class DateParseError(ToolboxError):
    """Raised when an input date string cannot be parsed."""


class MissingCredentialError(ToolboxError):
    """Raised when the completion model credential is not configured."""


class CompletionError(ToolboxError):
    """Raised when the hosted completion model call fails.

    Wraps network, authentication, rate-limit and model-behaviour errors
    coming from the pydantic-ai model stack.
    """
