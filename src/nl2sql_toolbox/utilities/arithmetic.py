"""Arithmetic expression evaluation for the `calculate` tool.

Expressions are reduced to the characters ``0-9 . + - * / ( )`` and then
evaluated by a small tokenizer and recursive-descent parser. User text is
never handed to a general execution facility.

Grammar (lowest to highest precedence)::

    expr    := term (("+" | "-") term)*
    term    := unary (("*" | "/") unary)*
    unary   := ("+" | "-") unary | power
    power   := primary ("**" unary)?
    primary := NUMBER | "(" expr ")"

Arithmetic follows IEEE-754 float semantics: division by zero yields
``inf``/``-inf`` (or ``nan`` for ``0/0``) and overflow yields ``inf``.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import re
from typing import Final

from nl2sql_toolbox.exceptions import ExpressionSyntaxError, UnsupportedCharacterError

ALLOWED_CHARACTERS: Final[frozenset[str]] = frozenset("0123456789.+-*/()")

_DISALLOWED_PATTERN = re.compile(r"[^-()*+/0-9.]")
_TOKEN_PATTERN = re.compile(r"\d+\.?\d*|\.\d+|\*\*|[-+*/()]")


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical token of a sanitized expression."""

    kind: str  # "num" or the operator/parenthesis text
    text: str
    position: int


def sanitize_expression(expression: str, *, strict: bool = False) -> str:
    """Reduce an expression to the allowed character set.

    In lenient mode every other character is dropped, so ``"1,000+1"``
    becomes ``"1000+1"``. In strict mode any character other than the
    allowed set or whitespace is rejected.

    Raises:
        UnsupportedCharacterError: In strict mode, when disallowed characters occur
    """
    if strict:
        rejected = sorted(
            {ch for ch in expression if ch not in ALLOWED_CHARACTERS and not ch.isspace()}
        )
        if rejected:
            raise UnsupportedCharacterError(expression, "".join(rejected))
    return _DISALLOWED_PATTERN.sub("", expression)


def tokenize(text: str) -> list[Token]:
    """Split a sanitized expression into tokens."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_PATTERN.match(text, pos)
        if match is None:
            msg = f"Unexpected character {text[pos]!r} at position {pos}"
            raise ExpressionSyntaxError(msg)
        lexeme = match.group()
        kind = "num" if lexeme[0].isdigit() or lexeme[0] == "." else lexeme
        tokens.append(Token(kind=kind, text=lexeme, position=pos))
        pos = match.end()
    return tokens


def _divide(left: float, right: float) -> float:
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and int(value) % 2 == 1


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        # 0 ** negative, or a negative base with a fractional exponent
        if base == 0.0:
            negative = math.copysign(1.0, base) < 0 and _is_odd_integer(exponent)
            return -math.inf if negative else math.inf
        return math.nan


class _Parser:
    """Recursive-descent evaluator over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._index = 0

    def _peek(self) -> Token | None:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def _advance(self) -> Token:
        token = self._peek()
        if token is None:
            msg = "Unexpected end of expression"
            raise ExpressionSyntaxError(msg)
        self._index += 1
        return token

    def parse(self) -> float:
        if not self._tokens:
            msg = "Empty expression"
            raise ExpressionSyntaxError(msg)
        value = self._expr()
        trailing = self._peek()
        if trailing is not None:
            msg = f"Unexpected {trailing.text!r} at position {trailing.position}"
            raise ExpressionSyntaxError(msg)
        return value

    def _expr(self) -> float:
        value = self._term()
        while (token := self._peek()) is not None and token.kind in {"+", "-"}:
            self._advance()
            rhs = self._term()
            value = value + rhs if token.kind == "+" else value - rhs
        return value

    def _term(self) -> float:
        value = self._unary()
        while (token := self._peek()) is not None and token.kind in {"*", "/"}:
            self._advance()
            rhs = self._unary()
            value = value * rhs if token.kind == "*" else _divide(value, rhs)
        return value

    def _unary(self) -> float:
        token = self._peek()
        if token is not None and token.kind in {"+", "-"}:
            self._advance()
            operand = self._unary()
            return -operand if token.kind == "-" else operand
        return self._power()

    def _power(self) -> float:
        base = self._primary()
        token = self._peek()
        if token is not None and token.kind == "**":
            self._advance()
            return _power(base, self._unary())
        return base

    def _primary(self) -> float:
        token = self._advance()
        if token.kind == "num":
            return float(token.text)
        if token.kind == "(":
            value = self._expr()
            closing = self._advance()
            if closing.kind != ")":
                msg = f"Expected ')' at position {closing.position}"
                raise ExpressionSyntaxError(msg)
            return value
        msg = f"Unexpected {token.text!r} at position {token.position}"
        raise ExpressionSyntaxError(msg)


def evaluate(expression: str, *, strict: bool = False) -> float:
    """Sanitize and evaluate an arithmetic expression.

    Args:
        expression: Raw expression text from the caller
        strict: Reject disallowed characters instead of stripping them

    Returns:
        The numeric result as a float

    Raises:
        UnsupportedCharacterError: In strict mode, for disallowed characters
        ExpressionSyntaxError: When the sanitized text is not valid arithmetic
    """
    sanitized = sanitize_expression(expression, strict=strict)
    try:
        return _Parser(tokenize(sanitized)).parse()
    except RecursionError as exc:
        msg = "Expression is nested too deeply"
        raise ExpressionSyntaxError(msg) from exc
