"""Recursive-descent parser for the lambda definition language."""

from __future__ import annotations

import os
import re

from relambda.ast import Abstraction, Application, Definition, Expression, String, Variable

_WHITESPACE = frozenset(" \t\n\r\f\v")
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_KEYWORDS = frozenset({"let"})
_ESCAPES = {'"': '"', "\\": "\\", "n": "\n"}


class ParseError(ValueError):
    """Raised when the input does not match the grammar."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{line}:{column}: {message}")
        self.message = message
        self.line = line
        self.column = column


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self._skip_whitespace()

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _error(self, message: str) -> ParseError:
        line = self.text.count("\n", 0, self.pos) + 1
        column = self.pos - (self.text.rfind("\n", 0, self.pos) + 1) + 1
        return ParseError(message, line, column)

    def _literal(self, literal: str) -> None:
        if not self.text.startswith(literal, self.pos):
            raise self._error(f"expected {literal!r}")
        self.pos += len(literal)
        self._skip_whitespace()

    def identifier(self) -> str:
        match = _IDENTIFIER.match(self.text, self.pos)
        if match is None:
            raise self._error("expected identifier")
        name = match.group()
        if name in _KEYWORDS:
            raise self._error(f"reserved identifier {name!r}")
        self.pos = match.end()
        self._skip_whitespace()
        return name

    def expression(self) -> Expression:
        if self._peek() == "\\":
            return self.abstraction()
        return self.applications()

    def abstraction(self) -> Abstraction:
        self._literal("\\")
        name = self.identifier()
        self._literal(".")
        return Abstraction(name, self.expression())

    def applications(self) -> Expression:
        result: Expression | None = None
        while (item := self._operand()) is not None:
            result = item if result is None else Application(result, item)
        if result is None:
            raise self._error("expected expression")
        return result

    def _operand(self) -> Expression | None:
        char = self._peek()
        if char == '"':
            return self.string()
        if char == "(":
            self._literal("(")
            inner = self.expression()
            self._literal(")")
            return inner
        match = _IDENTIFIER.match(self.text, self.pos)
        if match is None or match.group() in _KEYWORDS:
            return None
        self.pos = match.end()
        self._skip_whitespace()
        return Variable(match.group())

    def string(self) -> String:
        self._literal_raw('"')
        chars: list[str] = []
        while True:
            if self.pos >= len(self.text):
                raise self._error("unterminated string")
            char = self.text[self.pos]
            if char == '"':
                self.pos += 1
                break
            if char == "\\":
                escaped = self.text[self.pos + 1 : self.pos + 2]
                if escaped not in _ESCAPES:
                    raise self._error(f"invalid escape sequence \\{escaped}")
                chars.append(_ESCAPES[escaped])
                self.pos += 2
                continue
            if not " " <= char <= "~":
                raise self._error(f"invalid character {char!r} in string")
            chars.append(char)
            self.pos += 1
        self._skip_whitespace()
        return String("".join(chars))

    def _literal_raw(self, literal: str) -> None:
        if not self.text.startswith(literal, self.pos):
            raise self._error(f"expected {literal!r}")
        self.pos += len(literal)

    def definitions(self) -> list[Definition]:
        if not self.text.startswith("let", self.pos):
            raise self._error("expected 'let'")
        result = []
        while self.text.startswith("let", self.pos):
            self._literal("let")
            name = self.identifier()
            self._literal("=")
            result.append(Definition(name, self.expression()))
        return result


def parse_definitions(text: str) -> list[Definition]:
    """Parse a sequence of ``let name = expression`` definitions.

    Parsing stops after the last definition; anything that follows is ignored.
    """
    return _Parser(text).definitions()


def parse_string_expression(text: str) -> Expression:
    """Parse a single expression; input after the expression is ignored."""
    return _Parser(text).expression()


def parse_file(path: str | os.PathLike[str]) -> list[Definition]:
    """Read ``path`` and parse its definitions."""
    with open(path, encoding="utf-8") as handle:
        return parse_definitions(handle.read())