"""Expression tree for lambda terms and the combinators they compile to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


class FormatError(Exception):
    """Raised when an expression cannot be rendered in the requested form."""


class Expression(ABC):
    """A node of the expression tree."""

    @abstractmethod
    def format(self) -> str:
        """Render the expression in lambda/SKI notation."""

    @abstractmethod
    def format_unlambda(self, env: Sequence[Definition]) -> str:
        """Render the expression as Unlambda source, resolving names in ``env``."""


@dataclass
class Definition:
    """A named top-level binding: ``let name = value``."""

    name: str
    value: Expression


@dataclass
class Variable(Expression):
    name: str

    def format(self) -> str:
        return self.name

    def format_unlambda(self, env: Sequence[Definition]) -> str:
        definition = next((d for d in env if d.name == self.name), None)
        if definition is None:
            raise FormatError(f"can't format undefined name: {self.name}")
        return definition.value.format_unlambda(env)


@dataclass
class Application(Expression):
    lhs: Expression
    rhs: Expression

    def format(self) -> str:
        left = self.lhs.format()
        if isinstance(self.lhs, Abstraction):
            left = f"({left})"
        right = self.rhs.format()
        if isinstance(self.rhs, (Abstraction, Application)):
            right = f"({right})"
        return f"{left} {right}"

    def format_unlambda(self, env: Sequence[Definition]) -> str:
        return "`" + self.lhs.format_unlambda(env) + self.rhs.format_unlambda(env)


@dataclass
class Abstraction(Expression):
    name: str
    body: Expression

    def format(self) -> str:
        return f"\\{self.name}.{self.body.format()}"

    def format_unlambda(self, env: Sequence[Definition]) -> str:
        raise FormatError("abstractions don't exist in unlambda")


@dataclass
class String(Expression):
    value: str

    def format(self) -> str:
        return f'"{self.value}"'

    def format_unlambda(self, env: Sequence[Definition]) -> str:
        if len(self.value) != 1:
            raise FormatError("strings of sizes other than 1 are not supported yet")
        return "." + self.value


@dataclass
class S(Expression):
    def format(self) -> str:
        return "S"

    def format_unlambda(self, env: Sequence[Definition]) -> str:
        return "s"


@dataclass
class K(Expression):
    def format(self) -> str:
        return "K"

    def format_unlambda(self, env: Sequence[Definition]) -> str:
        return "k"


@dataclass
class I(Expression):  # noqa: E742
    def format(self) -> str:
        return "I"

    def format_unlambda(self, env: Sequence[Definition]) -> str:
        return "i"


@dataclass
class D(Expression):
    """The Unlambda delay combinator."""

    def format(self) -> str:
        return "D"

    def format_unlambda(self, env: Sequence[Definition]) -> str:
        return "d"


def is_combinator(expr: Expression) -> bool:
    """Return True for the S, K, I and D combinators."""
    return isinstance(expr, (S, K, I, D))


def is_d_app(expr: Expression) -> bool:
    """Return True for an application whose function is the D combinator."""
    return isinstance(expr, Application) and isinstance(expr.lhs, D)