"""Compilation of lambda terms into S, K, I and D combinators."""

from __future__ import annotations

from relambda.ast import (
    Abstraction,
    Application,
    D,
    Expression,
    I,
    K,
    S,
    String,
    Variable,
    is_combinator,
)


class ConversionError(Exception):
    """Raised when an expression cannot be reduced to combinators."""


def mentions(expr: Expression, name: str) -> bool:
    """Return True if ``name`` occurs free in ``expr``."""
    match expr:
        case Abstraction(binder, body):
            return binder != name and mentions(body, name)
        case Application(lhs, rhs):
            return mentions(lhs, name) or mentions(rhs, name)
        case Variable(var):
            return var == name
    return False


def is_pure(expr: Expression) -> bool:
    """Return True if evaluating ``expr`` cannot have side effects.

    Strings, variables and combinators are pure, as are a combinator applied
    to a pure term, ``S`` applied to two pure terms, and anything delayed by ``D``.
    """
    if isinstance(expr, (String, Variable)) or is_combinator(expr):
        return True
    if not isinstance(expr, Application):
        return False
    lhs, rhs = expr.lhs, expr.rhs
    if isinstance(lhs, D):
        return True
    if is_combinator(lhs):
        return is_pure(rhs)
    if isinstance(lhs, Application) and isinstance(lhs.lhs, S):
        return is_pure(lhs.rhs) and is_pure(rhs)
    return False


def _apply_d(expr: Expression) -> Expression:
    return Application(D(), expr)


def preprocess(expr: Expression) -> Expression:
    """Wrap every abstraction, application and string in a thunk ``\\_.``.

    Applications ``f x`` become ``\\_.f I x I`` so that evaluation is delayed
    until the thunk is forced.
    """
    match expr:
        case Abstraction(name, body):
            return Abstraction("_", Abstraction(name, preprocess(body)))
        case Application(lhs, rhs):
            forced = Application(
                Application(Application(preprocess(lhs), I()), preprocess(rhs)),
                I(),
            )
            return Abstraction("_", forced)
        case String():
            return Abstraction("_", expr)
    return expr


def transform(expr: Expression) -> Expression:
    """Eliminate all abstractions from ``expr`` by bracket abstraction."""
    match expr:
        case Abstraction(name, Variable(var)) if var == name:
            return I()
        case Abstraction(name, body) if not mentions(body, name):
            constant = Application(K(), transform(body))
            return constant if is_pure(constant.rhs) else _apply_d(constant)
        case Abstraction(name, Application(lhs, rhs)):
            if not mentions(lhs, name) and isinstance(rhs, Variable) and rhs.name == name:
                function = transform(lhs)
                return function if is_pure(function) else _apply_d(function)
            return Application(
                Application(S(), transform(Abstraction(name, lhs))),
                transform(Abstraction(name, rhs)),
            )
        case Abstraction(name, Abstraction() as inner):
            return transform(Abstraction(name, transform(inner)))
        case Application(lhs, rhs):
            return Application(transform(lhs), transform(rhs))
        case Variable() | String() | S() | K() | I() | D():
            return expr
    raise ConversionError(
        "This point should never be reachable. Transformations exhausted: " + expr.format()
    )


def to_ski(expr: Expression) -> Expression:
    """Compile a lambda term into an abstraction-free combinator term."""
    return transform(preprocess(expr))