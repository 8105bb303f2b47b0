"""Command-line compiler from lambda definitions to Unlambda."""

from __future__ import annotations

import sys
from collections.abc import Sequence, Set

from relambda.ast import (
    Abstraction,
    Application,
    Definition,
    Expression,
    FormatError,
    String,
    Variable,
)
from relambda.converter import to_ski
from relambda.parser import parse_file


class TranslationError(Exception):
    """Raised when a set of definitions cannot be translated."""

    def __init__(self, messages: Sequence[str]) -> None:
        super().__init__("\n".join(messages))
        self.messages = list(messages)


def missing_names(expr: Expression, bound: Set[str] = frozenset()) -> list[str]:
    """Return the names used in ``expr`` that are not bound, in order of use."""
    match expr:
        case Variable(name):
            return [] if name in bound else [name]
        case Application(lhs, rhs):
            return missing_names(lhs, bound) + missing_names(rhs, bound)
        case Abstraction(name, body):
            return missing_names(body, bound | {name})
        case String():
            return []
    raise TypeError("unexpected ast node")


def translate(definitions: Sequence[Definition], do_ski: bool) -> str:
    """Compile ``definitions`` and render the ``main`` definition.

    With ``do_ski`` the combinator term is returned in SKI notation,
    otherwise as Unlambda source with other definitions inlined.
    """
    if not definitions:
        return ""

    report: dict[str, list[str]] = {}
    compiled: list[Definition] = []
    for definition in definitions:
        if definition.name in report:
            raise TranslationError(
                [f'multiple definitions for "{definition.name}" detected.']
            )
        report[definition.name] = missing_names(definition.value, frozenset())
        compiled.append(Definition(definition.name, to_ski(definition.value)))

    problems: list[str] = []
    for def_name, names in report.items():
        for name in names:
            if name not in report:
                problems.append(f"undefined name: {name}")
            if name == def_name:
                problems.append(f"circular dependencies not yet allowed for: {name}")
    if problems:
        raise TranslationError(problems)

    main_definition = next((d for d in compiled if d.name == "main"), None)
    if main_definition is None:
        raise TranslationError(["no main detected"])
    if do_ski:
        return main_definition.value.format()
    return main_definition.value.format_unlambda(compiled)


_FILE_ERRORS = (
    (FileNotFoundError, "file_not_found"),
    (PermissionError, "permission_denied"),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Compile the file named by the first argument; a second argument selects SKI output."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("must provide a filename", file=sys.stderr)
        return 1

    try:
        definitions = parse_file(args[0])
    except OSError as error:
        kind = next((label for cls, label in _FILE_ERRORS if isinstance(error, cls)), "os_error")
        print(f"reading file failed: {kind}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    try:
        result = translate(definitions, len(args) == 2)
    except TranslationError as error:
        for message in error.messages:
            print(message, file=sys.stderr)
        return 0
    except FormatError as error:
        print(error, file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())