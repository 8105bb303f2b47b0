# relambda

relambda compiles a small lambda-calculus language into Unlambda
programs. Bracket abstraction removes lambda abstractions and leaves the
combinators `S`, `K` and `I` and the Unlambda delay combinator `D`.

## Installation

```
pip install .
```

## The language

A source file holds a list of definitions:

```
let id = \x.x
let main = id "a"
```

- Identifiers start with a letter or an underscore. Letters, digits or
  underscores follow. `let` is reserved.
- `\x.body` is an abstraction. Its body reaches as far right as possible.
- Juxtaposition is application and associates to the left: `f x y` is `(f x) y`.
- Parentheses group expressions.
- `"..."` is a string literal of printable ASCII characters. It may use the
  escapes `\"`, `\\` and `\n`. Unlambda output supports only strings of
  one character, which are written as `.c`.
- Whitespace between tokens is ignored.
- Parsing stops after the last definition that can be read. Anything that
  follows it is ignored.

Every name used must be defined. A name may not be defined twice. A
definition may not refer to itself. There must be a definition called
`main`.

## Usage

```
relambda program.lam
```

This prints the Unlambda program for `main`. Other definitions are
inlined where they are referenced.

If you give exactly one extra argument, whatever it is, the result is
printed in combinator notation and not as Unlambda:

```
relambda program.lam ski
```

You can also run the command as `python -m relambda.cli`.

Errors are reported on standard error. These include a missing filename,
an unreadable file, parse errors, duplicate, undefined or self-referring
names, a missing `main`, and output that Unlambda cannot express. The exit
status is 1 for a missing filename, a file that cannot be read, a parse
error or a formatting error. When the program fails the checks on its
definitions, the messages are printed and the exit status is 0.

## Library use

```python
from relambda.parser import parse_string_expression, parse_definitions
from relambda.converter import to_ski
from relambda.cli import translate

expr = parse_string_expression(r"\x.x x")
print(expr.format())            # \x.x x
print(to_ski(expr).format())    # combinator form

defs = parse_definitions('let main = (\\x.x) "a"')
print(translate(defs, False))   # Unlambda source
```

- `relambda.ast` defines the expression tree: `Variable`, `Application`,
  `Abstraction`, `String`, the combinators `S`, `K`, `I` and `D`, and
  `Definition`. Every expression has `format()` and `format_unlambda(env)`.
  `format_unlambda` raises `FormatError` for abstractions, for strings
  that are not one character long and for undefined names.
- `relambda.parser` provides `parse_definitions`, `parse_string_expression`
  and `parse_file`. They raise `ParseError` on bad input, with `line` and
  `column` attributes.
- `relambda.converter` provides `to_ski`, as well as its steps `preprocess` and
  `transform` and the helpers `mentions` and `is_pure`. It raises
  `ConversionError` if a term cannot be reduced.
- `relambda.cli` provides `translate`, `missing_names` and `main`.
  `translate` raises `TranslationError` when a program fails its checks.
  The error's `messages` attribute lists every problem found.

## Output

Unlambda writes application as a prefix backquote: `` `fx `` applies `f` to
`x`. The combinators appear as `s`, `k`, `i` and `d`.

## Limitations

- Recursive definitions are rejected. A definition may not name itself.
- Strings can be emitted as Unlambda only when they hold a single
  character.
- The package compiles programs. It does not run them: there is no
  Unlambda interpreter.

## Running the tests

```
pip install .[test]
pytest
```