"""Compile a small lambda-calculus language into SKI combinators and Unlambda."""

__version__ = "0.0.1"
__all__ = ["ast", "parser", "converter", "cli"]