"""A minimal interactive shell, with helpers for strings, character tests, output and line reading."""

__version__ = "0.1.0"