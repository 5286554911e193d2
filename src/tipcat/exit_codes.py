"""Standardized exit codes and the exceptions that carry them.

Every tipcat error is a ``click.ClickException`` so the CLI prints
``Error: <message>`` and exits with the error's own code, while library
callers can catch the specific class.

  0  success
  1  unexpected error
  2  usage error (click)
  3  invalid catalog input
  4  unknown ordinal / missing source
  5  unsupported render format
"""

from __future__ import annotations

import sys

import click

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_VALIDATION = 3
EXIT_NOT_FOUND = 4
EXIT_UNSUPPORTED_FORMAT = 5

DESCRIPTIONS = {
    EXIT_SUCCESS: "Success",
    EXIT_ERROR: "Unexpected error",
    EXIT_USAGE: "Invalid command-line usage",
    EXIT_VALIDATION: "Catalog input is malformed",
    EXIT_NOT_FOUND: "Requested tip or source does not exist",
    EXIT_UNSUPPORTED_FORMAT: "Render format is not recognized",
}


def exit_with(code: int, message: str | None = None):
    """Print *message* to stderr (if any) and exit with *code*."""
    if message:
        click.echo(message, err=True)
    sys.exit(code)


class TipcatError(click.ClickException):
    """Base error with a configurable exit code."""

    exit_code = EXIT_ERROR

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ValidationError(TipcatError):
    """Catalog input is empty, has duplicate ordinals, or a bad record."""

    exit_code = EXIT_VALIDATION


class NotFoundError(TipcatError):
    """No entry with the requested ordinal, or the source file is missing."""

    exit_code = EXIT_NOT_FOUND


class UnsupportedFormatError(TipcatError):
    """The requested render format is not one the renderer knows."""

    exit_code = EXIT_UNSUPPORTED_FORMAT

    def __init__(self, fmt: str, supported: tuple[str, ...] = ()):
        self.fmt = fmt
        msg = f"unsupported format {fmt!r}"
        if supported:
            msg += f" (choose from: {', '.join(supported)})"
        super().__init__(msg)
