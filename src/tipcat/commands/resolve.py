"""Shared option resolution for commands: which catalog, which format."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from tipcat.catalog import CatalogStore, load_catalog
from tipcat.config import find_project_root, resolve_setting
from tipcat.output.renderer import normalize_format, supported_formats

log = logging.getLogger(__name__)


def source_option(f):
    return click.option(
        '--source', '-s', default=None,
        type=click.Path(dir_okay=False),
        help='Tip file (.json, .md). Defaults to the built-in C# catalog.',
    )(f)


def format_option(f):
    return click.option(
        '--format', '-f', 'fmt', default=None,
        help=f"Output format: {', '.join(supported_formats())} (default: plain)",
    )(f)


def resolve_catalog(source: str | None) -> CatalogStore:
    """Load the catalog named on the CLI, by env-var, or in project config."""
    if source is not None:
        return load_catalog(source)
    root = find_project_root()
    configured = resolve_setting("source", None, root)
    if configured is None:
        return load_catalog(None)
    path = Path(configured)
    if not path.is_absolute():
        path = root / path
    log.debug("Using configured source %s", path)
    return load_catalog(path)


def resolve_format(fmt: str | None) -> str:
    return normalize_format(resolve_setting("format", fmt))
