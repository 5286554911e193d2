"""Render the whole catalog in one format."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from tipcat.commands.resolve import (
    format_option,
    resolve_catalog,
    resolve_format,
    source_option,
)
from tipcat.output.renderer import render_all

log = logging.getLogger(__name__)


@click.command()
@format_option
@source_option
@click.option('--title', '-t', default=None,
              help='Document title above the tips (plain and markdown only)')
@click.option('--output', '-o', 'output_path', default=None,
              type=click.Path(dir_okay=False, writable=True),
              help='Write to this file instead of stdout')
def render(fmt, source, title, output_path):
    """Render every tip in ordinal order."""
    fmt = resolve_format(fmt)
    store = resolve_catalog(source)
    text = render_all(store, fmt, title=title)

    if output_path:
        Path(output_path).write_text(text, encoding="utf-8")
        log.debug("Wrote %d bytes to %s", len(text), output_path)
        click.echo(f"Wrote {len(store)} tips to {output_path}", err=True)
        return
    click.echo(text, nl=False)
