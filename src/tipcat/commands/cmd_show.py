"""Show a single tip by ordinal."""

import click

from tipcat.commands.resolve import (
    format_option,
    resolve_catalog,
    resolve_format,
    source_option,
)
from tipcat.output.renderer import render_one


@click.command()
@click.argument('ordinal', type=int)
@format_option
@source_option
def show(ordinal, fmt, source):
    """Show one tip by its number."""
    fmt = resolve_format(fmt)
    entry = resolve_catalog(source).get(ordinal)
    click.echo(render_one(entry, fmt), nl=False)
