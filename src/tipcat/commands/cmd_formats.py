"""List the render formats."""

import click

from tipcat.output.formatter import json_envelope, to_json
from tipcat.output.renderer import supported_formats

_DESCRIPTIONS = {
    "plain": "numbered blocks, no heading markup",
    "markdown": "## headings and language-tagged fenced blocks",
    "json": "array of tip objects",
}


@click.command()
@click.pass_context
def formats(ctx):
    """List supported output formats."""
    names = supported_formats()
    if ctx.obj and ctx.obj.get("json"):
        click.echo(to_json(json_envelope("formats",
            summary={"count": len(names)},
            formats=list(names),
        )))
        return
    for name in names:
        click.echo(f"  {name:10s} {_DESCRIPTIONS.get(name, '')}")
