"""List tip ordinals and titles."""

import click

from tipcat.commands.resolve import resolve_catalog, source_option
from tipcat.output.formatter import format_table, json_envelope, to_json, truncate


@click.command("list")
@source_option
@click.option('-n', 'count', default=0, type=click.IntRange(min=0), help='Show at most N tips (0 = all)')
@click.pass_context
def list_cmd(ctx, source, count):
    """List tip numbers and titles."""
    json_mode = ctx.obj.get("json") if ctx.obj else False
    store = resolve_catalog(source)

    if json_mode:
        entries = store.all()[:count] if count else store.all()
        click.echo(to_json(json_envelope("list",
            summary={"total": len(store), "shown": len(entries)},
            tips=[{"ordinal": e.ordinal, "title": e.title} for e in entries],
        )))
        return

    rows = [[str(e.ordinal), truncate(e.title)] for e in store]
    click.echo(f"=== Tips ({len(store)}) ===")
    click.echo(format_table(["#", "Title"], rows, budget=count))
