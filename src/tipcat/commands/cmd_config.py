"""Manage per-project tipcat configuration (.tipcat/config.json)."""

from __future__ import annotations

import click

from tipcat.config import (
    DEFAULT_FORMAT,
    find_project_root,
    get_config_path,
    load_project_config,
    write_project_config,
)
from tipcat.output.formatter import json_envelope, to_json
from tipcat.output.renderer import normalize_format


@click.command("config")
@click.option("--set-format", "fmt", default=None,
              help="Default output format for render and show.")
@click.option("--set-source", "source", default=None,
              type=click.Path(dir_okay=False),
              help="Default tip file (relative paths resolve from the project root).")
@click.option("--show", is_flag=True, help="Print current configuration.")
@click.pass_context
def config(ctx, fmt, source, show):
    """Manage per-project tipcat configuration (.tipcat/config.json).

    \b
      tipcat config --set-format markdown
      tipcat config --set-source docs/tips.md

    The ``TIPCAT_FORMAT`` and ``TIPCAT_SOURCE`` env-vars override saved
    values; command-line options override both.
    """
    json_mode = ctx.obj.get("json") if ctx.obj else False
    root = find_project_root()

    updates = {}
    if fmt is not None:
        updates["format"] = normalize_format(fmt)
    if source is not None:
        updates["source"] = source

    if updates:
        config_path = write_project_config(updates, root)
        if json_mode:
            click.echo(to_json(json_envelope("config",
                summary={"verdict": "saved", **updates},
                config_path=str(config_path),
            )))
            return
        for k, v in updates.items():
            click.echo(f"Saved {k} = {v!r}")
        click.echo(f"Config written to {config_path}")
        if not show:
            return

    current = load_project_config(root)
    if json_mode:
        click.echo(to_json(json_envelope("config",
            summary={"verdict": "ok"},
            **current,
        )))
        return
    if not current:
        click.echo("No .tipcat/config.json found (using defaults).")
        click.echo(f"Default format: {DEFAULT_FORMAT}; source: built-in catalog")
        return
    click.echo(f"Config: {get_config_path(root)}")
    for k, v in current.items():
        click.echo(f"  {k} = {v!r}")
