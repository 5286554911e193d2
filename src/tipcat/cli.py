"""Click CLI entry point with lazy-loaded subcommands."""

from __future__ import annotations

import logging
import os
import sys

# Fix Unicode output on Windows consoles (cp1253, cp1252, etc.)
if sys.platform == "win32" and not os.environ.get("PYTHONIOENCODING"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

import click


# Lazy-loading command group: imports command modules only when invoked.
_COMMANDS = {
    "render":   ("tipcat.commands.cmd_render",  "render"),
    "show":     ("tipcat.commands.cmd_show",    "show"),
    "list":     ("tipcat.commands.cmd_list",    "list_cmd"),
    "formats":  ("tipcat.commands.cmd_formats", "formats"),
    "config":   ("tipcat.commands.cmd_config",  "config"),
}

# Command categories for organized --help display
_CATEGORIES = {
    "Output": ["render", "show", "list"],
    "Setup": ["formats", "config"],
}


class LazyGroup(click.Group):
    """A Click group that lazy-loads command modules on first access."""

    def list_commands(self, ctx):
        return sorted(_COMMANDS.keys())

    def get_command(self, ctx, cmd_name):
        if cmd_name not in _COMMANDS:
            return None
        module_path, attr_name = _COMMANDS[cmd_name]
        import importlib
        mod = importlib.import_module(module_path)
        return getattr(mod, attr_name)

    def invoke(self, ctx):
        """Map unexpected exceptions to EXIT_ERROR instead of a traceback.

        TipcatError subclasses carry their own exit_code and go through
        Click's ClickException handling untouched.
        """
        try:
            return super().invoke(ctx)
        except click.exceptions.Exit:
            raise
        except (click.Abort, click.ClickException, SystemExit):
            raise
        except Exception as exc:
            from tipcat.exit_codes import EXIT_ERROR
            logging.getLogger(__name__).debug("Unhandled error", exc_info=True)
            click.echo(f"Error: {exc}", err=True)
            ctx.exit(EXIT_ERROR)

    def format_help(self, ctx, formatter):
        """Categorized help display instead of flat alphabetical list."""
        self.format_usage(ctx, formatter)
        formatter.write("\n")
        if self.help:
            formatter.write(self.help + "\n\n")

        for cat_name, cmds in _CATEGORIES.items():
            formatter.write(f"  {cat_name}:\n")
            for cmd_name in cmds:
                cmd = self.get_command(ctx, cmd_name)
                if cmd is None:
                    continue
                help_text = cmd.get_short_help_str(limit=60)
                formatter.write(f"    {cmd_name:12s} {help_text}\n")
            formatter.write("\n")

        formatter.write("  Run `tipcat <command> --help` for details on any command.\n")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    logging.getLogger("tipcat").setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group(cls=LazyGroup)
@click.version_option(package_name="tipcat")
@click.option('--json', 'json_mode', is_flag=True, help='Wrap list/config/formats output in a JSON envelope')
@click.option('-v', '--verbose', is_flag=True, help='Log debug details to stderr')
@click.pass_context
def cli(ctx, json_mode, verbose):
    """tipcat: render a numbered catalog of language-idiom tips."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['json'] = json_mode
    ctx.obj['verbose'] = verbose
