"""Allow ``python -m tipcat``."""

from tipcat.cli import cli

if __name__ == "__main__":
    cli()
