"""Entry point for ``python -m bentoctl``."""

from bentoctl.cli import cli

if __name__ == "__main__":
    cli()
