"""CLI entry point for isvalid."""

from . import cli as cli_module


def run() -> None:
    """Entry point for the isvalid CLI."""
    cli_module.cli()
