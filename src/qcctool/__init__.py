"""Command-line option scanning and subcommand dispatch for a crypto demo tool."""

__version__ = "0.1.0"
