"""Command-line interface for waterfront.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Seeded, reproducible generation
- Closing a supplied waterline instead of generating one
- Verbose/quiet output modes
- JSON output of the polygon and, optionally, the waterline
"""

from waterfront.cli.app import cli

__all__ = ["cli"]
