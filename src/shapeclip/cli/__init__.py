"""Command-line interface for shapeclip.

This module provides the CLI using Typer with rich output.

Key features:
- clip / hull / overlap operations on JSON shape files
- SVG or JSON output at a chosen precision
- Polygon summary tables
- Quiet output for scripting
"""

from shapeclip.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
