"""Command-line interface for glyphpreview.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Render a named template to PNG or a data URL
- List templates of a local or remote source
- Inspect bounding boxes and planned transforms
"""

from glyphpreview.cli.app import cli, main

__all__ = ["cli", "main"]
