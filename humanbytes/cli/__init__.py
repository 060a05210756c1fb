"""
CLI modules for humanbytes.

This package contains the command-line interface components
for the humanbytes tool.
"""

from humanbytes.cli.commands import cli

__all__ = ["cli"]
