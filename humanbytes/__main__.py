#!/usr/bin/env python
"""
Command-line runner for humanbytes.

This script is installed as the 'humanbytes' command when the package is installed.
"""

from humanbytes.cli import cli

if __name__ == '__main__':
    cli()
