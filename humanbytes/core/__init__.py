"""Conversion engine: unit table, caches, formatter, parser."""
