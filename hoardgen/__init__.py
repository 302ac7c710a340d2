"""Treasure hoard generator for Old-School Essentials style games."""

__version__ = "0.1.0"
