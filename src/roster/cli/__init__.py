"""
Command-line interface for person-roster.

Provides commands for building person records and exporting the roster.
"""

from .main import app, main

__all__ = ["main", "app"]
