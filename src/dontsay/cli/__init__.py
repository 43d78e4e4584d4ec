"""Don't Say N! CLI module.

Provides a Textual-based terminal interface for playing Don't Say N!.

Usage:
    dontsay

Or directly:
    python -m dontsay.cli.app
"""

from dontsay.cli.app import DontSayApp, main

__all__ = ["DontSayApp", "main"]
