"""
navm CLI.

Usage:
    navm parse "sav memory ./mem.nal"
    navm decode outputs.json
    navm repl --text
    navm launchers
"""

from navm.cli.cli import app

__all__ = ["app"]
