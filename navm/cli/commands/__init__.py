# navm/cli/commands/__init__.py
"""CLI command implementations, imported lazily by navm.cli.cli."""
