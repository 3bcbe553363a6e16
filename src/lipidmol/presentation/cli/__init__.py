"""Command-line interface modules."""

from .lipidmol_cli import main as lipidmol_main

__all__ = [
    "lipidmol_main",
]
