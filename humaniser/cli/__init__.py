# humaniser/cli/__init__.py
"""Command line interface for humaniser"""

from .main import cli, main

__all__ = ["cli", "main"]
