"""Command-line interface."""

from pixtasm.cli.app import create_app
from pixtasm.cli.main import main

__all__ = ["create_app", "main"]
