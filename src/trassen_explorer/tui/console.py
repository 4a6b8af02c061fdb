"""Trassen Explorer console for output outside the TUI."""

from rich.console import Console

console = Console(stderr=True)
