"""Breadcrumb showing where the user is in the explorer."""

from __future__ import annotations

from typing import Optional

from textual.reactive import reactive
from textual.widgets import Static

ROOT_LABEL = "Infrastructures"
SEPARATOR = " > "


def format_trail(infrastructure_id: Optional[int] = None, name: str = "") -> str:
    """``Infrastructures`` on the picker, ``Infrastructures > id: name`` on a map."""
    if infrastructure_id is None:
        return ROOT_LABEL
    return f"{ROOT_LABEL}{SEPARATOR}{infrastructure_id}: {name}"


class Breadcrumb(Static):
    """One-line trail from the infrastructure list to the open map."""

    trail = reactive(ROOT_LABEL)

    def show_picker(self) -> None:
        self.trail = format_trail()

    def show_infrastructure(self, infrastructure_id: int, name: str) -> None:
        self.trail = format_trail(infrastructure_id, name)

    def watch_trail(self, trail: str) -> None:
        self.update(f"[dim]{trail}[/dim]")

    def on_mount(self) -> None:
        self.update(f"[dim]{self.trail}[/dim]")
