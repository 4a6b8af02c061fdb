"""Status bar widget for Textual screens."""

from __future__ import annotations

from textual.reactive import reactive
from textual.widgets import Static


def _badge(label: str, state: str) -> str:
    palette = {
        "ok": "green",
        "warn": "yellow",
        "error": "red",
        "unknown": "grey66",
    }
    color = palette.get(state, "grey66")
    return f"[{color}]●[/{color}] {label}"


class StatusBar(Static):
    """Compact badges for API health, loading and the active list."""

    api_state = reactive("unknown")
    loading = reactive(False)
    active_list = reactive("")

    def _badges(self) -> str:
        parts = [
            _badge("API", self.api_state),
            _badge("Loading" if self.loading else "Idle", "warn" if self.loading else "ok"),
        ]
        if self.active_list:
            parts.append(f"[bold]Active:[/bold] {self.active_list}")
        return "   ".join(parts)

    def on_mount(self) -> None:
        self.update(self._badges())

    def watch_api_state(self) -> None:
        self.update(self._badges())

    def watch_loading(self) -> None:
        self.update(self._badges())

    def watch_active_list(self) -> None:
        self.update(self._badges())
