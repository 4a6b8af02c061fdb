"""Textual-based TUI runtime for Trassen Explorer."""

from __future__ import annotations

import asyncio
from typing import Iterable, Optional

from textual.app import App
from textual.binding import Binding

from ..config import settings
from ..services.error_mapper import map_exception
from ..services.schemas import InfrastructureSummary
from .contracts import InfrastructureSource
from .keys import KEY_BINDINGS, KeyAction, resolve_key
from .logging import log_tui_event
from .navigation import Command, LoadInfrastructure, Navigator
from .screens import MapScreen, PickerScreen, ViewScreen
from .state import MapState

_LOADING_MESSAGES = {
    LoadInfrastructure: "Loading infrastructure...",
}


def _loading_message(command: Command) -> str:
    return _LOADING_MESSAGES.get(type(command), "Loading infrastructures...")


class ExplorerApp(App[None]):
    """Interactive explorer: pick an infrastructure, then browse its map."""

    TITLE = settings.app_name

    CSS = """
    #breadcrumb {
        padding: 0 1;
    }

    #status-bar {
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding(
            binding.key,
            f"handle_key('{binding.key}')",
            binding.label,
            show=binding.show,
            priority=True,
        )
        for binding in KEY_BINDINGS
    ]

    def __init__(
        self,
        *,
        source: Optional[InfrastructureSource] = None,
        summaries: Iterable[InfrastructureSummary] = (),
    ) -> None:
        super().__init__()
        if source is None:
            from ..services.infrastructure_client import InfrastructureClient

            source = InfrastructureClient()
        self._source = source
        self.navigator = Navigator(source, summaries)
        self.api_state = "ok" if len(self.navigator.state.summaries) else "unknown"
        self._load_task: Optional[asyncio.Task] = None

    @property
    def load_task(self) -> Optional[asyncio.Task]:
        return self._load_task

    def on_mount(self) -> None:
        self.push_screen(PickerScreen())
        log_tui_event("app_started", infrastructures=len(self.navigator.state.summaries))

    def _view_screen(self) -> Optional[ViewScreen]:
        screen = self.screen
        return screen if isinstance(screen, ViewScreen) else None

    def _sync_view(self) -> None:
        """Swap screens when the view variant changed, else redraw the current one."""
        wants_map = isinstance(self.navigator.state, MapState)
        screen = self._view_screen()
        if screen is None:
            return
        if wants_map != isinstance(screen, MapScreen):
            self.switch_screen(MapScreen() if wants_map else PickerScreen())
            return
        screen.refresh_view()

    def action_handle_key(self, key: str) -> None:
        action = resolve_key(key)
        log_tui_event("key_pressed", key=key, action=action.value)
        if action is KeyAction.QUIT:
            log_tui_event("quit")
            self.exit()
            return

        command = self.navigator.handle_key(action)
        if command is not None:
            log_tui_event("load_requested", command=repr(command))
            self._load_task = asyncio.create_task(self._run_command(command))
        self._sync_view()

    async def _run_command(self, command: Command) -> None:
        screen = self._view_screen()
        if screen is not None:
            screen.set_loading(_loading_message(command))
        try:
            await self.navigator.execute(command)
        except Exception as exc:
            mapped = map_exception(exc)
            self.api_state = "error" if mapped.retryable else "warn"
            log_tui_event("load_failed", code=mapped.code, message=mapped.message)
            screen = self._view_screen()
            if screen is not None:
                screen.set_error(mapped.message)
                screen.set_api_state(self.api_state)
            self.notify(
                f"{mapped.message} {mapped.hint}".strip(),
                title="Load failed",
                severity="error",
            )
            return

        self.api_state = "ok"
        log_tui_event("view_changed", view=type(self.navigator.state).__name__)
        screen = self._view_screen()
        if screen is not None:
            screen.set_loading("")
            screen.set_api_state(self.api_state)
        self._sync_view()
