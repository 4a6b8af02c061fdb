"""Shared base for screens that render a navigator view state."""

from __future__ import annotations

from textual.screen import Screen

from ..widgets import Breadcrumb, LoadingSpinner, StatusBar


class ViewScreen(Screen):
    """Screen that redraws itself from the app's current view state."""

    def on_mount(self) -> None:
        self.set_api_state(self.app.api_state)
        self.refresh_view()

    def refresh_view(self) -> None:
        raise NotImplementedError

    def set_loading(self, message: str = "") -> None:
        spinner = self.query_one("#loading", LoadingSpinner)
        status_bar = self.query_one("#status-bar", StatusBar)
        if message:
            spinner.update_message(message)
        else:
            spinner.set_done()
        status_bar.loading = bool(message)

    def set_error(self, message: str) -> None:
        self.query_one("#loading", LoadingSpinner).set_error(message)
        status_bar = self.query_one("#status-bar", StatusBar)
        status_bar.loading = False

    def set_api_state(self, state: str) -> None:
        self.query_one("#status-bar", StatusBar).api_state = state

    def breadcrumb(self) -> Breadcrumb:
        return self.query_one("#breadcrumb", Breadcrumb)
