"""Infrastructure picker screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.widgets import Footer

from ..state import PickerState
from ..widgets import Breadcrumb, LoadingSpinner, SelectionPanel, StatusBar
from .base import ViewScreen


class PickerScreen(ViewScreen):
    """Centered list of available infrastructure versions."""

    DEFAULT_CSS = """
    PickerScreen {
        align: center middle;
    }

    #picker-body {
        width: 60%;
        height: 60%;
    }
    """

    def compose(self) -> ComposeResult:
        with Container(id="picker-body"):
            with Vertical():
                yield Breadcrumb(id="breadcrumb")
                yield SelectionPanel("Infrastructures", id="infrastructures")
                yield LoadingSpinner(id="loading")
                yield StatusBar(id="status-bar")
        yield Footer()

    def refresh_view(self) -> None:
        state = self.app.navigator.state
        if not isinstance(state, PickerState):
            return
        panel = self.query_one("#infrastructures", SelectionPanel)
        panel.show(state.labels(), state.summaries.selected)
        self.breadcrumb().show_picker()
        self.query_one("#status-bar", StatusBar).active_list = ""
