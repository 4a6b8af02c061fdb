"""Bordered list panel rendering one selection list."""

from __future__ import annotations

from typing import List, Optional, Sequence

from rich.text import Text
from textual.widget import Widget

from ..canvas import window_lines


class SelectionPanel(Widget):
    """Windowed list with the selected row in bold; accented while active."""

    DEFAULT_CSS = """
    SelectionPanel {
        border: round $panel-lighten-2;
        height: 1fr;
        padding: 0 1;
    }

    SelectionPanel.-active {
        border: round $accent;
    }
    """

    def __init__(self, title: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.border_title = title
        self._labels: List[str] = []
        self._selected: Optional[int] = None

    @property
    def labels(self) -> List[str]:
        return list(self._labels)

    @property
    def selected(self) -> Optional[int]:
        return self._selected

    def show(self, labels: Sequence[str], selected: Optional[int], active: bool = True) -> None:
        self._labels = list(labels)
        self._selected = selected
        self.set_class(active, "-active")
        self.border_subtitle = f"{selected + 1}/{len(labels)}" if selected is not None else ""
        self.refresh()

    def render(self) -> Text:
        height = self.content_size.height
        text = Text(no_wrap=True, overflow="ellipsis")
        rows = window_lines(self._labels, self._selected, height)
        for position, (index, label) in enumerate(rows):
            if index == self._selected:
                text.append(f"> {label}", style="bold")
            else:
                text.append(f"  {label}")
            if position < len(rows) - 1:
                text.append("\n")
        return text
