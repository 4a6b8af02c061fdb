"""Busy indication shown while an infrastructure loads."""

from textual.widgets import Static


class LoadingSpinner(Static):
    """Simple loading spinner widget."""

    DEFAULT_CSS = "LoadingSpinner { height: auto; }"

    def __init__(self, message: str = "", **kwargs):
        super().__init__(f"⏳ {message}" if message else "", **kwargs)

    def update_message(self, message: str):
        self.update(f"⏳ {message}")

    def set_done(self, message: str = ""):
        self.update(f"✅ {message}" if message else "")

    def set_error(self, message: str = "Error"):
        self.update(f"❌ {message}")
