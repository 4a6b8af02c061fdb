"""Shared Textual widgets for Trassen Explorer."""

from .breadcrumb import Breadcrumb
from .loading import LoadingSpinner
from .map_canvas import MapCanvas
from .selection_panel import SelectionPanel
from .status_bar import StatusBar

__all__ = ["Breadcrumb", "LoadingSpinner", "MapCanvas", "SelectionPanel", "StatusBar"]
