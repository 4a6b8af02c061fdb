"""Textual screen modules for Trassen Explorer."""

from .base import ViewScreen
from .map import MapScreen
from .picker import PickerScreen

__all__ = ["MapScreen", "PickerScreen", "ViewScreen"]
