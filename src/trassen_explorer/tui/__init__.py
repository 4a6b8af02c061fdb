"""Terminal UI for Trassen Explorer."""

from .keys import KEY_BINDINGS, KeyAction, KeyBinding, resolve_key
from .navigation import (
    Command,
    LoadFailedError,
    LoadInfrastructure,
    Navigator,
    ReloadPicker,
)
from .state import ActiveList, MapState, PickerState, ViewState

__all__ = [
    "ActiveList",
    "Command",
    "KEY_BINDINGS",
    "KeyAction",
    "KeyBinding",
    "LoadFailedError",
    "LoadInfrastructure",
    "MapState",
    "Navigator",
    "PickerState",
    "ReloadPicker",
    "ViewState",
    "resolve_key",
]
