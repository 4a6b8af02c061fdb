"""Symbolic key actions and the raw-key registry that produces them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class KeyAction(str, Enum):
    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    BACK = "back"
    SWITCH_TO_STATIONS = "switch_to_stations"
    SWITCH_TO_SEGMENTS = "switch_to_segments"
    QUIT = "quit"
    OTHER = "other"


@dataclass(frozen=True)
class KeyBinding:
    """Maps one textual key name onto a symbolic action."""

    key: str
    action: KeyAction
    label: str
    show: bool = True


KEY_BINDINGS: Tuple[KeyBinding, ...] = (
    KeyBinding("up", KeyAction.UP, "Up"),
    KeyBinding("k", KeyAction.UP, "Up", show=False),
    KeyBinding("down", KeyAction.DOWN, "Down"),
    KeyBinding("j", KeyAction.DOWN, "Down", show=False),
    KeyBinding("enter", KeyAction.CONFIRM, "Open"),
    KeyBinding("escape", KeyAction.BACK, "Back"),
    KeyBinding("b", KeyAction.SWITCH_TO_STATIONS, "Stations"),
    KeyBinding("s", KeyAction.SWITCH_TO_SEGMENTS, "Segments"),
    KeyBinding("q", KeyAction.QUIT, "Quit"),
)

KEY_MAP: Dict[str, KeyAction] = {binding.key: binding.action for binding in KEY_BINDINGS}


def resolve_key(key: str) -> KeyAction:
    """Translate a raw key name into its action, ``OTHER`` when unbound."""
    return KEY_MAP.get(key, KeyAction.OTHER)
