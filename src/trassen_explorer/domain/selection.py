"""Ordered single-selection list used by every navigable panel."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")


class SelectionList(Generic[T]):
    """
    Immutable item sequence with one optional highlighted index.

    ``selected`` is ``None`` only when the list is empty or the selection was
    cleared; moving in either direction from a cleared selection lands on 0.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: Tuple[T, ...] = tuple(items)
        self._selected: Optional[int] = 0 if self._items else None

    @property
    def items(self) -> Tuple[T, ...]:
        return self._items

    @property
    def selected(self) -> Optional[int]:
        return self._selected

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __repr__(self) -> str:
        return f"SelectionList(len={len(self._items)}, selected={self._selected})"

    def move_up(self) -> None:
        if not self._items:
            self._selected = None
        elif self._selected is None:
            self._selected = 0
        elif self._selected > 0:
            self._selected -= 1

    def move_down(self) -> None:
        if not self._items:
            self._selected = None
        elif self._selected is None:
            self._selected = 0
        elif self._selected < len(self._items) - 1:
            self._selected += 1

    def select(self, index: int) -> None:
        """Select ``index``, clamped into the valid range."""
        if not self._items:
            self._selected = None
            return
        self._selected = max(0, min(index, len(self._items) - 1))

    def clear(self) -> None:
        self._selected = None

    def selected_item(self) -> Optional[T]:
        if self._selected is None:
            return None
        return self._items[self._selected]
