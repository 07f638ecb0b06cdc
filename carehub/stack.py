"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """LIFO stack; iteration runs from top to bottom."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> Optional[T]:
        """Remove and return the top value, or None if empty."""
        return self._items.pop() if self._items else None

    def peek(self) -> Optional[T]:
        """Return the top value without removing it, or None if empty."""
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"