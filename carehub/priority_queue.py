"""A min-priority queue built on MaxHeap."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

from carehub.max_heap import MAX_HEAP_SIZE, MaxHeap

T = TypeVar("T")


class _Reversed(Generic[T]):
    """Wraps an item so that heap order is inverted."""

    __slots__ = ("item",)

    def __init__(self, item: T) -> None:
        self.item = item

    def __gt__(self, other: "_Reversed[T]") -> bool:
        return other.item > self.item

    def __lt__(self, other: "_Reversed[T]") -> bool:
        return other.item < self.item

    def __getstate__(self):
        return self.item

    def __setstate__(self, state) -> None:
        self.item = state

    def __repr__(self) -> str:
        return f"_Reversed({self.item!r})"


class PriorityQueue(Generic[T]):
    """Queue that hands out the smallest item first."""

    def __init__(self, capacity: int = MAX_HEAP_SIZE) -> None:
        self._heap: MaxHeap[_Reversed[T]] = MaxHeap(capacity)

    def push(self, item: T) -> None:
        """Add an item; raises HeapOverflowError when full."""
        self._heap.push(_Reversed(item))

    def insert(self, item: T) -> None:
        """Same as push."""
        self.push(item)

    def pop(self) -> Optional[T]:
        """Remove and return the smallest item, or None if empty."""
        wrapped = self._heap.pop()
        return None if wrapped is None else wrapped.item

    def peek(self) -> Optional[T]:
        """Return the smallest item without removing it, or None if empty."""
        wrapped = self._heap.peek()
        return None if wrapped is None else wrapped.item

    def is_empty(self) -> bool:
        return self._heap.is_empty()

    def get_by_uniq_attr(self, uniq_attr: str) -> Optional[T]:
        """Return the first item whose unique attribute matches."""
        return next((item for item in self if item.uattr() == uniq_attr), None)

    def remove_by_uniq_attr(self, uniq_attr: str) -> bool:
        """Remove the first item whose unique attribute matches."""
        for index, wrapped in enumerate(self._heap):
            if wrapped.item.uattr() == uniq_attr:
                self._heap._remove_at(index)
                return True
        return False

    def __iter__(self) -> Iterator[T]:
        return (wrapped.item for wrapped in self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue({list(self)!r})"