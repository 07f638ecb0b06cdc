"""A bounded binary max-heap."""

from __future__ import annotations

from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")

MAX_HEAP_SIZE = 100


class HeapOverflowError(OverflowError):
    """Raised when pushing onto a heap that is already full."""


class MaxHeap(Generic[T]):
    """Binary max-heap with a fixed capacity; the largest value comes out first."""

    def __init__(self, capacity: int = MAX_HEAP_SIZE) -> None:
        self.capacity = capacity
        self._data: list[T] = []

    def push(self, value: T) -> None:
        """Add a value, raising HeapOverflowError when the heap is full."""
        if len(self._data) >= self.capacity:
            raise HeapOverflowError("Heap overflow!")
        self._data.append(value)
        self.bubble_up(len(self._data) - 1)

    def pop(self) -> Optional[T]:
        """Remove and return the largest value, or None if empty."""
        if not self._data:
            return None
        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self.bubble_down(0)
        return top

    def peek(self) -> Optional[T]:
        """Return the largest value without removing it, or None if empty."""
        return self._data[0] if self._data else None

    def bubble_up(self, index: int) -> None:
        """Move the value at ``index`` up until its parent is not smaller."""
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if data[index] > data[parent]:
                data[index], data[parent] = data[parent], data[index]
                index = parent
            else:
                break

    def bubble_down(self, index: int) -> None:
        """Move the value at ``index`` down until no child is larger."""
        data = self._data
        size = len(data)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and data[child] > data[largest]:
                    largest = child
            if largest == index:
                break
            data[index], data[largest] = data[largest], data[index]
            index = largest

    def is_empty(self) -> bool:
        return not self._data

    def get_by_uniq_attr(self, uniq_attr: str) -> Optional[T]:
        """Return the first stored value whose unique attribute matches."""
        return next((value for value in self._data if value.uattr() == uniq_attr), None)

    def _remove_at(self, index: int) -> T:
        removed = self._data[index]
        last = self._data.pop()
        if index < len(self._data):
            self._data[index] = last
            self.bubble_up(index)
            self.bubble_down(index)
        return removed

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __getstate__(self) -> dict[str, Any]:
        return {"capacity": self.capacity, "data": list(self._data)}

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.capacity = state["capacity"]
        self._data = list(state["data"])[: self.capacity]

    def __repr__(self) -> str:
        return f"MaxHeap({self._data!r})"