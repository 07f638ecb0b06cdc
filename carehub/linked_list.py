"""A singly linked list keyed optionally by a unique attribute."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class UniqueAttribute(ABC):
    """Something identified by a single string attribute."""

    @abstractmethod
    def uattr(self) -> str:
        """Return the value that identifies this object."""


@dataclass
class ListNode(Generic[T]):
    """One link of a LinkedList."""

    value: T
    next: Optional["ListNode[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list with insertion at the front."""

    def __init__(self, values: Optional[Any] = None) -> None:
        self.head: Optional[ListNode[T]] = None
        self.length = 0
        if values is not None:
            for value in values:
                self.push_front(value)

    def is_empty(self) -> bool:
        return self.head is None

    def push_front(self, value: T) -> None:
        self.head = ListNode(value, self.head)
        self.length += 1

    def insert(self, value: T) -> None:
        """Insert a value; same as push_front."""
        self.push_front(value)

    def pop(self) -> Optional[T]:
        """Remove and return the front value, or None if empty."""
        if self.head is None:
            return None
        node = self.head
        self.head = node.next
        self.length -= 1
        return node.value

    def display(self) -> str:
        """Print the list as ``a -> b -> None`` and return that text."""
        parts = [f"{value!r} -> " for value in self]
        parts.append("None")
        text = "".join(parts)
        print(text)
        return text

    def get_by_index(self, index: int) -> Optional[T]:
        if index < 0 or index >= self.length:
            return None
        for position, value in enumerate(self):
            if position == index:
                return value
        return None

    def get_by_uniq_attr(self, uniq_attr: str) -> Optional[T]:
        return next((value for value in self if value.uattr() == uniq_attr), None)

    def remove_last_node(self) -> Optional[T]:
        """Remove and return the last value, or None if empty."""
        if self.head is None:
            return None
        if self.head.next is None:
            return self.pop()
        second_last = self.head
        while second_last.next.next is not None:
            second_last = second_last.next
        last = second_last.next
        second_last.next = None
        self.length -= 1
        return last.value

    def _remove_first(self, predicate: Callable[[T], bool]) -> bool:
        previous: Optional[ListNode[T]] = None
        current = self.head
        while current is not None:
            if predicate(current.value):
                if previous is None:
                    self.head = current.next
                else:
                    previous.next = current.next
                self.length -= 1
                return True
            previous, current = current, current.next
        return False

    def remove_by_uniq_attr(self, uniq_attr: str) -> bool:
        """Remove the first value whose unique attribute matches."""
        return self._remove_first(lambda value: value.uattr() == uniq_attr)

    def remove(self, value: T) -> bool:
        """Remove the first value equal to ``value``."""
        return self._remove_first(lambda item: item == value)

    def reverse(self) -> None:
        previous: Optional[ListNode[T]] = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def __iter__(self) -> Iterator[T]:
        current = self.head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return self.length

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"