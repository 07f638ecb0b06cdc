"""An unbalanced binary search tree with on-demand rebalancing."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

from carehub.entities import Drug

T = TypeVar("T")


@dataclass(eq=False)
class TreeNode(Generic[T]):
    """Root of a (sub)tree; values are kept unique under their ordering."""

    value: T
    left: Optional["TreeNode[T]"] = None
    right: Optional["TreeNode[T]"] = None

    def insert(self, new_value: T) -> None:
        """Add a value; a value equal to one already present is ignored."""
        node = self
        while True:
            if new_value < node.value:
                if node.left is None:
                    node.left = TreeNode(new_value)
                    return
                node = node.left
            elif new_value > node.value:
                if node.right is None:
                    node.right = TreeNode(new_value)
                    return
                node = node.right
            else:
                return

    def __contains__(self, target: object) -> bool:
        node: Optional[TreeNode[T]] = self
        while node is not None:
            if target == node.value:
                return True
            node = node.left if target < node.value else node.right
        return False

    def get_by_uniq_attr(self, uniq_attr: str) -> Optional[T]:
        """Find a value by its unique attribute, following the tree order."""
        node: Optional[TreeNode[T]] = self
        while node is not None:
            key = node.value.uattr()
            if key == uniq_attr:
                return node.value
            node = node.left if uniq_attr < key else node.right
        return None

    def max(self) -> T:
        node = self
        while node.right is not None:
            node = node.right
        return node.value

    def __iter__(self) -> Iterator[T]:
        stack: list[TreeNode[T]] = []
        node: Optional[TreeNode[T]] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def in_order(self) -> list[T]:
        """Return all values in ascending order."""
        return list(self)

    def balance(self) -> None:
        """Rebuild this tree in place so that it is height-balanced."""
        values = self.in_order()
        rebuilt = _build_balanced(values, 0, len(values))
        self.value, self.left, self.right = rebuilt.value, rebuilt.left, rebuilt.right

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        level = [self]
        depth = 0
        while level:
            depth += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return depth

    def get_drug_by_id(self, drug_id: int) -> Optional[Drug]:
        """Find a drug by id in a tree of drugs ordered by id."""
        node: Optional[TreeNode[Drug]] = self
        while node is not None:
            if node.value.id == drug_id:
                return node.value
            node = node.left if drug_id < node.value.id else node.right
        return None

    def get_drug_by_name(self, name: str) -> Optional[Drug]:
        """Find a drug by name with a breadth-first scan."""
        queue: deque[TreeNode[Drug]] = deque([self])
        while queue:
            node = queue.popleft()
            if node.value.name == name:
                return node.value
            queue.extend(child for child in (node.left, node.right) if child is not None)
        return None


def _build_balanced(values: list[T], first: int, last: int) -> TreeNode[T]:
    if not values:
        raise ValueError("Cannot build a tree from an empty sequence")
    mid = (first + last) // 2
    root = TreeNode(values[mid])
    if mid > first:
        root.left = _build_balanced(values, first, mid)
    if mid + 1 < last:
        root.right = _build_balanced(values, mid + 1, last)
    return root


def remove_drug_by_id(root: Optional[TreeNode[Drug]], drug_id: int) -> Optional[TreeNode[Drug]]:
    """Remove the drug with ``drug_id`` and return the new root."""
    parent: Optional[TreeNode[Drug]] = None
    node = root
    while node is not None and node.value.id != drug_id:
        parent = node
        node = node.left if drug_id < node.value.id else node.right
    if node is None:
        return root

    if node.left is not None and node.right is not None:
        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        node.value = successor.value
        if successor_parent is node:
            node.right = successor.right
        else:
            successor_parent.left = successor.right
        return root

    child = node.right if node.left is None else node.left
    if parent is None:
        return child
    if parent.left is node:
        parent.left = child
    else:
        parent.right = child
    return root