"""Red-black tree whose nodes are also threaded into a doubly linked list.

The tree carries no keys: callers choose where a node goes by naming its
in-order predecessor, which suits sweep-line structures such as a beach line.
"""

from __future__ import annotations

from collections.abc import Iterator


class RBNode:
    """A tree node with parent/child links, list neighbours and a colour."""

    def __init__(self) -> None:
        self.parent: RBNode | None = None
        self.previous: RBNode | None = None
        self.next: RBNode | None = None
        self.left: RBNode | None = None
        self.right: RBNode | None = None
        self.red = False


def _leftmost(node: RBNode) -> RBNode:
    while node.left is not None:
        node = node.left
    return node


class RBTree:
    """A balanced tree ordered purely by where nodes are inserted."""

    def __init__(self) -> None:
        self.root: RBNode | None = None

    def first(self) -> RBNode | None:
        """The left-most node, or None if the tree is empty."""
        return None if self.root is None else _leftmost(self.root)

    def __iter__(self) -> Iterator[RBNode]:
        node = self.first()
        while node is not None:
            yield node
            node = node.next

    def insert(self, node: RBNode | None, successor: RBNode) -> None:
        """Insert successor right after node, or first in order if node is None."""
        parent: RBNode | None
        if node is not None:
            successor.previous = node
            successor.next = node.next
            if node.next is not None:
                node.next.previous = successor
            node.next = successor
            if node.right is not None:
                node = _leftmost(node.right)
                node.left = successor
            else:
                node.right = successor
            parent = node
        elif self.root is not None:
            node = _leftmost(self.root)
            successor.previous = None
            successor.next = node
            node.previous = successor
            node.left = successor
            parent = node
        else:
            successor.previous = None
            successor.next = None
            self.root = successor
            parent = None

        successor.left = None
        successor.right = None
        successor.parent = parent
        successor.red = True

        node = successor
        while parent is not None and parent.red:
            grandpa = parent.parent
            if parent is grandpa.left:
                uncle = grandpa.right
                if uncle is not None and uncle.red:
                    parent.red = False
                    uncle.red = False
                    grandpa.red = True
                    node = grandpa
                else:
                    if node is parent.right:
                        self._rotate_left(parent)
                        node = parent
                        parent = node.parent
                    parent.red = False
                    grandpa.red = True
                    self._rotate_right(grandpa)
            else:
                uncle = grandpa.left
                if uncle is not None and uncle.red:
                    parent.red = False
                    uncle.red = False
                    grandpa.red = True
                    node = grandpa
                else:
                    if node is parent.left:
                        self._rotate_right(parent)
                        node = parent
                        parent = node.parent
                    parent.red = False
                    grandpa.red = True
                    self._rotate_left(grandpa)
            parent = node.parent
        self.root.red = False

    def remove(self, node: RBNode) -> None:
        """Unlink node from both the list and the tree, rebalancing as needed."""
        if node.next is not None:
            node.next.previous = node.previous
        if node.previous is not None:
            node.previous.next = node.next
        node.next = None
        node.previous = None

        parent = node.parent
        left = node.left
        right = node.right
        if left is None:
            replacement = right
        elif right is None:
            replacement = left
        else:
            replacement = _leftmost(right)

        if parent is not None:
            if parent.left is node:
                parent.left = replacement
            else:
                parent.right = replacement
        else:
            self.root = replacement

        if left is not None and right is not None:
            is_red = replacement.red
            replacement.red = node.red
            replacement.left = left
            left.parent = replacement
            if replacement is not right:
                parent = replacement.parent
                replacement.parent = node.parent
                child = replacement.right
                parent.left = child
                replacement.right = right
                right.parent = replacement
            else:
                replacement.parent = parent
                parent = replacement
                child = replacement.right
        else:
            is_red = node.red
            child = replacement

        # child is now the only child of the moved node and parent its new parent
        if child is not None:
            child.parent = parent
        if is_red:
            return
        if child is not None and child.red:
            child.red = False
            return

        while child is not self.root:
            if child is parent.left:
                sibling = parent.right
                if sibling.red:
                    sibling.red = False
                    parent.red = True
                    self._rotate_left(parent)
                    sibling = parent.right
                if (sibling.left is not None and sibling.left.red) or (
                    sibling.right is not None and sibling.right.red
                ):
                    if sibling.right is None or not sibling.right.red:
                        sibling.left.red = False
                        sibling.red = True
                        self._rotate_right(sibling)
                        sibling = parent.right
                    sibling.red = parent.red
                    parent.red = False
                    sibling.right.red = False
                    self._rotate_left(parent)
                    child = self.root
                    break
            else:
                sibling = parent.left
                if sibling.red:
                    sibling.red = False
                    parent.red = True
                    self._rotate_right(parent)
                    sibling = parent.left
                if (sibling.left is not None and sibling.left.red) or (
                    sibling.right is not None and sibling.right.red
                ):
                    if sibling.left is None or not sibling.left.red:
                        sibling.right.red = False
                        sibling.red = True
                        self._rotate_left(sibling)
                        sibling = parent.left
                    sibling.red = parent.red
                    parent.red = False
                    sibling.left.red = False
                    self._rotate_right(parent)
                    child = self.root
                    break
            sibling.red = True
            child = parent
            parent = parent.parent
            if child.red:
                break

        if child is not None:
            child.red = False

    def _replace_in_parent(self, old: RBNode, new: RBNode) -> None:
        parent = old.parent
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new
        new.parent = parent

    def _rotate_left(self, node: RBNode) -> None:
        pivot = node.right
        self._replace_in_parent(node, pivot)
        node.parent = pivot
        node.right = pivot.left
        if node.right is not None:
            node.right.parent = node
        pivot.left = node

    def _rotate_right(self, node: RBNode) -> None:
        pivot = node.left
        self._replace_in_parent(node, pivot)
        node.parent = pivot
        node.left = pivot.right
        if node.left is not None:
            node.left.parent = node
        pivot.right = node