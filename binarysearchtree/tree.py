"""A plain binary tree whose nodes keep a reference to their parent."""

from __future__ import annotations

from typing import Optional

__all__ = ["Node", "count_nodes_from"]


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.value
        return (
            f"Node(value={self.value!r}, parent={parent!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def add_left_child(self, value: int) -> Node:
        """Attach a new left child with this node as its parent and return it."""
        self.left = Node(value, self)
        return self.left

    def add_right_child(self, value: int) -> Node:
        """Attach a new right child with this node as its parent and return it."""
        self.right = Node(value, self)
        return self.right

    def copy(self) -> Node:
        """Return a shallow copy sharing parent and children with this node."""
        duplicate = Node(self.value, self.parent)
        duplicate.left = self.left
        duplicate.right = self.right
        return duplicate

    def get_node_by_value(self, value: int) -> Optional[Node]:
        """Find a node with the given value and return a shallow copy of it.

        The search descends into the left subtree when there is one and
        into the right subtree only when there is no left child.
        """
        if self.value == value:
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_value(value)
        if self.right is not None:
            return self.right.get_node_by_value(value)
        return None

    def get_node_by_full_property(self, node: Node) -> Optional[Node]:
        """Find a node whose value, parent value and child values match ``node``.

        Returns a shallow copy of the match, or None. Descends the same way
        as :meth:`get_node_by_value`.
        """
        if (
            self.value == node.value
            and _values_match(node.parent, self.parent)
            and _values_match(node.left, self.left)
            and _values_match(node.right, self.right)
        ):
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_full_property(node)
        if self.right is not None:
            return self.right.get_node_by_full_property(node)
        return None

    def discard_node_by_value(self, value: int) -> bool:
        """Cut off the subtree holding ``value`` along the search path.

        A matching node loses its parent; each node passed on the way down
        loses the child it descended into. Returns whether a match was found.
        """
        if self.value == value:
            self.parent = None
            return True
        if self.left is not None:
            found = self.left.discard_node_by_value(value)
            self.left = None
            return found
        if self.right is not None:
            found = self.right.discard_node_by_value(value)
            self.right = None
            return found
        return False

    def count_nodes(self) -> int:
        """Number of nodes in the subtree rooted here, this node included."""
        return count_nodes_from(self, 0)

    def tree_depth(self) -> int:
        """Number of edges on the longest downward path from this node."""
        left_depth = self.left.tree_depth() + 1 if self.left is not None else 0
        right_depth = self.right.tree_depth() + 1 if self.right is not None else 0
        return max(left_depth, right_depth)

    def get_sibling(self) -> Optional[Node]:
        """The other child of this node's parent, or None for a root."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left


def count_nodes_from(node: Node, count: int) -> int:
    """Count the nodes under ``node``, adding ``count`` at every node visited."""
    left_count = count_nodes_from(node.left, count) if node.left is not None else 0
    right_count = count_nodes_from(node.right, count) if node.right is not None else 0
    return count + left_count + right_count + 1


def _values_match(first: Optional[Node], second: Optional[Node]) -> bool:
    if first is None or second is None:
        return first is None and second is None
    return first.value == second.value