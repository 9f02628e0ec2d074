"""Binary search tree nodes with parent links, and a tree built on plain nodes."""

from __future__ import annotations

from typing import Optional

from .tree import Node

__all__ = ["BstNode", "BST"]


class BstNode:
    """A binary search tree node whose key may be absent."""

    __slots__ = ("key", "parent", "left", "right")

    def __init__(self, key: Optional[int], parent: Optional[BstNode] = None) -> None:
        self.key = key
        self.parent = parent
        self.left: Optional[BstNode] = None
        self.right: Optional[BstNode] = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.key
        return (
            f"BstNode(key={self.key!r}, parent={parent!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def add_left_child(self, value: int) -> BstNode:
        """Attach a new left child with this node as its parent and return it."""
        self.left = BstNode(value, self)
        return self.left

    def add_right_child(self, value: int) -> BstNode:
        """Attach a new right child with this node as its parent and return it."""
        self.right = BstNode(value, self)
        return self.right

    def copy(self) -> BstNode:
        """Return a shallow copy sharing parent and children with this node."""
        duplicate = BstNode(self.key, self.parent)
        duplicate.left = self.left
        duplicate.right = self.right
        return duplicate

    def tree_search(self, value: int) -> Optional[BstNode]:
        """Find the node holding ``value`` and return a shallow copy of it.

        Descends left when ``value`` is smaller than the key and a left child
        exists; otherwise descends right when a right child exists.
        """
        node: Optional[BstNode] = self
        while node is not None and node.key is not None:
            if node.key == value:
                return node.copy()
            if value < node.key and node.left is not None:
                node = node.left
            elif node.right is not None:
                node = node.right
            else:
                return None
        return None

    def minimum(self) -> BstNode:
        """Return a shallow copy of the leftmost node under this one."""
        node = self
        while node.key is not None and node.left is not None:
            node = node.left
        return node.copy()

    def maximum(self) -> BstNode:
        """Return a shallow copy of the rightmost node under this one."""
        node = self
        while node.key is not None and node.right is not None:
            node = node.right
        return node.copy()

    def get_root(self) -> BstNode:
        """Follow parent links up to the node without a parent."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def tree_successor(self) -> Optional[BstNode]:
        """Successor by the textbook rule, comparing nodes by key.

        With a right subtree, its minimum is returned. Otherwise the first
        ancestor reached from its left side is returned, or None.
        """
        if self.right is not None:
            return self.right.minimum()
        child = self
        ancestor = self.parent
        while ancestor is not None:
            if ancestor.left is not None and ancestor.left.key == child.key:
                return ancestor
            child = ancestor
            ancestor = ancestor.parent
        return None

    def tree_successor_simpler(self) -> Optional[BstNode]:
        """Successor lookup built on the nil check used by this tree.

        A right child only counts when it has a parent and both children.
        Returns None when the walk ends at the root, and raises ValueError
        when it needs a parent that does not exist.
        """
        if not _is_nil(self.right):
            return self.right.minimum()

        child = self
        ancestor = self.parent
        if ancestor is None:
            raise ValueError("node has no usable right subtree and no parent")
        ancestor_right = ancestor.right
        while _is_nil(ancestor) and _keys_match(child, ancestor_right):
            if ancestor.parent is None:
                raise ValueError("successor search ran past the root")
            child, ancestor = ancestor, ancestor.parent

        if ancestor.key == child.get_root().key:
            return None
        return ancestor


def _is_nil(node: Optional[BstNode]) -> bool:
    if node is None:
        return True
    return node.parent is None or node.left is None or node.right is None


def _keys_match(node: BstNode, other: Optional[BstNode]) -> bool:
    return other is not None and other.key == node.key


class BST:
    """A binary search tree of plain :class:`Node` objects."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def __repr__(self) -> str:
        return f"BST(root={self.root!r})"

    def tree_insert(self, value: int) -> None:
        """Insert ``value``; equal values go to the right."""
        parent: Optional[Node] = None
        current = self.root
        while current is not None:
            parent = current
            current = current.left if value < current.value else current.right

        node = Node(value, parent)
        if parent is None:
            self.root = node
        elif value < parent.value:
            parent.left = node
        else:
            parent.right = node

    def _transplant(self, old: Node, new: Optional[Node]) -> None:
        parent = old.parent
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = old.parent

    def tree_delete(self, value: int) -> None:
        """Delete the node that :meth:`Node.get_node_by_value` finds for ``value``.

        That lookup yields a copy of the node, and links are rewired by
        identity against the copy. Nothing happens when no node is found.
        """
        if self.root is None:
            return
        target = self.root.get_node_by_value(value)
        if target is None:
            return

        if target.left is None:
            self._transplant(target, target.right)
        elif target.right is None:
            self._transplant(target, target.left)
        else:
            successor = target.right
            while successor.left is not None:
                successor = successor.left

            if successor.parent is not target:
                self._transplant(successor, successor.right)
                successor.right = target.right
                if successor.right is not None:
                    successor.right.parent = successor

            self._transplant(target, successor)
            successor.left = target.left
            if successor.left is not None:
                successor.left.parent = successor