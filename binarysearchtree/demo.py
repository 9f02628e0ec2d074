"""Sample trees and the demonstration runs that print and render them."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from .bst import BstNode
from .dot import generate_dotfile, generate_dotfile_bst
from .tree import Node, count_nodes_from

__all__ = [
    "build_sample_bst",
    "build_sample_tree",
    "run_binary_search_tree_demo",
    "run_binary_tree_demo",
    "main",
]

_PathLike = Union[str, "os.PathLike[str]"]

SEARCH_KEYS = (15, 9, 22)
SUCCESSOR_KEYS = (2, 20, 15, 13, 9, 7, 22)


def _debug_key(key: Optional[int]) -> str:
    return "None" if key is None else f"Some({key})"


def build_sample_bst() -> BstNode:
    """Build the eleven-node search tree rooted at 15 used by the demo."""
    root = BstNode(15)
    six = root.add_left_child(6)
    eighteen = root.add_right_child(18)

    eighteen.add_left_child(17)
    eighteen.add_right_child(20)

    three = six.add_left_child(3)
    seven = six.add_right_child(7)
    three.add_left_child(2)
    three.add_right_child(4)

    thirteen = seven.add_right_child(13)
    thirteen.add_left_child(9)
    return root


def _seed_tree() -> Node:
    root = Node(5)
    root.add_left_child(3)
    root.add_right_child(7)
    return root


def _grow_tree(root: Node) -> None:
    if root.left is not None:
        root.left.add_left_child(2)
        root.left.add_right_child(4)
    if root.right is not None:
        root.right.add_right_child(10)


def build_sample_tree() -> Node:
    """Build the six-node plain binary tree rooted at 5 used by the demo."""
    root = _seed_tree()
    _grow_tree(root)
    return root


def run_binary_search_tree_demo(
    out: Optional[TextIO] = None, dot_path: _PathLike = "bst_graph.dot"
) -> None:
    """Render the sample search tree and print search, extremum and successor results."""
    out = sys.stdout if out is None else out
    root = build_sample_bst()
    generate_dotfile_bst(root, dot_path)

    for key in SEARCH_KEYS:
        found = root.tree_search(key)
        result = "not found" if found is None else f"found -> {_debug_key(found.key)}"
        print(f"tree search result of key {key} is {result}", file=out)

    min_node = root.minimum()
    print(f"minimum result {_debug_key(min_node.key)}", file=out)

    max_node = root.maximum()
    print(f"maximum result {_debug_key(max_node.key)}", file=out)

    print(f"root node {_debug_key(max_node.get_root().key)}", file=out)

    for key in SUCCESSOR_KEYS:
        node = root.tree_search(key)
        if node is None:
            print(
                f"node with key of {key} does not exist, failed to get successor",
                file=out,
            )
            continue
        successor = node.tree_successor_simpler()
        result = "not found" if successor is None else _debug_key(successor.key)
        print(f"successor of node ({key}) is {result}", file=out)


def run_binary_tree_demo(out: Optional[TextIO] = None, directory: _PathLike = ".") -> None:
    """Grow, measure, search and prune the sample plain tree, rendering each stage."""
    out = sys.stdout if out is None else out
    folder = Path(directory)

    root = _seed_tree()
    generate_dotfile(root, folder / "prime.dot")

    _grow_tree(root)
    generate_dotfile(root, folder / "prime_t2.dot")

    print(f"Current tree depth: {root.tree_depth()}", file=out)
    print(f"Amount of nodes in current tree: {root.count_nodes()}", file=out)

    if root.right is None or root.left is None:
        raise ValueError("sample tree is missing a subtree")
    subtree_count = count_nodes_from(root.right, 0)
    print(f"Amount of nodes in current subtree: {subtree_count}", file=out)

    root.left.get_sibling()

    by_value = root.get_node_by_value(3)
    print(f"left subtree seek by value {by_value!r}", file=out)
    if by_value is None:
        raise ValueError("value 3 is missing from the sample tree")
    by_property = root.get_node_by_full_property(by_value)
    print(f"left subtree seek by full property {by_property!r}", file=out)

    pruned = root.copy()
    flag = pruned.discard_node_by_value(3)
    print(f"status of node deletion: {'true' if flag else 'false'}", file=out)

    generate_dotfile(pruned, folder / "prime_t3.dot")

    print(f"Depth after discard {pruned.tree_depth()}", file=out)
    print(f"Count nodes after discard {pruned.count_nodes()}", file=out)

    generate_dotfile(root, folder / "prime_t4.dot")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the search tree demo, and the plain tree demo when asked."""
    parser = argparse.ArgumentParser(
        prog="binarysearchtree",
        description="Build sample trees, print queries on them and write Graphviz files.",
    )
    parser.add_argument(
        "dot_path",
        nargs="?",
        default="bst_graph.dot",
        help="where to write the search tree graph (default: bst_graph.dot)",
    )
    parser.add_argument(
        "--binary-tree",
        action="store_true",
        help="also run the plain binary tree demo",
    )
    parser.add_argument(
        "--directory",
        default=".",
        help="directory for the plain tree graphs (default: current directory)",
    )
    args = parser.parse_args(argv)

    if args.binary_tree:
        run_binary_tree_demo(sys.stdout, args.directory)
    run_binary_search_tree_demo(sys.stdout, args.dot_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())