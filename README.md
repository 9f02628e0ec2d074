# binarysearchtree

Small binary tree and binary search tree structures whose nodes keep a link
to their parent, plus export of a tree as an undirected Graphviz DOT graph.
There are no dependencies outside the standard library.

## Modules

- `binarysearchtree.tree`: `Node` is a plain binary tree node that holds an
  integer `value`. It has these methods:
  - `add_left_child` and `add_right_child` attach a new child and return it.
  - `copy` makes a shallow copy.
  - `get_node_by_value` and `get_node_by_full_property` find a node. The second
    matches on the value, the parent's value and the children's values. Both
    return a shallow copy of the node they find. They follow the left child
    when there is one, and the right child only when there is no left child.
  - `discard_node_by_value` cuts off the subtree on the search path.
  - `count_nodes` counts nodes.
  - `tree_depth` gives the number of edges on the longest downward path.
  - `get_sibling` returns the other child of the node's parent.

  The module-level `count_nodes_from(node, count)` counts the nodes under a
  given node.
- `binarysearchtree.bst` holds two classes.
  - `BstNode` is a keyed search tree node with `add_left_child`,
    `add_right_child`, `copy`, `tree_search`, `minimum`, `maximum`, `get_root`,
    `tree_successor` and `tree_successor_simpler`. `tree_search`, `minimum` and
    `maximum` return shallow copies. `tree_successor` follows the usual rule:
    the minimum of the right subtree, or otherwise the first ancestor reached
    from its left side. `tree_successor_simpler` only counts a right child that
    has a parent and both children. It returns `None` when its walk ends at the
    root, and raises `ValueError` when it needs a parent that is missing.
  - `BST` is a search tree built from `Node` objects. It has a `root`,
    `tree_insert` (equal values go to the right) and `tree_delete`.
- `binarysearchtree.dot` turns a tree into DOT text and writes it to a file.
  - `tree_to_dot` handles `Node` trees and `bst_to_dot` handles `BstNode` trees.
    Each returns DOT text with one `parent--child;` edge per line.
  - `generate_dotfile` and `generate_dotfile_bst` write that text to a path.
  - `bst_to_dot` raises `ValueError` for a node without a key.
- `binarysearchtree.demo` holds the sample trees and the command.
  - `build_sample_bst` returns the eleven-node search tree rooted at 15.
  - `build_sample_tree` returns the six-node plain tree rooted at 5.
  - `run_binary_search_tree_demo` and `run_binary_tree_demo` print their
    results to a text stream and write DOT files.
  - `main` is the command-line entry point.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from binarysearchtree.bst import BstNode
from binarysearchtree.dot import generate_dotfile_bst

root = BstNode(15)
root.add_left_child(6)
root.add_right_child(18)

found = root.tree_search(6)
print(found.key if found else "not found")   # 6
print(root.minimum().key)                    # 6
print(root.maximum().key)                    # 18

generate_dotfile_bst(root, "bst_graph.dot")
```

The file it writes looks like this (each edge line starts with a tab):

```
graph tree{
	15--6;
	15--18;
}
```

## Command line

```
binarysearchtree [DOT_PATH] [--binary-tree] [--directory DIR]
```

Without options, the command does the following:

- builds the sample search tree;
- writes it to `bst_graph.dot`, or to `DOT_PATH` if one is given;
- prints the search results for keys 15, 9 and 22;
- prints the minimum, the maximum and the root;
- prints the `tree_successor_simpler` results for keys 2, 20, 15, 13, 9, 7 and 22.

`--binary-tree` first runs the plain tree demo. That demo prints the depth, the
node counts, the lookups and the outcome of a discard. It writes
`prime.dot`, `prime_t2.dot`, `prime_t3.dot` and `prime_t4.dot` into
`--directory`, which is the current directory by default.

## Limits

- The trees live only in memory. Nothing is saved or loaded.
- DOT output is plain text. Nothing here renders it to an image.
- `BST` does no balancing.