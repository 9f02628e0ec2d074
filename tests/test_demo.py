import io

import pytest

from binarysearchtree.bst import BstNode
from binarysearchtree.demo import (
    build_sample_bst,
    build_sample_tree,
    main,
    run_binary_search_tree_demo,
    run_binary_tree_demo,
)
from binarysearchtree.dot import bst_to_dot, tree_to_dot


def _inorder_keys(node):
    if node is None:
        return []
    return _inorder_keys(node.left) + [node.key] + _inorder_keys(node.right)


def _inorder_values(node):
    if node is None:
        return []
    return _inorder_values(node.left) + [node.value] + _inorder_values(node.right)


def _all_nodes(node):
    if node is None:
        return []
    return [node] + _all_nodes(node.left) + _all_nodes(node.right)


def _bst_lines(tmp_path):
    out = io.StringIO()
    run_binary_search_tree_demo(out, tmp_path / "bst_graph.dot")
    return out.getvalue().splitlines()


def _tree_lines(tmp_path):
    out = io.StringIO()
    run_binary_tree_demo(out, tmp_path)
    return out.getvalue().splitlines()


def test_sample_bst_holds_keys_in_order():
    root = build_sample_bst()
    assert _inorder_keys(root) == [2, 3, 4, 6, 7, 9, 13, 15, 17, 18, 20]
    assert root.key == 15


def test_sample_bst_parent_links_are_consistent():
    root = build_sample_bst()
    assert root.parent is None
    for node in _all_nodes(root):
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node


def test_sample_tree_holds_values():
    root = build_sample_tree()
    assert sorted(_inorder_values(root)) == [2, 3, 4, 5, 7, 10]
    assert root.right.left is None
    assert root.right.right.value == 10


def test_bst_demo_writes_graph_of_sample(tmp_path):
    _bst_lines(tmp_path)
    text = (tmp_path / "bst_graph.dot").read_text(encoding="utf-8")
    assert text == bst_to_dot(build_sample_bst())
    assert "\t15--6;\n" in text
    assert text.startswith("graph tree{\n")


def test_bst_demo_search_lines(tmp_path):
    lines = _bst_lines(tmp_path)
    assert lines[0] == "tree search result of key 15 is found -> Some(15)"
    assert lines[1].startswith("tree search result of key 9 is found")
    assert lines[2] == "tree search result of key 22 is not found"


def test_bst_demo_extremes_and_root(tmp_path):
    lines = _bst_lines(tmp_path)
    root = build_sample_bst()
    assert lines[3] == f"minimum result Some({root.minimum().key})"
    assert lines[4] == f"maximum result Some({root.maximum().key})"
    assert lines[5] == f"root node Some({root.key})"


@pytest.mark.parametrize("position, key", list(enumerate([2, 20, 15, 13, 9, 7])))
def test_bst_demo_successor_lines(tmp_path, position, key):
    lines = _bst_lines(tmp_path)
    successor = build_sample_bst().tree_search(key).tree_successor_simpler()
    expected = "not found" if successor is None else f"Some({successor.key})"
    assert lines[6 + position] == f"successor of node ({key}) is {expected}"


def test_bst_demo_missing_successor_key(tmp_path):
    lines = _bst_lines(tmp_path)
    assert lines[-1] == "node with key of 22 does not exist, failed to get successor"
    assert len(lines) == 13


def test_binary_tree_demo_first_graph(tmp_path):
    _tree_lines(tmp_path)
    text = (tmp_path / "prime.dot").read_text(encoding="utf-8")
    assert text == "graph tree{\n\t5--3;\n\t5--7;\n}"


def test_binary_tree_demo_grown_graphs(tmp_path):
    _tree_lines(tmp_path)
    expected = tree_to_dot(build_sample_tree())
    assert (tmp_path / "prime_t2.dot").read_text(encoding="utf-8") == expected
    assert (tmp_path / "prime_t4.dot").read_text(encoding="utf-8") == expected


def test_binary_tree_demo_pruned_graph(tmp_path):
    _tree_lines(tmp_path)
    pruned = build_sample_tree().copy()
    assert pruned.discard_node_by_value(3) is True
    text = (tmp_path / "prime_t3.dot").read_text(encoding="utf-8")
    assert text == tree_to_dot(pruned)
    assert "5--3" not in text


def test_binary_tree_demo_measurements(tmp_path):
    lines = _tree_lines(tmp_path)
    tree = build_sample_tree()
    assert lines[0] == f"Current tree depth: {tree.tree_depth()}"
    assert lines[1] == f"Amount of nodes in current tree: {tree.count_nodes()}"
    assert lines[2] == f"Amount of nodes in current subtree: {tree.right.count_nodes()}"


def test_binary_tree_demo_lookups_and_discard(tmp_path):
    lines = _tree_lines(tmp_path)
    assert lines[3].startswith("left subtree seek by value Node(value=3")
    assert lines[4].startswith("left subtree seek by full property Node(value=3")
    assert lines[5] == "status of node deletion: true"
    pruned = build_sample_tree().copy()
    pruned.discard_node_by_value(3)
    assert lines[6] == f"Depth after discard {pruned.tree_depth()}"
    assert lines[7] == f"Count nodes after discard {pruned.count_nodes()}"


def test_main_runs_search_tree_demo(tmp_path, capsys):
    dot_path = tmp_path / "out.dot"
    assert main([str(dot_path)]) == 0
    captured = capsys.readouterr().out.splitlines()
    assert captured[0].startswith("tree search result of key 15")
    assert dot_path.read_text(encoding="utf-8") == bst_to_dot(build_sample_bst())
    assert not (tmp_path / "prime.dot").exists()


def test_main_runs_both_demos(tmp_path, capsys):
    dot_path = tmp_path / "out.dot"
    assert main([str(dot_path), "--binary-tree", "--directory", str(tmp_path)]) == 0
    captured = capsys.readouterr().out.splitlines()
    assert captured[0].startswith("Current tree depth:")
    assert (tmp_path / "prime_t4.dot").read_text(encoding="utf-8") == tree_to_dot(
        build_sample_tree()
    )
    assert any(line.startswith("tree search result of key 22") for line in captured)


def test_sample_bst_root_type_and_search():
    root = build_sample_bst()
    found = root.tree_search(13)
    assert isinstance(found, BstNode)
    assert found.left.key == 9