"""Render trees as undirected Graphviz graphs."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator, Optional, TypeVar, Union

from .bst import BstNode
from .tree import Node

__all__ = ["tree_to_dot", "bst_to_dot", "generate_dotfile", "generate_dotfile_bst"]

_PREAMBLE = "graph tree{\n"
_EPILOGUE = "}"

_T = TypeVar("_T", Node, BstNode)


def _edges(node: _T, label: Callable[[_T], str]) -> Iterator[str]:
    left: Optional[_T] = node.left
    right: Optional[_T] = node.right
    for child in (left, right):
        if child is not None:
            yield f"\t{label(node)}--{label(child)};\n"
    for child in (left, right):
        if child is not None:
            yield from _edges(child, label)


def _node_label(node: Node) -> str:
    return str(node.value)


def _bst_label(node: BstNode) -> str:
    if node.key is None:
        raise ValueError("cannot render a node without a key")
    return str(node.key)


def tree_to_dot(root: Node) -> str:
    """Return the Graphviz text for the tree under ``root``, one edge per line."""
    return _PREAMBLE + "".join(_edges(root, _node_label)) + _EPILOGUE


def bst_to_dot(root: BstNode) -> str:
    """Return the Graphviz text for the search tree under ``root``."""
    return _PREAMBLE + "".join(_edges(root, _bst_label)) + _EPILOGUE


def _write(text: str, output_path: Union[str, "os.PathLike[str]"]) -> None:
    Path(output_path).write_text(text, encoding="utf-8", newline="")


def generate_dotfile(root: Node, output_path: Union[str, "os.PathLike[str]"]) -> None:
    """Write :func:`tree_to_dot` of ``root`` to ``output_path``."""
    _write(tree_to_dot(root), output_path)


def generate_dotfile_bst(
    root: BstNode, output_path: Union[str, "os.PathLike[str]"]
) -> None:
    """Write :func:`bst_to_dot` of ``root`` to ``output_path``."""
    _write(bst_to_dot(root), output_path)