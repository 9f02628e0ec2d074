"""Binary trees and binary search trees with parent links, successor queries and DOT export."""

__version__ = "0.1.0"
__all__ = ["bst", "demo", "dot", "tree"]