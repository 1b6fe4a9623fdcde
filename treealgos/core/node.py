"""Node types for treealgos.

Nodes are plain data containers. Navigation logic lives in the adapters,
which lets one set of traversers walk both n-ary and binary trees.

Nodes deliberately keep identity equality: two distinct nodes holding the
same value are different nodes, which is what cousin and common-ancestor
queries rely on.
"""

from typing import List, Optional, Union

Number = Union[int, float]


class TreeNode:
    """Node of an n-ary tree.

    Each node holds a value and an ordered list of owned child nodes.
    """

    def __init__(self, value: Number, children: Optional[List['TreeNode']] = None):
        """Initialize the node.

        Args:
            value: Numeric payload
            children: Child nodes in order (a fresh list is created if omitted)
        """
        self.value = value
        self.children = list(children) if children is not None else []

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self.children

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r}, children={len(self.children)})"


class BinaryTreeNode:
    """Node of a binary tree with optional left and right children."""

    def __init__(self,
                 value: Number,
                 left: Optional['BinaryTreeNode'] = None,
                 right: Optional['BinaryTreeNode'] = None):
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has neither a left nor a right child."""
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"
