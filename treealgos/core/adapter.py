"""TreeAdapter abstraction for treealgos.

The adapter provides the navigation logic for a specific node type,
decoupling node representation from the traversal mechanism. Traversers
and collectors only ever ask an adapter for a node's children.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator

from .node import BinaryTreeNode, TreeNode


class TreeAdapter(ABC):
    """Abstract adapter for navigating a specific kind of tree."""

    @abstractmethod
    def get_children(self, node: Any) -> Iterator[Any]:
        """Get an iterator of the present children of a node, in order.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes
        """
        pass

    def is_leaf(self, node: Any) -> bool:
        """Check if a node has no children.

        Default implementation asks get_children; adapters can override
        with something cheaper.
        """
        for _ in self.get_children(node):
            return False
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class NaryTreeAdapter(TreeAdapter):
    """Adapter for TreeNode: children come from the node's child list."""

    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        return iter(node.children)

    def is_leaf(self, node: TreeNode) -> bool:
        return node.is_leaf()


class BinaryTreeAdapter(TreeAdapter):
    """Adapter for BinaryTreeNode: left child first, absent children skipped."""

    def get_children(self, node: BinaryTreeNode) -> Iterator[BinaryTreeNode]:
        if node.left is not None:
            yield node.left
        if node.right is not None:
            yield node.right

    def is_leaf(self, node: BinaryTreeNode) -> bool:
        return node.is_leaf()


def adapter_for(target: Any) -> TreeAdapter:
    """Pick the adapter matching a tree or node.

    Args:
        target: A NaryTree, BinaryTree, TreeNode or BinaryTreeNode

    Returns:
        TreeAdapter able to navigate it

    Raises:
        TypeError: If the object is not a known tree or node type
    """
    # Trees expose their adapter; import-free check avoids a cycle with trees/
    adapter = getattr(target, 'adapter', None)
    if isinstance(adapter, TreeAdapter):
        return adapter
    if isinstance(target, TreeNode):
        return NaryTreeAdapter()
    if isinstance(target, BinaryTreeNode):
        return BinaryTreeAdapter()
    raise TypeError(f"No tree adapter for {type(target).__name__}")
