"""Binary tree with depth, path-sum, search, ancestry and codec operations."""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .. import codec
from ..config import CodecConfig, TraversalConfig
from ..core.adapter import BinaryTreeAdapter
from ..core.collector import MinAboveCollector
from ..core.node import BinaryTreeNode, Number
from ..core.traverser import DepthFirstPostOrderTraverser, LevelOrderTraverser
from ..errors import TreeStructureError
from ..planning import ExecutionPlan

logger = logging.getLogger(__name__)


class BinaryTree:
    """Rooted tree whose nodes have an optional left and right child.

    The tree is not ordered (it is not a search tree), so value lookups scan
    every node. Queries that take nodes as arguments compare them by
    identity. Nodes that are not part of the tree give the "not found"
    result (None or False), and an empty tree gives 0 or None.

    Two BinaryTree objects compare equal when they have the same shape and
    equal values in every position.
    """

    adapter = BinaryTreeAdapter()

    def __init__(self, root: Optional[BinaryTreeNode] = None):
        self.root = root

    def is_empty(self) -> bool:
        return self.root is None

    # Depth queries

    def min_depth(self) -> int:
        """Return the number of nodes on the shortest root-to-leaf path.

        A node with a single child is not a leaf, so its depth comes from
        the child it has. Walks level by level and stops at the first level
        holding a leaf.
        """
        if self.root is None:
            return 0

        for depth, level in LevelOrderTraverser(self.adapter).levels(self.root):
            if any(node.is_leaf() for node in level):
                break
        return depth + 1

    def max_depth(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        if self.root is None:
            return 0

        height = 0
        for depth, _ in LevelOrderTraverser(self.adapter).levels(self.root):
            height = depth + 1
        return height

    # Path sums

    def max_sum(self) -> Number:
        """Return the largest sum along any path in the tree.

        A path may start and end at any nodes and need not pass through the
        root, but it visits each node at most once, so it bends at most at
        one node. Returns 0 for an empty tree.

        Post-order: each node's upward gain is its value plus the better of
        its children's gains (negative gains count as 0). The bend through a
        node adds both children's gains and is compared against the best
        seen so far.
        """
        if self.root is None:
            return 0

        gains: Dict[int, Number] = {}
        best: Optional[Number] = None

        for node, _ in DepthFirstPostOrderTraverser(self.adapter).traverse(self.root):
            left_gain = max(0, gains.pop(id(node.left), 0)) if node.left is not None else 0
            right_gain = max(0, gains.pop(id(node.right), 0)) if node.right is not None else 0

            bend = node.value + left_gain + right_gain
            if best is None or bend > best:
                best = bend

            gains[id(node)] = node.value + max(left_gain, right_gain)

        return best

    # Value search

    def next_larger(self, lower_bound: Number) -> Optional[Number]:
        """Return the smallest value strictly greater than lower_bound.

        Args:
            lower_bound: The value to compare node values against

        Returns:
            The qualifying value, or None if no node qualifies (always None
            for an empty tree)
        """
        plan = ExecutionPlan(TraversalConfig.depth_first(), self.adapter,
                             MinAboveCollector(lower_bound))
        return plan.aggregate(self.root)

    # Ancestry

    def _walk_with_parents(self) -> Iterator[Tuple[BinaryTreeNode, Optional[BinaryTreeNode], int]]:
        """Yield (node, parent, depth) in pre-order, root depth 0."""
        if self.root is None:
            return

        stack: List[Tuple[BinaryTreeNode, Optional[BinaryTreeNode], int]] = [(self.root, None, 0)]
        visited = set()
        while stack:
            node, parent, depth = stack.pop()
            if id(node) in visited:
                raise TreeStructureError(node)
            visited.add(id(node))

            yield (node, parent, depth)

            if node.right is not None:
                stack.append((node.right, node, depth + 1))
            if node.left is not None:
                stack.append((node.left, node, depth + 1))

    def are_cousins(self, node_a: BinaryTreeNode, node_b: BinaryTreeNode) -> bool:
        """Check whether two nodes are cousins.

        Cousins sit at the same depth under different parents. The root,
        a node compared with itself, and nodes outside the tree are never
        cousins.
        """
        if self.root is None or node_a is node_b:
            return False
        if node_a is self.root or node_b is self.root:
            return False

        found: Dict[int, Tuple[Optional[BinaryTreeNode], int]] = {}
        for node, parent, depth in self._walk_with_parents():
            if node is node_a or node is node_b:
                found[id(node)] = (parent, depth)
                if len(found) == 2:
                    break

        if len(found) < 2:
            return False

        parent_a, depth_a = found[id(node_a)]
        parent_b, depth_b = found[id(node_b)]
        return depth_a == depth_b and parent_a is not parent_b

    def lowest_common_ancestor(self,
                               node_a: BinaryTreeNode,
                               node_b: BinaryTreeNode) -> Optional[BinaryTreeNode]:
        """Return the deepest node having both nodes as descendants.

        A node counts as its own descendant, so if one target is an ancestor
        of the other, that target is the answer. Returns None if either node
        is not in the tree.

        Post-order: a target reports itself upward; a node whose left and
        right subtrees both report is the common ancestor; otherwise the one
        reporting child (if any) is passed up.
        """
        if self.root is None:
            return None

        reports: Dict[int, BinaryTreeNode] = {}
        targets_found = 0

        for node, _ in DepthFirstPostOrderTraverser(self.adapter).traverse(self.root):
            left_report = reports.pop(id(node.left), None) if node.left is not None else None
            right_report = reports.pop(id(node.right), None) if node.right is not None else None

            if node is node_a or node is node_b:
                targets_found += 1
                report = node
            elif left_report is not None and right_report is not None:
                report = node
            else:
                report = left_report if left_report is not None else right_report

            if report is not None:
                reports[id(node)] = report

        needed = 1 if node_a is node_b else 2
        if targets_found < needed:
            logger.debug("Only %d of %d target node(s) are in the tree", targets_found, needed)
            return None
        return reports.get(id(self.root))

    # Serialization

    def to_tokens(self) -> List[Optional[Number]]:
        """Return the pre-order token list, None marking absent children."""
        return codec.encode_tokens(self.root)

    @staticmethod
    def serialize(tree: 'BinaryTree', config: Optional[CodecConfig] = None) -> str:
        """Serialize a tree into a string.

        Args:
            tree: The tree to serialize
            config: Text format (default: JSON array with ``null`` sentinels)

        Returns:
            String such as ``[1,2,null,null,3,null,null]``

        Raises:
            EncodeError: If a node value is not a finite int or float
        """
        return codec.serialize(tree.root, config)

    @classmethod
    def deserialize(cls, data: str, config: Optional[CodecConfig] = None) -> 'BinaryTree':
        """Rebuild a tree from a string produced by serialize().

        Raises:
            DecodeError: If the data is not exactly one complete encoding
        """
        return cls(codec.deserialize(data, config))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryTree):
            return NotImplemented
        return codec.shape_of(self.root) == codec.shape_of(other.root)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.root!r})"
