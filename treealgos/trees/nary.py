"""N-ary tree with aggregate queries."""

from typing import Optional

from ..config import TraversalConfig
from ..core.adapter import NaryTreeAdapter
from ..core.collector import AggregateCollector, CountCollector, SumCollector
from ..core.node import Number, TreeNode
from ..planning import ExecutionPlan


class NaryTree:
    """Rooted tree whose nodes hold any number of ordered children.

    All queries are single depth-first passes. An empty tree (no root) is a
    valid input and yields the identity result of each query.

    Example:
        >>> tree = NaryTree(TreeNode(1, [TreeNode(2), TreeNode(3, [TreeNode(4)])]))
        >>> tree.sum_values()
        10
        >>> tree.count_evens()
        2
    """

    adapter = NaryTreeAdapter()

    def __init__(self, root: Optional[TreeNode] = None):
        self.root = root

    def _aggregate(self, collector: AggregateCollector):
        plan = ExecutionPlan(TraversalConfig.depth_first(), self.adapter, collector)
        return plan.aggregate(self.root)

    def sum_values(self) -> Number:
        """Add up all of the values in the tree (0 if empty)."""
        return self._aggregate(SumCollector())

    def count_evens(self) -> int:
        """Count the nodes whose value is evenly divisible by 2."""
        return self._aggregate(CountCollector(lambda value: value % 2 == 0))

    def num_greater(self, lower_bound: Number) -> int:
        """Count the nodes whose value is strictly greater than lower_bound.

        Args:
            lower_bound: The value to compare node values against

        Returns:
            Number of qualifying nodes (0 for an empty tree)
        """
        return self._aggregate(CountCollector(lambda value: value > lower_bound))

    def is_empty(self) -> bool:
        return self.root is None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.root!r})"
