"""Tree traversal strategies for treealgos.

Traversers implement different algorithms for walking through trees.
They work with any TreeAdapter, so the same code walks n-ary and binary
trees. All of them are iterative (explicit stack or queue), so a
degenerate tree thousands of levels deep does not hit the recursion limit.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterator, List, Optional, Set, Tuple, Union

from ..config import TraversalStrategy
from ..errors import TreeStructureError
from .adapter import TreeAdapter

logger = logging.getLogger(__name__)


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Every node must be reachable exactly once from the root. A node that
    shows up a second time (a shared subtree or a cycle) raises
    TreeStructureError instead of being counted twice or looping forever.
    """

    def __init__(self, adapter: TreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root (root = 0)
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth

    def _mark_visited(self, node: Any, visited: Set[int]) -> None:
        node_id = id(node)
        if node_id in visited:
            logger.debug("Node %r reached twice, tree is not a pure tree", node)
            raise TreeStructureError(node)
        visited.add(node_id)


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        # Queue stores (node, depth) tuples
        queue: Deque[Tuple[Any, int]] = deque([(root, 0)])
        visited: Set[int] = set()

        while queue:
            node, depth = queue.popleft()
            self._mark_visited(node, visited)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, first child subtree before the next.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        stack: List[Tuple[Any, int]] = [(root, 0)]
        visited: Set[int] = set()

        while stack:
            node, depth = stack.pop()
            self._mark_visited(node, visited)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Reversed so the first child is popped first
                children = list(self.adapter.get_children(node))
                for child in reversed(children):
                    stack.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent, so every node is yielded after its whole
    subtree. This is the order bottom-up computations (path sums, common
    ancestors) need.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        # Entries are (node, depth, children_pushed)
        stack: List[Tuple[Any, int, bool]] = [(root, 0, False)]
        visited: Set[int] = set()

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            self._mark_visited(node, visited)
            stack.append((node, depth, True))

            if self._should_explore(depth, max_depth):
                children = list(self.adapter.get_children(node))
                for child in reversed(children):
                    stack.append((child, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    traverse() yields individual nodes like BreadthFirstTraverser; levels()
    yields each whole level at once, which depth queries use.
    """

    def levels(self, root: Any, max_depth: Optional[int] = None) -> Iterator[Tuple[int, List[Any]]]:
        """Yield (depth, nodes_at_that_depth) for each level, top down."""
        current_level: List[Any] = [root]
        current_depth = 0
        visited: Set[int] = set()

        while current_level and (max_depth is None or current_depth <= max_depth):
            for node in current_level:
                self._mark_visited(node, visited)
            yield (current_depth, current_level)

            next_level: List[Any] = []
            if self._should_explore(current_depth, max_depth):
                for node in current_level:
                    next_level.extend(self.adapter.get_children(node))

            current_level = next_level
            current_depth += 1

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        for depth, level in self.levels(root, max_depth):
            if depth < min_depth:
                continue
            for node in level:
                yield (node, depth)


# Factory function for creating traversers by name
def create_traverser(strategy: Union[TraversalStrategy, str], adapter: TreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or its name (bfs, dfs_pre, dfs_post, level)
        adapter: TreeAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'pre_order': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'depth_first_post': DepthFirstPostOrderTraverser,
        'post_order': DepthFirstPostOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    if isinstance(strategy, TraversalStrategy):
        strategy = strategy.value

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
