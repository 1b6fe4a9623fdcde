"""High-level API for treealgos.

Simple functional interfaces over either tree kind. Every function accepts
a NaryTree, a BinaryTree, or a bare root node (TreeNode/BinaryTreeNode);
empty trees yield nothing and count as zero.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from .config import DepthConfig, TraversalConfig, TraversalStrategy
from .core.adapter import TreeAdapter, adapter_for
from .core.collector import DepthCollector, ValueCollector
from .core.node import Number
from .planning import ExecutionPlan


def traverse_tree(
    tree: Any,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Any]:
    """Iterate over the nodes of a tree.

    Args:
        tree: Tree or root node to walk
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post, level)
        max_depth: Maximum depth to traverse (root = 0)
        min_depth: Minimum depth before yielding nodes

    Yields:
        Nodes in traversal order

    Example:
        >>> tree = BinaryTree(BinaryTreeNode(1, BinaryTreeNode(2), BinaryTreeNode(3)))
        >>> [node.value for node in traverse_tree(tree, strategy="bfs")]
        [1, 2, 3]
    """
    root, adapter = _resolve(tree)
    if root is None:
        return

    config = TraversalConfig(
        strategy=_parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
    )
    plan = ExecutionPlan(config, adapter)

    for node, _ in plan.execute(root):
        yield node


def collect_values(
    tree: Any,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
) -> List[Number]:
    """Return every node value in traversal order."""
    root, adapter = _resolve(tree)
    if root is None:
        return []

    plan = ExecutionPlan(
        TraversalConfig(strategy=_parse_strategy(strategy)), adapter, ValueCollector()
    )
    return [value for _, value in plan.execute(root)]


def count_nodes(tree: Any, **kwargs) -> int:
    """Count nodes in a tree.

    Args:
        tree: Tree or root node
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes (0 for an empty tree)
    """
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def find_nodes(tree: Any, predicate: Callable[[Any], bool], **kwargs) -> Iterator[Any]:
    """Find nodes that match a predicate.

    Args:
        tree: Tree or root node
        predicate: Function that returns True for matching nodes
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Nodes that match the predicate

    Example:
        >>> odd = list(find_nodes(tree, lambda n: n.value % 2 == 1))
    """
    for node in traverse_tree(tree, **kwargs):
        if predicate(node):
            yield node


def get_leaf_nodes(tree: Any, **kwargs) -> Iterator[Any]:
    """Get all leaf nodes in a tree.

    Yields:
        Leaf nodes (nodes with no children)
    """
    for node in traverse_tree(tree, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_stats(tree: Any) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height
        (nodes on the longest root-to-leaf path), depths (node count per
        depth, root = 0), value_sum, min_value and max_value (None when
        empty)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'depths': {},
        'value_sum': 0,
        'min_value': None,
        'max_value': None,
    }

    root, adapter = _resolve(tree)
    if root is not None:
        plan = ExecutionPlan(TraversalConfig.breadth_first(), adapter, DepthCollector())
        for node, (value, depth) in plan.execute(root):
            stats['total_nodes'] += 1
            if adapter.is_leaf(node):
                stats['leaf_nodes'] += 1

            stats['height'] = max(stats['height'], depth + 1)
            stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

            stats['value_sum'] += value
            if stats['min_value'] is None or value < stats['min_value']:
                stats['min_value'] = value
            if stats['max_value'] is None or value > stats['max_value']:
                stats['max_value'] = value

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats


# Helper functions

def _resolve(tree: Any) -> Tuple[Optional[Any], Optional[TreeAdapter]]:
    """Split a tree (or bare node) into (root, adapter)."""
    if tree is None:
        return None, None
    adapter = adapter_for(tree)
    root = tree.root if hasattr(tree, 'root') else tree
    return root, adapter


def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'pre_order': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
        'post_order': TraversalStrategy.DEPTH_FIRST_POST,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")
