"""Core abstractions for treealgos.

Nodes hold data, adapters know how to navigate them, traversers walk them
and collectors extract or fold data along the way.
"""

from .node import TreeNode, BinaryTreeNode, Number
from .adapter import TreeAdapter, NaryTreeAdapter, BinaryTreeAdapter, adapter_for
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    FullNodeCollector,
    ValueCollector,
    DepthCollector,
    AggregateCollector,
    SumCollector,
    CountCollector,
    MinAboveCollector,
    CustomCollector,
)

__all__ = [
    "TreeNode",
    "BinaryTreeNode",
    "Number",
    "TreeAdapter",
    "NaryTreeAdapter",
    "BinaryTreeAdapter",
    "adapter_for",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "DataCollector",
    "FullNodeCollector",
    "ValueCollector",
    "DepthCollector",
    "AggregateCollector",
    "SumCollector",
    "CountCollector",
    "MinAboveCollector",
    "CustomCollector",
]
