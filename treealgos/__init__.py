"""treealgos - Recursive tree algorithms over n-ary and binary trees.

Build a tree from nodes, then query it:

    from treealgos import BinaryTree, BinaryTreeNode

    tree = BinaryTree(BinaryTreeNode(1, BinaryTreeNode(2), BinaryTreeNode(3)))
    tree.max_depth()                # 2
    BinaryTree.serialize(tree)      # "[1,2,null,null,3,null,null]"

Both tree kinds share one set of adapters, traversers and collectors
(see treealgos.core), which the functional helpers in treealgos.api also
use.
"""

import logging

__version__ = "0.3.0"

from .errors import (
    TreeAlgosError,
    ConfigurationError,
    TreeStructureError,
    EncodeError,
    DecodeError,
)
from .config import TraversalStrategy, DepthConfig, TraversalConfig, CodecConfig
from .core import TreeNode, BinaryTreeNode
from .planning import ExecutionPlan
from .trees import NaryTree, BinaryTree
from .api import (
    traverse_tree,
    collect_values,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "TreeAlgosError",
    "ConfigurationError",
    "TreeStructureError",
    "EncodeError",
    "DecodeError",
    # Config
    "TraversalStrategy",
    "DepthConfig",
    "TraversalConfig",
    "CodecConfig",
    "ExecutionPlan",
    # Trees
    "TreeNode",
    "BinaryTreeNode",
    "NaryTree",
    "BinaryTree",
    # API
    "traverse_tree",
    "collect_values",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_stats",
]
