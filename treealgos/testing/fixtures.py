"""Test fixtures for treealgos consumers.

Builders for the sample trees used throughout the test-suite, plus
flatteners written as plain recursion so that query results can be checked
against a computation that shares no code with the library's traversers.
"""

import random
from collections import deque
from typing import List, Optional, Sequence

from ..core.node import BinaryTreeNode, Number, TreeNode
from ..trees import BinaryTree, NaryTree


def sample_nary_tree() -> NaryTree:
    """N-ary tree used by the aggregate tests.

    Structure:
        1
        ├── 2
        │   └── 6
        ├── 3
        │   ├── 4
        │   └── 5
        └── 2
    """
    return NaryTree(
        TreeNode(1, [
            TreeNode(2, [TreeNode(6)]),
            TreeNode(3, [TreeNode(4), TreeNode(5)]),
            TreeNode(2),
        ])
    )


def sample_binary_tree() -> BinaryTree:
    """Root 1 with leaf children 2 and 3."""
    return BinaryTree(BinaryTreeNode(1, BinaryTreeNode(2), BinaryTreeNode(3)))


def path_sum_tree() -> BinaryTree:
    """The classic path-sum example; its best path 15 -> 20 -> 7 sums to 42.

    Structure:
          -10
          /  \\
         9    20
             /  \\
            15   7
    """
    return BinaryTree(
        BinaryTreeNode(
            -10,
            BinaryTreeNode(9),
            BinaryTreeNode(20, BinaryTreeNode(15), BinaryTreeNode(7)),
        )
    )


def binary_from_level_order(values: Sequence[Optional[Number]]) -> BinaryTree:
    """Build a binary tree from a level-order list with None for gaps.

    Children are only listed for present nodes, e.g. ``[1, None, 2, 3]`` is
    1 with right child 2, whose left child is 3.
    """
    if not values or values[0] is None:
        return BinaryTree()

    root = BinaryTreeNode(values[0])
    queue = deque([root])
    index = 1
    while queue and index < len(values):
        node = queue.popleft()
        if index < len(values) and values[index] is not None:
            node.left = BinaryTreeNode(values[index])
            queue.append(node.left)
        index += 1
        if index < len(values) and values[index] is not None:
            node.right = BinaryTreeNode(values[index])
            queue.append(node.right)
        index += 1
    return BinaryTree(root)


def binary_chain(length: int, side: str = 'right') -> BinaryTree:
    """Degenerate tree: ``length`` nodes each hanging off ``side`` of the previous."""
    root = None
    for value in range(length, 0, -1):
        node = BinaryTreeNode(value)
        setattr(node, side, root)
        root = node
    return BinaryTree(root)


def random_binary_tree(size: int, seed: int = 0, low: int = -50, high: int = 50) -> BinaryTree:
    """Random binary tree with ``size`` nodes and integer values in [low, high]."""
    rng = random.Random(seed)
    if size <= 0:
        return BinaryTree()

    nodes = [BinaryTreeNode(rng.randint(low, high))]
    for _ in range(size - 1):
        child = BinaryTreeNode(rng.randint(low, high))
        while True:
            parent = rng.choice(nodes)
            free = [side for side in ('left', 'right') if getattr(parent, side) is None]
            if free:
                setattr(parent, rng.choice(free), child)
                break
        nodes.append(child)
    return BinaryTree(nodes[0])


def random_nary_tree(size: int, seed: int = 0, low: int = -50, high: int = 50) -> NaryTree:
    """Random n-ary tree with ``size`` nodes and integer values in [low, high]."""
    rng = random.Random(seed)
    if size <= 0:
        return NaryTree()

    nodes = [TreeNode(rng.randint(low, high))]
    for _ in range(size - 1):
        child = TreeNode(rng.randint(low, high))
        rng.choice(nodes).children.append(child)
        nodes.append(child)
    return NaryTree(nodes[0])


def flatten_nary_values(node: Optional[TreeNode]) -> List[Number]:
    """All values of an n-ary (sub)tree, pre-order, by plain recursion."""
    if node is None:
        return []
    values = [node.value]
    for child in node.children:
        values.extend(flatten_nary_values(child))
    return values


def flatten_binary_values(node: Optional[BinaryTreeNode]) -> List[Number]:
    """All values of a binary (sub)tree, pre-order, by plain recursion."""
    if node is None:
        return []
    return [node.value] + flatten_binary_values(node.left) + flatten_binary_values(node.right)
