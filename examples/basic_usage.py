#!/usr/bin/env python3
"""
Basic usage example for treealgos.

This example demonstrates:
- Aggregate queries on an n-ary tree
- Depth, path-sum and ancestry queries on a binary tree
- Serializing a binary tree and reading it back
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treealgos import BinaryTree, BinaryTreeNode, NaryTree, TreeNode, get_tree_stats


def main():
    """Build two small trees and query them."""
    nary = NaryTree(TreeNode(1, [
        TreeNode(2, [TreeNode(6)]),
        TreeNode(3, [TreeNode(4), TreeNode(5)]),
    ]))
    print("N-ary tree")
    print("-" * 50)
    print(f"Sum of values:    {nary.sum_values()}")
    print(f"Even values:      {nary.count_evens()}")
    print(f"Values above 3:   {nary.num_greater(3)}")

    fifteen = BinaryTreeNode(15)
    seven = BinaryTreeNode(7)
    nine = BinaryTreeNode(9)
    binary = BinaryTree(BinaryTreeNode(-10, nine, BinaryTreeNode(20, fifteen, seven)))
    print()
    print("Binary tree")
    print("-" * 50)
    print(f"Depth:            {binary.min_depth()}..{binary.max_depth()}")
    print(f"Best path sum:    {binary.max_sum()}")
    print(f"Next above 9:     {binary.next_larger(9)}")
    print(f"15 and 7 cousins: {binary.are_cousins(fifteen, seven)}")
    print(f"LCA of 9 and 7:   {binary.lowest_common_ancestor(nine, seven).value}")

    text = BinaryTree.serialize(binary)
    print(f"Serialized:       {text}")
    print(f"Round trip equal: {BinaryTree.deserialize(text) == binary}")

    stats = get_tree_stats(binary)
    print(f"Nodes/leaves:     {stats['total_nodes']}/{stats['leaf_nodes']}")


if __name__ == "__main__":
    main()
