"""Testing utilities for treealgos.

This package provides sample trees and independent reference helpers for
testing code that uses treealgos.
"""

from .fixtures import (
    binary_from_level_order,
    binary_chain,
    flatten_binary_values,
    flatten_nary_values,
    random_binary_tree,
    random_nary_tree,
    sample_binary_tree,
    sample_nary_tree,
    path_sum_tree,
)

__all__ = [
    "binary_from_level_order",
    "binary_chain",
    "flatten_binary_values",
    "flatten_nary_values",
    "random_binary_tree",
    "random_nary_tree",
    "sample_binary_tree",
    "sample_nary_tree",
    "path_sum_tree",
]
