"""Tree types with their query algorithms."""

from .nary import NaryTree
from .binary import BinaryTree

__all__ = [
    "NaryTree",
    "BinaryTree",
]
