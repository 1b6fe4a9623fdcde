"""Exception hierarchy for treealgos.

Empty trees and query nodes that are not part of a tree are NOT errors:
queries return their identity result (0, None or False) for those. The
exceptions below cover configuration mistakes, trees that break the
single-owner invariant, and serialized data that cannot be decoded.
"""


class TreeAlgosError(Exception):
    """Base class for all treealgos errors."""
    pass


class ConfigurationError(TreeAlgosError):
    """Raised when a traversal or codec configuration is inconsistent."""
    pass


class TreeStructureError(TreeAlgosError):
    """Raised when a node is reachable more than once (shared subtree or cycle)."""

    def __init__(self, node, message=None):
        self.node = node
        super().__init__(message or f"Node reached twice during traversal: {node!r}")


class EncodeError(TreeAlgosError, ValueError):
    """Raised when a tree holds a value that has no token representation."""
    pass


class DecodeError(TreeAlgosError, ValueError):
    """Raised when serialized data is not a valid pre-order encoding.

    Attributes:
        position: Token index at which decoding failed (None if the failure
            happened before tokenization finished)
    """

    def __init__(self, message: str, position=None):
        self.position = position
        if position is not None:
            message = f"{message} (at token {position})"
        super().__init__(message)
