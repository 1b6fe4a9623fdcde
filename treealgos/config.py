"""Configuration system for treealgos.

This module defines how callers specify traversal order and depth limits,
and how binary trees are rendered to and parsed from text.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class TraversalStrategy(Enum):
    """How to traverse the tree.

    Aggregate queries give the same answer under every strategy; the
    strategy only matters for the order in which nodes are yielded.
    """
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    LEVEL_ORDER = "level"           # Grouped by level


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering (root depth = 0)."""

    min_depth: int = 0                 # Minimum depth to yield
    max_depth: Optional[int] = None    # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be explored."""
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    The ExecutionPlan validates this configuration before any node is
    visited.
    """

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE
    depth: DepthConfig = field(default_factory=DepthConfig)

    @classmethod
    def depth_first(cls, max_depth: Optional[int] = None) -> 'TraversalConfig':
        """Create config for a pre-order walk (the default for aggregates)."""
        return cls(
            strategy=TraversalStrategy.DEPTH_FIRST_PRE,
            depth=DepthConfig(max_depth=max_depth),
        )

    @classmethod
    def breadth_first(cls, max_depth: Optional[int] = None) -> 'TraversalConfig':
        """Create config for a level-by-level walk."""
        return cls(
            strategy=TraversalStrategy.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth),
        )

    @classmethod
    def post_order(cls) -> 'TraversalConfig':
        """Create config for a children-before-parent walk."""
        return cls(strategy=TraversalStrategy.DEPTH_FIRST_POST)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        return errors


@dataclass
class CodecConfig:
    """Text format for serialized binary trees.

    The serialized form is the pre-order token sequence, each token either
    a number or the sentinel, joined by ``separator`` and optionally wrapped
    in brackets. The default is a JSON array with ``null`` marking an absent
    child: ``[1,2,null,null,3,null,null]``.
    """

    sentinel: str = "null"
    separator: str = ","
    open_bracket: str = "["
    close_bracket: str = "]"

    @classmethod
    def json(cls) -> 'CodecConfig':
        """JSON-compatible array format (the default)."""
        return cls()

    @classmethod
    def compact(cls) -> 'CodecConfig':
        """Bracketless format with ``#`` as the sentinel: ``1,2,#,#,3,#,#``."""
        return cls(sentinel="#", separator=",", open_bracket="", close_bracket="")

    @property
    def bracketed(self) -> bool:
        return bool(self.open_bracket)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.sentinel or not self.sentinel.strip():
            errors.append("sentinel cannot be empty")
        elif _looks_numeric(self.sentinel.strip()):
            errors.append(f"sentinel {self.sentinel!r} collides with a numeric token")

        if not self.separator:
            errors.append("separator cannot be empty")
        elif self.sentinel and self.separator in self.sentinel:
            errors.append("sentinel cannot contain the separator")
        elif _has_number_chars(self.separator):
            errors.append(f"separator {self.separator!r} contains characters used in numbers")

        if bool(self.open_bracket) != bool(self.close_bracket):
            errors.append("open_bracket and close_bracket must both be set or both be empty")

        for bracket in (self.open_bracket, self.close_bracket):
            if bracket and self.separator and self.separator in bracket:
                errors.append("brackets cannot contain the separator")
                break

        for bracket in (self.open_bracket, self.close_bracket):
            if bracket and _has_number_chars(bracket):
                errors.append(f"bracket {bracket!r} contains characters used in numbers")

        return errors


def _looks_numeric(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


# Characters that can appear inside a number token
_NUMBER_CHARS = frozenset("+-.eE_")


def _has_number_chars(text: str) -> bool:
    return any(char.isdigit() or char in _NUMBER_CHARS for char in text)
