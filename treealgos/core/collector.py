"""Data collection strategies for treealgos.

DataCollectors define what information to extract from nodes during
traversal. Aggregate collectors additionally fold every visited node into a
running result, which is how the tree queries compute sums and counts in a
single pass.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from .node import Number


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, node: Any, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class FullNodeCollector(DataCollector):
    """Returns the node itself."""

    def collect(self, node: Any, depth: int) -> Any:
        return node


class ValueCollector(DataCollector):
    """Returns the node's value."""

    def collect(self, node: Any, depth: int) -> Number:
        return node.value


class DepthCollector(DataCollector):
    """Returns (value, depth) pairs."""

    def collect(self, node: Any, depth: int) -> tuple:
        return (node.value, depth)


class AggregateCollector(DataCollector):
    """Base class for collectors that fold node values into one result.

    Subclasses implement combine(); collect() returns the running result
    after the node has been folded in, and ``result`` holds the final value
    once traversal is done.
    """

    def __init__(self, initial: Any = None):
        self._initial = initial
        self.result = initial

    @abstractmethod
    def combine(self, current: Any, value: Number) -> Any:
        """Fold one node value into the running result."""
        pass

    def collect(self, node: Any, depth: int) -> Any:
        self.result = self.combine(self.result, node.value)
        return self.result

    def reset(self) -> None:
        """Restore the initial result so the collector can be reused."""
        self.result = self._initial


class SumCollector(AggregateCollector):
    """Sums node values. Result is 0 when nothing was visited."""

    def __init__(self):
        super().__init__(0)

    def combine(self, current: Number, value: Number) -> Number:
        return current + value


class CountCollector(AggregateCollector):
    """Counts nodes whose value satisfies a predicate."""

    def __init__(self, predicate: Callable[[Number], bool]):
        super().__init__(0)
        self.predicate = predicate

    def combine(self, current: int, value: Number) -> int:
        return current + 1 if self.predicate(value) else current


class MinAboveCollector(AggregateCollector):
    """Tracks the smallest value strictly greater than a lower bound.

    Result is None until a qualifying value has been seen.
    """

    def __init__(self, lower_bound: Number):
        super().__init__(None)
        self.lower_bound = lower_bound

    def combine(self, current: Optional[Number], value: Number) -> Optional[Number]:
        if value > self.lower_bound and (current is None or value < current):
            return value
        return current


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, collect_func: Callable[[Any, int], Any]):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node, depth) -> Any
        """
        self.collect_func = collect_func

    def collect(self, node: Any, depth: int) -> Any:
        return self.collect_func(node, depth)
