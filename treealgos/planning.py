"""Execution planning for treealgos.

The ExecutionPlan validates a TraversalConfig and assembles the traverser
and collector that every tree query runs through.
"""

import logging
from typing import Any, Dict, Iterator, Optional, Tuple

from .config import TraversalConfig
from .core.adapter import TreeAdapter
from .core.collector import AggregateCollector, DataCollector, FullNodeCollector
from .core.traverser import TreeTraverser, create_traverser
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    The ExecutionPlan is the bridge between a TraversalConfig and the actual
    walk. Configuration problems are reported before any node is visited.
    """

    def __init__(self,
                 config: TraversalConfig,
                 adapter: TreeAdapter,
                 collector: Optional[DataCollector] = None):
        """Create and validate an execution plan.

        Args:
            config: Traversal configuration
            adapter: Tree adapter for the specific tree type
            collector: What to extract from each node (default: the node itself)

        Raises:
            ConfigurationError: If the configuration is inconsistent
        """
        self.config = config
        self.adapter = adapter

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.collector = collector if collector is not None else FullNodeCollector()

        # Track execution state
        self.nodes_processed = 0

        logger.debug("Created plan %s", self.get_summary())

    def _select_traverser(self) -> TreeTraverser:
        return create_traverser(self.config.strategy, self.adapter)

    def execute(self, root: Optional[Any]) -> Iterator[Tuple[Any, Any]]:
        """Execute the traversal plan.

        Args:
            root: Root node to start traversal from; None means an empty tree

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0

        if root is None:
            return

        for node, depth in self.traverser.traverse(
            root,
            max_depth=self.config.depth.max_depth,
            min_depth=self.config.depth.min_depth
        ):
            if not self.config.depth.should_yield(depth):
                continue

            data = self.collector.collect(node, depth)
            self.nodes_processed += 1
            yield (node, data)

    def aggregate(self, root: Optional[Any]) -> Any:
        """Run the plan to completion and return the collector's result.

        Args:
            root: Root node to start from; None means an empty tree

        Returns:
            Final result of the aggregate collector (its initial value for
            an empty tree)

        Raises:
            TypeError: If the plan's collector does not aggregate
        """
        if not isinstance(self.collector, AggregateCollector):
            raise TypeError(
                f"{self.collector.__class__.__name__} does not produce an aggregate result"
            )

        self.collector.reset()
        for _ in self.execute(root):
            pass
        return self.collector.result

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
