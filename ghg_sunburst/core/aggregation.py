"""
Aggregation Engine
Bottom-up value fold over an EntityTree
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from ghg_sunburst.core.hierarchy_store import EntityTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregatedNode:
    """EntityTree node decorated with its aggregated value."""
    name: str
    value: float
    identifier: Optional[str] = None
    category_kind: Optional[str] = None
    children: Tuple["AggregatedNode", ...] = ()

    def walk(self, depth: int = 0) -> Iterator[Tuple["AggregatedNode", int]]:
        """Pre-order (node, depth) pairs, self at ``depth``."""
        yield self, depth
        for child in self.children:
            yield from child.walk(depth + 1)


def _leaf_value(node: EntityTree) -> float:
    raw: Any = node.contribution
    if raw is None:
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric contribution %r on %s", raw, node.name)
        return 0.0
    if not math.isfinite(value) or value < 0:
        logger.warning("Ignoring contribution %r on %s", raw, node.name)
        return 0.0
    return value


def aggregate(node: EntityTree) -> AggregatedNode:
    """
    Fold leaf contributions bottom-up into a fresh AggregatedNode tree.

    A node with children takes the sum of its children even when it also
    declares a contribution; the declared value only counts for leaves.
    """
    if node.is_leaf:
        return AggregatedNode(
            name=node.name,
            value=_leaf_value(node),
            identifier=node.identifier,
            category_kind=node.category_kind,
        )
    children = tuple(aggregate(child) for child in node.children)
    return AggregatedNode(
        name=node.name,
        value=sum(child.value for child in children),
        identifier=node.identifier,
        category_kind=node.category_kind,
        children=children,
    )


def subtree_value(node: EntityTree) -> float:
    """Aggregated value of ``node`` without keeping the decorated tree."""
    if node.is_leaf:
        return _leaf_value(node)
    return sum(subtree_value(child) for child in node.children)
