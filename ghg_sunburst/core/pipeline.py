"""
Redraw pipeline
HierarchyStore -> AggregationEngine -> {RadialPartitionLayout, SummaryTableAggregator}
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ghg_sunburst.core.aggregation import AggregatedNode, aggregate
from ghg_sunburst.core.hierarchy_store import EntityTree, build_tree
from ghg_sunburst.core.radial_layout import DEFAULT_RADIUS, PartitionLayout, layout
from ghg_sunburst.core.selection import SelectionCoordinator
from ghg_sunburst.core.summary_tables import RingSummaries, build_summaries

logger = logging.getLogger(__name__)


@dataclass
class SunburstView:
    """Everything derived for one root entity; shared read-only by all views."""
    root_identifier: str
    tree: EntityTree
    aggregated: AggregatedNode
    layout: PartitionLayout
    summaries: RingSummaries

    @property
    def is_empty(self) -> bool:
        return self.tree.is_empty

    @property
    def total(self) -> float:
        return self.aggregated.value


def redraw(
    dataset: Any,
    root_identifier: str,
    min_share: float = 0.0,
    *,
    radius: float = DEFAULT_RADIUS,
    coordinator: Optional[SelectionCoordinator] = None,
) -> SunburstView:
    """
    Rebuild tree, layout and summaries from scratch.

    When a coordinator is given its selection is reset and bound to the
    new layout.
    """
    tree = build_tree(dataset, root_identifier)
    aggregated = aggregate(tree)
    view = SunburstView(
        root_identifier=root_identifier,
        tree=tree,
        aggregated=aggregated,
        layout=layout(aggregated, min_share, radius=radius),
        summaries=build_summaries(aggregated),
    )
    logger.debug(
        "redraw %s: %d arcs (%d visible), total %.4f",
        root_identifier, len(view.layout.nodes), len(view.layout.visible_nodes()), view.total,
    )
    if coordinator is not None:
        coordinator.reset(view.layout)
    return view
