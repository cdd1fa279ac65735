"""GHG Sunburst - core module"""

from ghg_sunburst.core.hierarchy_store import EntityTree, build_tree, list_entities
from ghg_sunburst.core.aggregation import AggregatedNode, aggregate, subtree_value
from ghg_sunburst.core.radial_layout import LayoutNode, PartitionLayout, layout
from ghg_sunburst.core.summary_tables import SummaryRow, RingSummaries, build_summaries
from ghg_sunburst.core.selection import (
    ArcTarget,
    Breadcrumb,
    Region,
    SelectionCoordinator,
    SelectionMode,
    SelectionState,
    TableTarget,
)
from ghg_sunburst.core.pipeline import SunburstView, redraw

__all__ = [
    'EntityTree',
    'build_tree',
    'list_entities',
    'AggregatedNode',
    'aggregate',
    'subtree_value',
    'LayoutNode',
    'PartitionLayout',
    'layout',
    'SummaryRow',
    'RingSummaries',
    'build_summaries',
    'ArcTarget',
    'Breadcrumb',
    'Region',
    'SelectionCoordinator',
    'SelectionMode',
    'SelectionState',
    'TableTarget',
    'SunburstView',
    'redraw',
]
