"""GHG Sunburst - GHG sources disaggregation explorer"""

from ghg_sunburst.core import (
    EntityTree,
    build_tree,
    AggregatedNode,
    aggregate,
    LayoutNode,
    PartitionLayout,
    layout,
    SummaryRow,
    RingSummaries,
    build_summaries,
    SelectionCoordinator,
    SunburstView,
    redraw,
)
from ghg_sunburst.exceptions import GhgSunburstError, DataLoadError

__version__ = '0.1.0'

__all__ = [
    'EntityTree',
    'build_tree',
    'AggregatedNode',
    'aggregate',
    'LayoutNode',
    'PartitionLayout',
    'layout',
    'SummaryRow',
    'RingSummaries',
    'build_summaries',
    'SelectionCoordinator',
    'SunburstView',
    'redraw',
    'GhgSunburstError',
    'DataLoadError',
]
