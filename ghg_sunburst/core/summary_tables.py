"""
Summary Table Aggregator
One row per distinct name and ring, summed over every parent branch
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ghg_sunburst.core.aggregation import AggregatedNode
from ghg_sunburst.core.constants import ACTIVITY_CATEGORY, GAS_CATEGORY
from ghg_sunburst.core.radial_layout import sort_by_category_order


@dataclass(frozen=True)
class SummaryRow:
    name: str
    depth: int
    value: float

    @property
    def key(self):
        return (self.name, self.depth)


@dataclass
class RingSummaries:
    """Rows for the inner (1), middle (2) and outer (3) ring tables."""
    depth1: List[SummaryRow] = field(default_factory=list)
    depth2: List[SummaryRow] = field(default_factory=list)
    depth3: List[SummaryRow] = field(default_factory=list)

    def rows(self, depth: int) -> List[SummaryRow]:
        return {1: self.depth1, 2: self.depth2, 3: self.depth3}.get(depth, [])

    def all_rows(self) -> List[SummaryRow]:
        return self.depth1 + self.depth2 + self.depth3

    def find(self, name: str, depth: int):
        for row in self.rows(depth):
            if row.name == name:
                return row
        return None


def _grouped(totals: Dict[str, float], depth: int) -> List[SummaryRow]:
    rows = [SummaryRow(name=name, depth=depth, value=value) for name, value in totals.items()]
    return sorted(rows, key=lambda r: -r.value)


def build_summaries(aggregated_root: AggregatedNode) -> RingSummaries:
    """
    Collapse the tree into three flat tables.

    The same activity type or gas category usually appears under several
    activity categories; each table keeps one row per name with the summed
    value, while the chart keeps every occurrence as its own arc.
    """
    ring1 = [
        SummaryRow(name=child.name, depth=1, value=child.value)
        for child in aggregated_root.children
        if child.category_kind == ACTIVITY_CATEGORY
    ]

    ring2: Dict[str, float] = {}
    ring3: Dict[str, float] = {}
    for node, depth in aggregated_root.walk():
        if depth == 2:
            ring2[node.name] = ring2.get(node.name, 0.0) + node.value
        # gas detail is tagged, not fixed at depth 3
        if depth > 0 and node.category_kind == GAS_CATEGORY:
            ring3[node.name] = ring3.get(node.name, 0.0) + node.value

    return RingSummaries(
        depth1=sort_by_category_order(ring1, 1),
        depth2=_grouped(ring2, 2),
        depth3=_grouped(ring3, 3),
    )
