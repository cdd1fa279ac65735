"""
Radial Partition Layout
Angular/radial sunburst geometry for an aggregated tree

Geometry follows the usual partition layout: the root owns the full circle
and the centre band, every child receives a contiguous slice of its parent's
angular span proportional to its value, and each depth occupies one ring of
uniform thickness.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, TypeVar

from ghg_sunburst.core.aggregation import AggregatedNode
from ghg_sunburst.core.constants import (
    CANONICAL_CATEGORY_ORDER,
    CATEGORY_COLORS,
    FALLBACK_COLOR,
)

FULL_CIRCLE = 2 * math.pi
DEFAULT_RADIUS = 350.0

T = TypeVar("T")


def sort_by_category_order(items: Sequence[T], depth: int) -> List[T]:
    """
    Order siblings for display.

    At depth 1 the canonical activity categories come first, in canonical
    order; every other sibling follows by descending value. ``sorted`` is
    stable, so ties keep insertion order.
    """
    if depth == 1:
        rank = {name: i for i, name in enumerate(CANONICAL_CATEGORY_ORDER)}
        known = sorted((it for it in items if it.name in rank), key=lambda it: rank[it.name])
        rest = sorted((it for it in items if it.name not in rank), key=lambda it: -it.value)
        return known + rest
    return sorted(items, key=lambda it: -it.value)


def category_color(name: Optional[str]) -> str:
    return CATEGORY_COLORS.get(name or "", FALLBACK_COLOR)


def clamp_share(min_share) -> float:
    """Clamp a threshold to >= 0; None and NaN count as 0."""
    try:
        share = float(min_share)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(share):
        return 0.0
    return max(0.0, share)


@dataclass(eq=False)
class LayoutNode:
    """Aggregated node with sunburst geometry. Compared by identity."""
    name: str
    value: float
    depth: int
    key: Tuple[int, ...]
    identifier: Optional[str] = None
    category_kind: Optional[str] = None
    angle_start: float = 0.0
    angle_end: float = 0.0
    radius_inner: float = 0.0
    radius_outer: float = 0.0
    pad_angle: float = 0.0
    visible: bool = True
    color: str = FALLBACK_COLOR
    parent: Optional["LayoutNode"] = field(default=None, repr=False)
    children: List["LayoutNode"] = field(default_factory=list, repr=False)

    @property
    def span(self) -> float:
        return self.angle_end - self.angle_start

    @property
    def paint_start(self) -> float:
        return min(self.angle_start + self.pad_angle / 2, self.mid_angle)

    @property
    def paint_end(self) -> float:
        return max(self.angle_end - self.pad_angle / 2, self.mid_angle)

    @property
    def mid_angle(self) -> float:
        return (self.angle_start + self.angle_end) / 2

    def ancestors(self) -> List["LayoutNode"]:
        """Self first, root last."""
        out = []
        node: Optional[LayoutNode] = self
        while node is not None:
            out.append(node)
            node = node.parent
        return out

    def descendants(self) -> Iterator["LayoutNode"]:
        """Pre-order, self first."""
        yield self
        for child in self.children:
            yield from child.descendants()

    def path(self) -> Tuple[str, ...]:
        """Names from the depth-1 ancestor down to self; root excluded."""
        return tuple(n.name for n in reversed(self.ancestors()) if n.depth > 0)

    def path_nodes(self) -> List["LayoutNode"]:
        return [n for n in reversed(self.ancestors()) if n.depth > 0]

    def contains_point(self, angle: float, radius: float) -> bool:
        return (
            self.radius_inner <= radius < self.radius_outer
            and self.angle_start <= angle < self.angle_end
        )


@dataclass
class PartitionLayout:
    """Laid-out tree plus a flat index used for hit-testing."""
    root: LayoutNode
    radius: float
    min_share: float
    nodes: List[LayoutNode] = field(default_factory=list)
    index: Dict[Tuple[int, ...], LayoutNode] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    @property
    def total(self) -> float:
        return self.root.value

    def visible_nodes(self) -> List[LayoutNode]:
        return [n for n in self.nodes if n.visible]

    def contains(self, node: LayoutNode) -> bool:
        return self.index.get(node.key) is node

    def find(self, name: str, depth: int) -> List[LayoutNode]:
        """Every node with this name at this depth, in layout order."""
        return [n for n in self.nodes if n.depth == depth and n.name == name]

    def hit_test(self, angle: float, radius: float) -> Optional[LayoutNode]:
        """Visible arc under the polar point (angle in radians from 12 o'clock)."""
        angle = angle % FULL_CIRCLE
        for node in self.nodes:
            if node.visible and node.contains_point(angle, radius):
                return node
        return None


def layout(
    aggregated_root: AggregatedNode,
    min_share: float = 0.0,
    radius: float = DEFAULT_RADIUS,
    pad_angle: Optional[float] = None,
) -> PartitionLayout:
    """
    Lay out ``aggregated_root`` as a sunburst of the given outer radius.

    Nodes deeper than the first ring are visible only when their share of
    the root value reaches ``min_share``; invisible nodes keep geometry.
    """
    share = clamp_share(min_share)
    pad = (1.0 / radius if radius > 0 else 0.0) if pad_angle is None else max(0.0, pad_angle)
    height = max(depth for _, depth in aggregated_root.walk())
    band = radius / (height + 1)
    total = aggregated_root.value

    def visible(value: float, depth: int) -> bool:
        if total <= 0:
            return False
        if depth <= 1:
            return True
        return value / total >= share

    result = PartitionLayout(
        root=LayoutNode(name=aggregated_root.name, value=total, depth=0, key=()),
        radius=radius,
        min_share=share,
    )

    def place(agg: AggregatedNode, node: LayoutNode, start: float, end: float) -> None:
        node.angle_start, node.angle_end = start, end
        node.radius_inner = node.depth * band
        node.radius_outer = (node.depth + 1) * band
        node.pad_angle = pad
        node.visible = visible(agg.value, node.depth)

        depth = node.depth + 1
        k = (end - start) / agg.value if agg.value > 0 else 0.0
        cursor = start
        ordered = sort_by_category_order(list(agg.children), depth)
        for i, child in enumerate(ordered):
            child_node = LayoutNode(
                name=child.name,
                value=child.value,
                depth=depth,
                key=node.key + (i,),
                identifier=child.identifier,
                category_kind=child.category_kind,
                color=category_color(child.name) if depth == 1 else node.color,
                parent=node,
            )
            node.children.append(child_node)
            result.nodes.append(child_node)
            result.index[child_node.key] = child_node
            child_end = end if i == len(ordered) - 1 and k > 0 else cursor + child.value * k
            place(child, child_node, cursor, child_end)
            cursor = child_end

    root = result.root
    root.identifier = aggregated_root.identifier
    root.category_kind = aggregated_root.category_kind
    result.index[root.key] = root
    place(aggregated_root, root, 0.0, FULL_CIRCLE)
    return result
