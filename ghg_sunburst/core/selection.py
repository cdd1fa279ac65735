"""
Selection Coordinator
Hover/lock state machine shared by the sunburst chart and the ring tables

A target is either one arc of the current layout or one ring-table row.
Rows collapse every occurrence of a name at a depth, so resolving a row
yields a set of arcs that may sit under several activity categories; the
highlight sets, breadcrumb and centre value are all derived from that set.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple, Union

from ghg_sunburst.core.constants import (
    DIM_OPACITY,
    FULL_OPACITY,
    GROUP_INDENT,
    PATH_SEPARATOR,
)
from ghg_sunburst.core.radial_layout import LayoutNode, PartitionLayout
from ghg_sunburst.core.summary_tables import SummaryRow

logger = logging.getLogger(__name__)


class SelectionMode(str, Enum):
    NONE = "none"
    HOVER_PREVIEW = "hover_preview"
    LOCKED = "locked"


class Region(str, Enum):
    """
    Where a click that hit neither an arc nor a row landed.

    Streamlit exposes no outside-click event, so the explorer only sends
    CHART_BACKGROUND (plotly deselect, "Clear selection"); OUTSIDE is for
    hosts that can report clicks elsewhere on the page.
    """
    CHART_BACKGROUND = "chart_background"
    CONTROLS = "controls"
    OUTSIDE = "outside"


@dataclass(frozen=True, eq=False)
class ArcTarget:
    node: LayoutNode

    kind = "arc"

    def same_as(self, other) -> bool:
        return isinstance(other, ArcTarget) and other.node is self.node


@dataclass(frozen=True)
class TableTarget:
    name: str
    depth: int
    # pre-summed row value, shown when the row resolves to several arcs
    value: Optional[float] = field(default=None, compare=False)

    kind = "table"

    @classmethod
    def from_row(cls, row: SummaryRow) -> "TableTarget":
        return cls(name=row.name, depth=row.depth, value=row.value)

    def same_as(self, other) -> bool:
        return isinstance(other, TableTarget) and (other.name, other.depth) == (self.name, self.depth)


Target = Union[ArcTarget, TableTarget]


@dataclass(frozen=True)
class SelectionState:
    mode: SelectionMode = SelectionMode.NONE
    target: Optional[Target] = None

    @property
    def is_none(self) -> bool:
        return self.mode is SelectionMode.NONE

    @property
    def is_locked(self) -> bool:
        return self.mode is SelectionMode.LOCKED

    @property
    def is_hover(self) -> bool:
        return self.mode is SelectionMode.HOVER_PREVIEW


NO_SELECTION = SelectionState()


@dataclass(frozen=True)
class Breadcrumb:
    """One path (root excluded) per matching arc."""
    paths: Tuple[Tuple[str, ...], ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.paths

    @property
    def is_grouped(self) -> bool:
        return len(self.paths) > 1

    def groups(self) -> List[Tuple[str, List[Tuple[str, ...]]]]:
        """Paths grouped by activity category, in first-seen order; sub-paths drop the header."""
        grouped: Dict[str, List[Tuple[str, ...]]] = {}
        for path in self.paths:
            if path:
                grouped.setdefault(path[0], []).append(path[1:])
        return list(grouped.items())

    def lines(self) -> List[str]:
        if self.is_empty:
            return []
        if not self.is_grouped:
            return [PATH_SEPARATOR.join(self.paths[0])]
        out: List[str] = []
        for i, (category, sub_paths) in enumerate(self.groups()):
            if i:
                out.append("")
            out.append(category)
            out.extend(GROUP_INDENT + PATH_SEPARATOR.join(sub) for sub in sub_paths if sub)
        return out

    def render(self) -> str:
        return "\n".join(self.lines())


class SelectionCoordinator:
    """
    Single owner of the selection state.

    Views report pointer and click events and read the derived highlight
    sets; they never change the state directly. A locked selection ignores
    hover events until it is toggled off, replaced by another click, or
    reset by a redraw.
    """

    def __init__(self, layout: Optional[PartitionLayout] = None):
        self._layout = layout
        self._state = NO_SELECTION

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def layout(self) -> Optional[PartitionLayout]:
        return self._layout

    # ---- transitions -------------------------------------------------

    def reset(self, layout: Optional[PartitionLayout] = None) -> SelectionState:
        """Redraw: bind the new layout and drop any selection."""
        self._layout = layout
        return self._set(NO_SELECTION, "redraw")

    def pointer_enter(self, target: Target) -> SelectionState:
        if self._state.is_locked or not self._is_hit_target(target):
            return self._state
        return self._set(SelectionState(SelectionMode.HOVER_PREVIEW, target), "enter")

    def pointer_leave(self) -> SelectionState:
        if self._state.is_hover:
            return self._set(NO_SELECTION, "leave")
        return self._state

    def click(self, target: Target) -> SelectionState:
        if not self._is_hit_target(target):
            return self._state
        current = self._state
        if current.is_locked and current.target is not None and current.target.same_as(target):
            return self._set(NO_SELECTION, "toggle off")
        return self._set(SelectionState(SelectionMode.LOCKED, target), "click")

    def click_region(self, region: Region) -> SelectionState:
        if not self._state.is_locked:
            return self._state
        if region is Region.CHART_BACKGROUND:
            return self._set(NO_SELECTION, "background click")
        # outside clicks only release table selections
        if region is Region.OUTSIDE and isinstance(self._state.target, TableTarget):
            return self._set(NO_SELECTION, "outside click")
        return self._state

    def _set(self, state: SelectionState, reason: str) -> SelectionState:
        logger.debug("selection %s -> %s (%s)", self._state.mode.value, state.mode.value, reason)
        self._state = state
        return state

    def _is_hit_target(self, target: Target) -> bool:
        if isinstance(target, ArcTarget):
            return target.node.visible and target.node.depth > 0
        return isinstance(target, TableTarget)

    # ---- resolution --------------------------------------------------

    def matching_nodes(self, target: Optional[Target] = None) -> List[LayoutNode]:
        """Arcs a target resolves to; stale or missing targets resolve to nothing."""
        target = self._state.target if target is None else target
        if target is None or self._layout is None:
            return []
        if isinstance(target, ArcTarget):
            return [target.node] if self._layout.contains(target.node) else []
        return self._layout.find(target.name, target.depth)

    def current_highlight_set(self) -> FrozenSet[LayoutNode]:
        """Matching arcs plus all their descendants and ancestors."""
        highlighted = set()
        for node in self.matching_nodes():
            highlighted.update(node.descendants())
            highlighted.update(node.ancestors())
        return frozenset(highlighted)

    def highlighted_rows(self) -> FrozenSet[Tuple[str, int]]:
        """(name, depth) keys of the table rows on every matching arc's path."""
        return frozenset(
            (node.name, node.depth)
            for match in self.matching_nodes()
            for node in match.path_nodes()
        )

    def arc_opacity(self, node: LayoutNode, highlighted: Optional[FrozenSet[LayoutNode]] = None) -> float:
        """Pass ``highlighted`` when painting many arcs to build the set once."""
        if highlighted is None:
            highlighted = self.current_highlight_set()
        if not highlighted or node in highlighted:
            return FULL_OPACITY
        return DIM_OPACITY

    def current_breadcrumb(self) -> Breadcrumb:
        return Breadcrumb(tuple(node.path() for node in self.matching_nodes()))

    def current_center_value(self) -> Optional[float]:
        matches = self.matching_nodes()
        if not matches:
            return None
        if len(matches) == 1:
            return matches[0].value
        target = self._state.target
        if isinstance(target, TableTarget) and target.value is not None:
            return target.value
        return sum(node.value for node in matches)
