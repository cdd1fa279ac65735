"""Sunburst chart: plotly Barpolar bars drawn from the computed LayoutNode geometry."""
from __future__ import annotations
import math
from typing import List, Optional, Tuple
import plotly.graph_objects as go
import streamlit as st

from ghg_sunburst.core.formatting import format_pct, tooltip_text
from ghg_sunburst.core.pipeline import SunburstView
from ghg_sunburst.core.radial_layout import LayoutNode
from ghg_sunburst.core.selection import ArcTarget, Region, SelectionCoordinator

from explorer_gui.components.state import consume_event, mark_selection_changed, widget_key

CHART_WIDGET = "sunburst_chart"


def build_sunburst_figure(
    view: SunburstView,
    coordinator: SelectionCoordinator,
    size: int,
    panel_color: str = "#111111",
) -> Tuple[go.Figure, List[LayoutNode]]:
    """Figure plus the painted arcs, in trace point order."""
    arcs = view.layout.visible_nodes()
    highlighted = coordinator.current_highlight_set()
    fig = go.Figure()
    fig.add_trace(go.Barpolar(
        r=[n.radius_outer - n.radius_inner - 1 for n in arcs],
        base=[n.radius_inner for n in arcs],
        theta=[math.degrees(n.mid_angle) for n in arcs],
        width=[math.degrees(n.paint_end - n.paint_start) for n in arcs],
        marker=dict(
            color=[n.color for n in arcs],
            opacity=[coordinator.arc_opacity(n, highlighted) for n in arcs],
            line=dict(width=0),
        ),
        customdata=[n.key for n in arcs],
        hovertext=[tooltip_text(n).replace("\n", "<br/>") for n in arcs],
        hoverinfo="text",
    ))

    # centre disc keeps the label clear of the first ring
    first_ring = next((n for n in arcs if n.depth == 1), None)
    inner = first_ring.radius_inner if first_ring else view.layout.radius * 0.33
    fig.add_trace(go.Barpolar(
        r=[max(inner - 1, 0)], theta=[0], width=[360], base=0,
        marker=dict(color=panel_color, line=dict(width=0)),
        hoverinfo="skip", showlegend=False,
    ))

    fig.update_layout(
        width=size,
        height=size,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        clickmode="event+select",
        polar=dict(
            radialaxis=dict(visible=False, range=[0, view.layout.radius]),
            angularaxis=dict(visible=False, rotation=90, direction="clockwise"),
            bargap=0,
        ),
        annotations=[dict(
            text=format_pct(coordinator.current_center_value()),
            x=0.5, y=0.5, xref="paper", yref="paper",
            showarrow=False, font=dict(size=18),
        )],
    )
    return fig, arcs


def _selected_index(event) -> Optional[int]:
    try:
        points = event.selection.points
    except AttributeError:
        points = (event or {}).get("selection", {}).get("points", [])
    for p in points or []:
        if p.get("curve_number", 0) != 0:
            continue
        idx = p.get("point_index", p.get("point_number"))
        if idx is not None:
            return int(idx)
    return None


def render_sunburst(view: SunburstView, coordinator: SelectionCoordinator, size: int) -> bool:
    """
    Draw the chart and feed click selections to the coordinator.
    Returns True when the selection state changed (caller reruns to repaint).
    """
    if view.is_empty or view.layout.is_empty:
        st.info(f"{view.tree.name}: nothing to render.")
        return False

    fig, arcs = build_sunburst_figure(view, coordinator, size)
    key = widget_key(CHART_WIDGET)
    event = st.plotly_chart(
        fig,
        use_container_width=False,
        on_select="rerun",
        selection_mode="points",
        key=key,
    )

    idx = _selected_index(event)
    signature = (idx,) if idx is not None else ()
    previous = consume_event(key, signature)
    if previous is None:
        return False

    before = coordinator.state
    if idx is not None and 0 <= idx < len(arcs):
        coordinator.click(ArcTarget(arcs[idx]))
    elif previous:
        # plotly drops the selection on a background click or double click
        coordinator.click_region(Region.CHART_BACKGROUND)
    changed = coordinator.state != before
    if changed:
        mark_selection_changed(CHART_WIDGET)
    return changed
