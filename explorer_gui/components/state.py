"""Explorer GUI shared session-state utilities for the GHG sunburst.
Zero-arg safe and side-effect light. Import in panels as:
    from explorer_gui.components.state import get_state, get_coordinator, get_view, set_view
"""
from __future__ import annotations
from typing import Any, Dict, Optional, Tuple
import streamlit as st

from ghg_sunburst.core.pipeline import SunburstView
from ghg_sunburst.core.selection import SelectionCoordinator

# ---- canonical keys (avoid typos across modules) ----
K_COORDINATOR = "selection_coordinator"   # SelectionCoordinator
K_VIEW = "sunburst_view"                  # SunburstView | None
K_VIEW_PARAMS = "sunburst_view_params"    # (sector, min_share, radius) of K_VIEW
K_VIEW_SERIAL = "sunburst_view_serial"    # int, bumped per redraw so widgets start unselected
K_SECTOR = "sector_code"                  # str
K_SEEN_EVENTS = "seen_widget_events"      # dict: widget key -> last selection signature
K_WIDGET_SERIALS = "selection_widget_serials"  # dict: widget name -> int, bumped to remount unselected

# widgets that keep their own selection and report it back as events
SELECTION_WIDGETS = ("sunburst_chart", "ring_table_1", "ring_table_2", "ring_table_3")


def get_state() -> Dict[str, Any]:
    ss = st.session_state
    # Initialize keys if missing to keep modules zero-arg-safe
    if K_COORDINATOR not in ss:
        ss[K_COORDINATOR] = SelectionCoordinator()
    ss.setdefault(K_VIEW, None)
    ss.setdefault(K_VIEW_PARAMS, None)
    ss.setdefault(K_VIEW_SERIAL, 0)
    ss.setdefault(K_SECTOR, None)
    ss.setdefault(K_SEEN_EVENTS, {})
    ss.setdefault(K_WIDGET_SERIALS, {})
    return ss


def get_coordinator() -> SelectionCoordinator:
    return get_state()[K_COORDINATOR]


def get_view() -> Tuple[Optional[SunburstView], Optional[tuple]]:
    ss = get_state()
    return ss[K_VIEW], ss[K_VIEW_PARAMS]


def set_view(view: SunburstView, params: tuple) -> None:
    """Store a fresh redraw; the coordinator is reset onto its layout."""
    ss = get_state()
    ss[K_VIEW] = view
    ss[K_VIEW_PARAMS] = params
    ss[K_VIEW_SERIAL] += 1
    ss[K_SEEN_EVENTS] = {}
    ss[K_WIDGET_SERIALS] = {}
    ss[K_COORDINATOR].reset(view.layout)


def get_sector() -> Optional[str]:
    return get_state()[K_SECTOR]


def set_sector(code: Optional[str]) -> None:
    get_state()[K_SECTOR] = code


def widget_key(name: str) -> str:
    """Widget key scoped to the current redraw and the widget's selection serial."""
    ss = get_state()
    return f"{name}_{ss[K_VIEW_SERIAL]}_{ss[K_WIDGET_SERIALS].get(name, 0)}"


def mark_selection_changed(source: Optional[str] = None) -> None:
    """
    The coordinator changed because of ``source`` (None: a button).
    Every other selection widget gets a new key so it remounts unselected
    and its next click arrives as a fresh selection.
    """
    serials = get_state()[K_WIDGET_SERIALS]
    for name in SELECTION_WIDGETS:
        if name != source:
            serials[name] = serials.get(name, 0) + 1


def consume_event(key: str, signature: tuple) -> Optional[tuple]:
    """
    Previous selection signature when a widget's selection changed, else None.
    Widgets re-report their selection on every rerun; only changes are events.
    """
    seen = get_state()[K_SEEN_EVENTS]
    previous = seen.get(key, ())
    if previous == signature:
        return None
    seen[key] = signature
    return previous
