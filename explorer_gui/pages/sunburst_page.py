import streamlit as st
from typing import Any, Dict, Optional

from ghg_sunburst.config import Settings
from ghg_sunburst.core.constants import GROUP_INDENT, PATH_SEPARATOR
from ghg_sunburst.core.formatting import figure_title, format_pct
from ghg_sunburst.core.pipeline import redraw
from ghg_sunburst.core.selection import Region
from ghg_sunburst.data.sectors import SectorCatalog

from explorer_gui.components.state import (
    get_coordinator,
    get_sector,
    get_view,
    mark_selection_changed,
    set_sector,
    set_view,
)
from explorer_gui.components.sunburst_chart import render_sunburst
from explorer_gui.components.ring_tables import render_ring_tables


def _sector_controls(catalog: SectorCatalog, settings: Settings) -> Optional[str]:
    """Search box + sector select; returns the chosen sector code."""
    st.sidebar.subheader("Sector")
    query = st.sidebar.text_input("Search sectors", "", key="sector_search",
                                  help="Filter by sector code or name")
    options = catalog.search(query, limit=settings.search_limit)
    exact = catalog.exact_match(query)
    if exact is not None:
        set_sector(exact.code)

    if not options:
        st.sidebar.warning("No sectors match the search.")
        return get_sector()

    codes = [o.code for o in options]
    current = get_sector()
    if current not in codes:
        default = catalog.default_option(settings.default_sector_hint, settings.default_sector_code)
        current = default.code if default and default.code in codes else codes[0]

    chosen = st.sidebar.selectbox(
        "USEEIO Sector",
        options=codes,
        index=codes.index(current),
        format_func=lambda c: catalog.name_for(c),
    )
    set_sector(chosen)
    return chosen


def _render_breadcrumb(coordinator) -> None:
    crumb = coordinator.current_breadcrumb()
    if crumb.is_empty:
        st.caption("Click an arc or a table row to lock a selection.")
        return
    if not crumb.is_grouped:
        st.markdown(f"**{crumb.render()}**")
        return
    for category, sub_paths in crumb.groups():
        st.markdown(f"**{category}**")
        for sub in sub_paths:
            if sub:
                st.markdown(f"&nbsp;&nbsp;&nbsp;{GROUP_INDENT}{PATH_SEPARATOR.join(sub)}")


def show_sunburst(dataset: Dict[str, Any], catalog: SectorCatalog, settings: Settings) -> None:
    sector = _sector_controls(catalog, settings)
    min_pct = st.sidebar.number_input(
        "Minimum share (%)", min_value=0.0, max_value=100.0,
        value=float(settings.default_min_pct), step=0.5, key="min_pct",
    )
    force = st.sidebar.button("Redraw", type="primary")

    if not sector:
        st.info("No sector selected.")
        return

    size = settings.chart_size()
    params = (sector, max(0.0, min_pct) / 100, size / 2)
    view, current_params = get_view()
    if force or view is None or current_params != params:
        view = redraw(dataset, sector, params[1], radius=params[2])
        set_view(view, params)

    coordinator = get_coordinator()
    st.subheader(figure_title(catalog.name_for(sector)))

    left, right = st.columns([3, 2])
    with left:
        changed = render_sunburst(view, coordinator, size)
    with right:
        st.markdown("#### Selection")
        _render_breadcrumb(coordinator)
        value = coordinator.current_center_value()
        if value is not None:
            st.metric("Contribution", format_pct(value))
        if st.button("Clear selection", disabled=not coordinator.state.is_locked):
            coordinator.click_region(Region.CHART_BACKGROUND)
            mark_selection_changed()
            changed = True

    st.divider()
    changed = render_ring_tables(view.summaries, coordinator) or changed
    if changed:
        st.rerun()
