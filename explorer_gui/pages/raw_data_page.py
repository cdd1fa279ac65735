import json
import streamlit as st
from typing import Any, Dict

from ghg_sunburst.core.hierarchy_store import find_entity

from explorer_gui.components.collapsible_tree import render_aggregated_tree, render_collapsible_tree
from explorer_gui.components.state import get_sector, get_view


def show_raw_data(dataset: Dict[str, Any]) -> None:
    st.title("Sector Data")
    sector = get_sector()
    if not sector:
        st.info("Pick a sector on the Sunburst page first.")
        return

    raw = find_entity(dataset, sector)
    if raw is None:
        st.warning(f"Sector {sector} not found in data.")
        return

    tab1, tab2, tab3 = st.tabs(["🌲 Aggregated Tree", "📁 Raw Tree", "📋 Raw JSON"])

    with tab1:
        view, _ = get_view()
        if view is None or view.is_empty:
            st.info("Nothing aggregated yet.")
        else:
            render_aggregated_tree(view.aggregated)

    with tab2:
        render_collapsible_tree(raw, label=sector)

    with tab3:
        st.code(json.dumps(raw, indent=2), language="json")
        st.download_button(
            "Download sector JSON",
            data=json.dumps(raw, indent=2),
            file_name=f"{sector}_sunburst.json",
            mime="application/json",
        )
