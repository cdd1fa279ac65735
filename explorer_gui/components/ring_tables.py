"""Ring breakdown tables: one table per sunburst ring, rows synced with the chart selection."""
from __future__ import annotations
from typing import FrozenSet, List, Tuple
import pandas as pd
import streamlit as st

from ghg_sunburst.core.constants import CATEGORY_COLORS, RING_TITLES
from ghg_sunburst.core.formatting import format_pct
from ghg_sunburst.core.selection import SelectionCoordinator, TableTarget
from ghg_sunburst.core.summary_tables import RingSummaries, SummaryRow

from explorer_gui.components.state import consume_event, mark_selection_changed, widget_key

HIGHLIGHT_STYLE = "background-color: rgba(255, 214, 102, 0.35); font-weight: 600"


def ring_frame(rows: List[SummaryRow], depth: int) -> pd.DataFrame:
    df = pd.DataFrame(
        [{"Name": r.name, "Contribution": format_pct(r.value), "value": r.value} for r in rows],
        columns=["Name", "Contribution", "value"],
    )
    if depth == 1:
        df.insert(0, "", [_swatch(r.name) for r in rows])
    return df


def _swatch(name: str) -> str:
    return "■" if name in CATEGORY_COLORS else ""


def _style(df: pd.DataFrame, depth: int, highlighted: FrozenSet[Tuple[str, int]]):
    def row_style(row):
        on = (row["Name"], depth) in highlighted
        return [HIGHLIGHT_STYLE if on else "" for _ in row]

    styler = df.style.apply(row_style, axis=1)
    if depth == 1 and len(df):
        colors = [CATEGORY_COLORS.get(n, "") for n in df["Name"]]
        styler = styler.apply(lambda _: [f"color: {c}" if c else "" for c in colors], subset=[""], axis=0)
    return styler


def render_ring_tables(summaries: RingSummaries, coordinator: SelectionCoordinator) -> bool:
    """Three ring tables; returns True when a row click changed the selection."""
    highlighted = coordinator.highlighted_rows()
    changed = False
    cols = st.columns(3)
    for depth, col in zip((1, 2, 3), cols):
        rows = summaries.rows(depth)
        with col:
            st.markdown(f"**{RING_TITLES[depth]}**")
            if not rows:
                st.caption("No rows.")
                continue
            df = ring_frame(rows, depth)
            name = f"ring_table_{depth}"
            key = widget_key(name)
            event = st.dataframe(
                _style(df, depth, highlighted),
                column_config={"value": None},
                hide_index=True,
                use_container_width=True,
                on_select="rerun",
                selection_mode="single-row",
                key=key,
            )
            selected = list(event.selection.rows) if event is not None else []
            previous = consume_event(key, tuple(selected))
            if previous is None:
                continue
            before = coordinator.state
            if selected:
                coordinator.click(TableTarget.from_row(rows[selected[0]]))
            elif previous and previous[0] < len(rows):
                # deselecting the row is a second click on it
                coordinator.click(TableTarget.from_row(rows[previous[0]]))
            if coordinator.state != before:
                mark_selection_changed(name)
                changed = True
    return changed
