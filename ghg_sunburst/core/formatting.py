"""Display strings shared by the explorer app and the CLI."""
from __future__ import annotations

from typing import Optional

from ghg_sunburst.core.constants import PATH_SEPARATOR
from ghg_sunburst.core.radial_layout import LayoutNode


def format_pct(value: Optional[float]) -> str:
    """Contribution shares are fractions; 0.1234 -> '12.3%'."""
    if value is None:
        return ""
    return f"{value:.1%}"


def tooltip_text(node: LayoutNode) -> str:
    return f"{PATH_SEPARATOR.join(node.path())}\nContribution: {format_pct(node.value or 0)}"


def figure_title(sector_name: str) -> str:
    return (
        f"{sector_name} Scope 1 emissions disaggregated by Activity Category, "
        "Activity Type, and Gas Category (% of total Scope 1 MTCO2e emissions)"
    )
