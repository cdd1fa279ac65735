"""
Constants and taxonomies shared by the sunburst core.
"""

# Category kinds tagged on raw nodes
ACTIVITY_CATEGORY = "activity_category"
GAS_CATEGORY = "gas_category"

# Depth-1 ring order, inner ring of the chart and first summary table
CANONICAL_CATEGORY_ORDER = (
    "Electric Power Generation",
    "Fuel Combustion",
    "Process & Fugitive Gases",
)

CATEGORY_COLORS = {
    "Electric Power Generation": "#0099CC",
    "Fuel Combustion": "#FF6B6B",
    "Process & Fugitive Gases": "#9C27B0",
}
FALLBACK_COLOR = "#93c5fd"

# Raw field aliases, first present key wins
IDENTIFIER_KEYS = ("identifier", "useeio_code")
CATEGORY_KIND_KEYS = ("category_kind", "categoryKind", "category")
CONTRIBUTION_KEYS = ("contribution", "contributionToUSEEIOSectorScope1Percent", "value")

# Sentinel tree labels
NO_DATA_LABEL = "No Data"
NOT_FOUND_LABEL = "Sector Not Found"

# Arc opacity
FULL_OPACITY = 0.9
DIM_OPACITY = 0.3

# Breadcrumb glyphs
PATH_SEPARATOR = " ▸ "
GROUP_INDENT = "├─ "

RING_TITLES = {
    1: "Inner Ring: Activity Category",
    2: "Middle Ring: Activity Type",
    3: "Outer Ring: Gas Category",
}
