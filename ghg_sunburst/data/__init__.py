"""GHG Sunburst - data sources"""

from ghg_sunburst.data.loader import load_json
from ghg_sunburst.data.sectors import (
    SectorCatalog,
    SectorOption,
    load_classification,
    parse_classification,
)

__all__ = [
    'load_json',
    'SectorCatalog',
    'SectorOption',
    'load_classification',
    'parse_classification',
]
