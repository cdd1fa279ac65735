"""
Sector classification lookup and sector search.

The classification is a JSON-LD document:
    {"@graph": [{"subcategories": [{"sectors": [{"sector_code": ..., "sector_name": ...}]}]}]}
Codes missing from it are shown as themselves.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ghg_sunburst.core.hierarchy_store import list_entities
from ghg_sunburst.data.loader import load_json
from ghg_sunburst.exceptions import DataLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectorOption:
    code: str
    name: str

    @property
    def label(self) -> str:
        return self.name if self.name == self.code else f"{self.name} ({self.code})"


def parse_classification(jsonld: Any) -> Dict[str, str]:
    """Map sector_code -> display name from a classification JSON-LD document."""
    names: Dict[str, str] = {}
    if not isinstance(jsonld, Mapping):
        return names
    for category in jsonld.get("@graph") or []:
        for subcategory in (category or {}).get("subcategories") or []:
            for sector in (subcategory or {}).get("sectors") or []:
                code = (sector or {}).get("sector_code")
                if code:
                    names[str(code)] = sector.get("sector_name") or sector.get("commodity_name") or str(code)
    return names


def load_classification(
    sources: Iterable[str],
    *,
    timeout: float = 15.0,
    base_dir: Optional[Path] = None,
) -> Dict[str, str]:
    """Classification map, or an empty map (codes shown as-is) when no source loads."""
    try:
        jsonld = load_json(sources, "sector classification", timeout=timeout, base_dir=base_dir)
    except DataLoadError as e:
        logger.warning("Classification JSON-LD not found; defaulting to sector codes. %s", e)
        return {}
    names = parse_classification(jsonld)
    logger.info("Sector classification: %d sectors", len(names))
    return names


class SectorCatalog:
    """Selectable sectors of a dataset with human-readable names."""

    def __init__(self, codes: Iterable[str], names: Optional[Mapping[str, str]] = None):
        self.names = dict(names or {})
        self.options: List[SectorOption] = sorted(
            (SectorOption(code=c, name=self.name_for(c)) for c in codes),
            key=lambda o: o.name,
        )

    @classmethod
    def from_dataset(cls, dataset: Any, names: Optional[Mapping[str, str]] = None) -> "SectorCatalog":
        return cls(list_entities(dataset), names)

    def __len__(self) -> int:
        return len(self.options)

    def name_for(self, code: str) -> str:
        return self.names.get(code) or code

    def search(self, query: str, limit: int = 50) -> List[SectorOption]:
        """Case-insensitive substring match on code or name; all options for a blank query."""
        q = (query or "").strip().lower()
        if not q:
            return list(self.options)
        hits = [o for o in self.options if q in o.code.lower() or q in o.name.lower()]
        return hits[:limit]

    def exact_match(self, query: str) -> Optional[SectorOption]:
        q = (query or "").strip().lower()
        if not q:
            return None
        return next((o for o in self.options if o.code.lower() == q), None)

    def default_option(self, hint: str = "iron and steel", code: str = "331110") -> Optional[SectorOption]:
        for option in self.options:
            if hint.lower() in option.name.lower() or option.code == code:
                return option
        return self.options[0] if self.options else None
