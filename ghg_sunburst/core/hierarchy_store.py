"""
Hierarchy Store
Extracts one root entity's subtree from the raw sunburst dataset
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from ghg_sunburst.core.constants import (
    CATEGORY_KIND_KEYS,
    CONTRIBUTION_KEYS,
    IDENTIFIER_KEYS,
    NO_DATA_LABEL,
    NOT_FOUND_LABEL,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityTree:
    """Subtree of one root entity; rebuilt on every redraw, never mutated."""
    name: str
    identifier: Optional[str] = None
    category_kind: Optional[str] = None
    contribution: Any = None
    children: Tuple["EntityTree", ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to render (sentinel or entity without data)."""
        return not self.children


def _first(raw: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def raw_identifier(raw: Mapping[str, Any]) -> Optional[str]:
    value = _first(raw, IDENTIFIER_KEYS)
    return None if value is None else str(value)


def _convert(raw: Any) -> Optional[EntityTree]:
    if not isinstance(raw, Mapping):
        return None
    children = raw.get("children")
    converted = tuple(
        child for child in (_convert(c) for c in (children if isinstance(children, list) else []))
        if child is not None
    )
    return EntityTree(
        name=str(raw.get("name") or "Unknown"),
        identifier=raw_identifier(raw),
        category_kind=_first(raw, CATEGORY_KIND_KEYS),
        contribution=_first(raw, CONTRIBUTION_KEYS),
        children=converted,
    )


def _top_level(dataset: Any) -> Optional[List[Any]]:
    if not isinstance(dataset, Mapping):
        return None
    children = dataset.get("children")
    return children if isinstance(children, list) else None


def build_tree(dataset: Any, root_identifier: str) -> EntityTree:
    """
    Return the subtree of the top-level child whose identifier or name
    equals ``root_identifier``.

    Malformed datasets and unknown identifiers give an empty sentinel tree
    instead of an error.
    """
    if _top_level(dataset) is None:
        logger.error("Invalid hierarchy data structure: no top-level children list")
        return EntityTree(name=NO_DATA_LABEL)

    raw = find_entity(dataset, root_identifier)
    if raw is None:
        logger.warning("Sector %s not found in data", root_identifier)
        return EntityTree(name=NOT_FOUND_LABEL)

    # the root label falls back to the requested identifier
    return replace(_convert(raw), name=str(raw.get("name") or root_identifier))


def find_entity(dataset: Any, root_identifier: str) -> Optional[Mapping[str, Any]]:
    """Raw top-level child matching by identifier or name, if any."""
    for raw in _top_level(dataset) or []:
        if not isinstance(raw, Mapping):
            continue
        if raw_identifier(raw) == root_identifier or raw.get("name") == root_identifier:
            return raw
    return None


def list_entities(dataset: Any) -> List[str]:
    """Identifiers of all top-level entities, in dataset order."""
    entities = _top_level(dataset) or []
    codes = []
    for raw in entities:
        if isinstance(raw, Mapping):
            code = raw_identifier(raw)
            if code:
                codes.append(code)
    return codes
