"""
JSON source loading with fallbacks.

Each source is tried in order; http(s) URLs are fetched with ``requests``,
anything else is read as a local path relative to ``base_dir``.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

import requests

from ghg_sunburst.exceptions import DataLoadError

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _read_source(source: str, timeout: float, base_dir: Optional[Path]) -> Any:
    if _is_url(source):
        response = requests.get(source, timeout=timeout, headers={"Cache-Control": "no-store"})
        response.raise_for_status()
        return response.json()
    path = Path(source)
    if not path.is_absolute() and base_dir is not None:
        path = base_dir / path
    return json.loads(path.read_text(encoding="utf-8"))


def _record_count(data: Any) -> int:
    if isinstance(data, dict):
        children = data.get("children")
        return len(children) if isinstance(children, list) else len(data)
    if isinstance(data, list):
        return len(data)
    return 0


def load_json(
    sources: Iterable[str],
    description: str = "data",
    *,
    timeout: float = 15.0,
    base_dir: Optional[Path] = None,
) -> Any:
    """Return the first source that loads and parses; raise DataLoadError otherwise."""
    sources = list(sources)
    last_error: Optional[Exception] = None
    for source in sources:
        try:
            data = _read_source(source, timeout, base_dir)
        except (requests.RequestException, OSError, ValueError) as e:
            logger.debug("Could not load %s from %s: %s", description, source, e)
            last_error = e
            continue
        logger.info("Loaded %s from: %s (records: %d)", description, source, _record_count(data))
        return data
    raise DataLoadError(description, sources, last_error)
