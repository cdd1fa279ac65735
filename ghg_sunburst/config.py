"""
Runtime settings for the explorer app and CLI.

Defaults point at the published Flowsa GHG sources extract. Environment
variables override single values:

    GHG_SUNBURST_DATA_URL   dataset source tried before the defaults
    GHG_SUNBURST_CLASS_URL  classification source tried before the defaults
    GHG_SUNBURST_MIN_PCT    default minimum share in percent
    GHG_SUNBURST_TIMEOUT    HTTP timeout in seconds
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

OWNER = "DecarbNexus"
REPO = "Flowsa_extract_GHG_sources"
DATA_FILENAME = "industry_sunburst.json"
CLASS_FILENAME = "sector_classification.jsonld"

DEFAULT_DATA_SOURCES = (
    "data/" + DATA_FILENAME,
    f"https://raw.githubusercontent.com/{OWNER}/{REPO}/main/outputs/industry/{DATA_FILENAME}",
    "../outputs/industry/" + DATA_FILENAME,
)

DEFAULT_CLASS_SOURCES = (
    "data/" + CLASS_FILENAME,
    f"https://raw.githubusercontent.com/{OWNER}/{REPO}/main/docs/data/{CLASS_FILENAME}",
    "../docs/data/" + CLASS_FILENAME,
)


@dataclass(frozen=True)
class Settings:
    """Explorer settings; immutable, build a new one with ``replace``."""
    data_sources: Tuple[str, ...] = DEFAULT_DATA_SOURCES
    class_sources: Tuple[str, ...] = DEFAULT_CLASS_SOURCES
    default_sector_hint: str = "iron and steel"
    default_sector_code: str = "331110"
    default_min_pct: float = 0.0
    request_timeout: float = 15.0
    chart_scale: float = 0.75  # fraction of container width
    chart_max_width: int = 900
    chart_min_size: int = 315
    search_limit: int = 50

    def chart_size(self, container_width: Optional[int] = None) -> int:
        """Square chart size in pixels for a container width."""
        width = min(self.chart_max_width, container_width or 700)
        return max(self.chart_min_size, int(width * self.chart_scale))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        settings = cls()

        data_url = env.get("GHG_SUNBURST_DATA_URL")
        if data_url:
            settings = replace(settings, data_sources=(data_url,) + settings.data_sources)

        class_url = env.get("GHG_SUNBURST_CLASS_URL")
        if class_url:
            settings = replace(settings, class_sources=(class_url,) + settings.class_sources)

        min_pct = _parse_float(env, "GHG_SUNBURST_MIN_PCT")
        if min_pct is not None:
            settings = replace(settings, default_min_pct=max(0.0, min_pct))

        timeout = _parse_float(env, "GHG_SUNBURST_TIMEOUT")
        if timeout is not None and timeout > 0:
            settings = replace(settings, request_timeout=timeout)

        return settings


def _parse_float(env: Mapping[str, str], key: str) -> Optional[float]:
    raw = env.get(key)
    if raw is None or raw == "":
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", key, raw)
        return None
