"""Exceptions raised by the collaborators around the sunburst core."""
from __future__ import annotations


class GhgSunburstError(Exception):
    """Base class for package errors."""


class DataLoadError(GhgSunburstError):
    """No configured source could provide the requested JSON document."""

    def __init__(self, description: str, sources, last_error: Exception | None = None):
        self.description = description
        self.sources = list(sources)
        self.last_error = last_error
        super().__init__(f"Failed to load {description} from any source: {last_error}")
