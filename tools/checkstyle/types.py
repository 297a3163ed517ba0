from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import CHECKER_FILTERS_KEY, CHECKER_TAB_WIDTH, TREEWALKER_FILTERS_KEY


@dataclass(frozen=True)
class ExporterSettings:
    """Read-only settings consumed by the exporter.

    The filter fields hold raw XML fragments that are spliced into the
    document verbatim.
    """
    checker_filters: Optional[str] = None
    treewalker_filters: Optional[str] = None
    tab_width: Optional[str] = None

    def get(self, key: str) -> Optional[str]:
        """Look up a value by its Sonar property key."""
        if key == CHECKER_FILTERS_KEY:
            return self.checker_filters
        if key == TREEWALKER_FILTERS_KEY:
            return self.treewalker_filters
        if key == CHECKER_TAB_WIDTH:
            return self.tab_width
        return None


@dataclass(frozen=True)
class SonarConfig:
    """Connection settings for SonarQube / SonarCloud API calls."""
    host: str
    token: str
    organization: Optional[str] = None
