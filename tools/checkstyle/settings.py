"""tools/checkstyle/settings.py

Settings loading for the exporter.

Sources, lowest to highest precedence:

1. an optional settings file (YAML or JSON) keyed by Sonar property keys::

     sonar.checkstyle.tabWidth: 4
     sonar.checkstyle.filters: '<module name="SuppressWarningsFilter" />'

2. environment variables (``SONAR_CHECKSTYLE_FILTERS``,
   ``SONAR_CHECKSTYLE_TREEWALKER_FILTERS``, ``SONAR_CHECKSTYLE_TAB_WIDTH``).

``.env`` loading is left to the entrypoint so nothing here touches the
process environment at import time.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from sast_checkstyle.io.fs import read_structured

from .constants import CHECKER_FILTERS_KEY, CHECKER_TAB_WIDTH, ENV_VARS, TREEWALKER_FILTERS_KEY
from .types import ExporterSettings, SonarConfig


# Repo root = parent of tools/
ROOT_DIR = Path(__file__).resolve().parents[2]
ENV_PATH: Path = ROOT_DIR / ".env"

SONAR_HOST_DEFAULT = "https://sonarcloud.io"


def _as_setting(v: Any) -> Optional[str]:
    if v is None:
        return None
    return str(v)


def settings_from_mapping(values: Mapping[str, Any]) -> ExporterSettings:
    """Build settings from a mapping keyed by Sonar property keys."""
    return ExporterSettings(
        checker_filters=_as_setting(values.get(CHECKER_FILTERS_KEY)),
        treewalker_filters=_as_setting(values.get(TREEWALKER_FILTERS_KEY)),
        tab_width=_as_setting(values.get(CHECKER_TAB_WIDTH)),
    )


def load_settings(
    path: Optional[Union[str, Path]] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
) -> ExporterSettings:
    """Merge the settings file (if any) with environment overrides."""
    values: Dict[str, Any] = {}

    if path is not None:
        data = read_structured(Path(path))
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file must contain a mapping at the top level: {path}")
        values.update(data)

    environ = os.environ if env is None else env
    for key, var in ENV_VARS.items():
        if var in environ:
            values[key] = environ[var]

    return settings_from_mapping(values)


def get_sonar_config(env: Optional[Mapping[str, str]] = None) -> SonarConfig:
    environ = os.environ if env is None else env
    token = environ.get("SONAR_TOKEN")
    if not token:
        raise SystemExit("ERROR: SONAR_TOKEN is not set.")
    return SonarConfig(
        host=environ.get("SONAR_HOST", SONAR_HOST_DEFAULT),
        token=token,
        organization=environ.get("SONAR_ORG") or None,
    )
