"""sast_checkstyle.io.profile_loader

Load a design-time quality profile from disk.

Expected shape (YAML shown; JSON with the same keys works too)::

    name: Sonar way
    language: java
    rules:
      - repository: checkstyle
        key: com.puppycrawl.tools.checkstyle.checks.coding.EqualsAvoidNullCheck
        configKey: Checker/TreeWalker/EqualsAvoidNull
        severity: MAJOR
        params:
          ignoreEqualsIgnoreCase: false
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from sast_checkstyle.domain.profile import QualityProfile

from .fs import read_structured


def load_profile(path: Union[str, Path]) -> QualityProfile:
    data = read_structured(Path(path))
    if not isinstance(data, dict):
        raise ValueError(f"Profile file must contain a mapping at the top level: {path}")
    return QualityProfile.from_dict(data)
