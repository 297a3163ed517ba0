"""sast_checkstyle.domain

Domain objects shared by the loaders and the exporter.

Key idea
--------
Rules arrive in two shapes (a design-time profile entry and a runtime scanner
rule). Both are normalized into :class:`RuleRecord` so the exporter never has
to know where a rule came from.
"""

from __future__ import annotations

from .profile import QualityProfile
from .rule import RuleRecord, normalize_rule, to_checkstyle_severity

__all__ = [
    "QualityProfile",
    "RuleRecord",
    "normalize_rule",
    "to_checkstyle_severity",
]
