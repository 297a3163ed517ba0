"""sast_checkstyle.domain.profile

Design-time quality profile container.

A profile is a named, per-language set of activated rules that may span
several rule repositories (checkstyle, pmd, ...). The exporter only ever looks
at one repository, so the container keeps each entry's ``repository`` next to
the raw rule mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class QualityProfile:
    name: str
    language: Optional[str] = None
    # None means the profile carries no rule list at all (not even an empty one).
    rules: Optional[List[Dict[str, Any]]] = None

    def __str__(self) -> str:
        if self.language:
            return f"{self.name} ({self.language})"
        return self.name

    def active_rules_by_repository(self, repository: str) -> Optional[List[Dict[str, Any]]]:
        """Return the entries of one repository, in profile order."""
        if self.rules is None:
            return None
        return [r for r in self.rules if str(r.get("repository") or "") == repository]

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "QualityProfile":
        if not isinstance(d, Mapping):
            raise TypeError(f"QualityProfile.from_dict expected mapping, got {type(d)!r}")

        raw_rules = d.get("rules")
        rules: Optional[List[Dict[str, Any]]] = None
        if isinstance(raw_rules, list):
            rules = [dict(r) for r in raw_rules if isinstance(r, Mapping)]

        language = d.get("language")
        return cls(
            name=str(d.get("name") or ""),
            language=str(language) if language else None,
            rules=rules,
        )
