"""sast_checkstyle.domain.rule

Uniform view over one active Checkstyle rule.

Rules reach the exporter in two shapes:

* **design-time profile rules** (a quality profile stored on disk)::

    {"key": "...", "configKey": "Checker/TreeWalker/X", "severity": "MAJOR",
     "templateKey": null, "params": {"format": "^[a-z]+$"}}

* **runtime scanner rules** (what the server reports as active)::

    {"ruleKey": "...", "internalKey": "Checker/TreeWalker/X",
     "severity": "MAJOR", "templateRuleKey": null,
     "params": [{"key": "format", "value": "^[a-z]+$"}]}

Both are adapted into :class:`RuleRecord`. The adapters never raise: missing
severity, template or parameters simply become absent/empty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


# Sonar priority -> Checkstyle severity.
SONAR_TO_CHECKSTYLE_SEVERITY: Dict[str, str] = {
    "BLOCKER": "error",
    "CRITICAL": "error",
    "MAJOR": "warning",
    "MINOR": "info",
    "INFO": "info",
}

CHECKSTYLE_SEVERITIES = frozenset({"error", "warning", "info", "ignore"})


def _optional_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    # YAML turns `true`/`false` into bools; Checkstyle wants the lowercase words.
    if isinstance(v, bool):
        return "true" if v else "false"
    return str(v)


def to_checkstyle_severity(severity: Any) -> Optional[str]:
    """Map a Sonar priority (or an existing Checkstyle severity) to Checkstyle.

    Returns None for blank or unknown values.
    """
    s = _optional_str(severity)
    if s is None or not s.strip():
        return None
    s = s.strip()
    mapped = SONAR_TO_CHECKSTYLE_SEVERITY.get(s.upper())
    if mapped:
        return mapped
    if s.lower() in CHECKSTYLE_SEVERITIES:
        return s.lower()
    logger.debug("Unknown severity %r; omitting it", s)
    return None


def _parse_params(raw: Any) -> Dict[str, Optional[str]]:
    """Accept either a mapping or a list of ``{"key": ..., "value": ...}``."""
    out: Dict[str, Optional[str]] = {}
    if isinstance(raw, Mapping):
        for k, v in raw.items():
            if k is None:
                continue
            out[str(k)] = _optional_str(v)
        return out
    if isinstance(raw, (list, tuple)):
        for entry in raw:
            if not isinstance(entry, Mapping):
                continue
            k = entry.get("key")
            if k is None:
                continue
            out[str(k)] = _optional_str(entry.get("value"))
    return out


@dataclass(frozen=True)
class RuleRecord:
    """One active rule, independent of the shape it was loaded from."""

    module_path: str
    rule_key: str
    severity: Optional[str] = None
    template_key: Optional[str] = None
    parameters: Dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def module_name(self) -> str:
        """Final path segment, e.g. ``EqualsAvoidNull`` for ``Checker/TreeWalker/EqualsAvoidNull``.

        A path with no ``/`` yields the whole path. Sonar's Java exporter
        (``substringAfterLast``) yields an empty name there, which Checkstyle
        rejects as an unknown module.
        """
        return self.module_path.rsplit("/", 1)[-1]

    @property
    def is_template_instance(self) -> bool:
        return bool(self.template_key)

    @classmethod
    def from_profile_rule(cls, d: Mapping[str, Any]) -> "RuleRecord":
        """Adapt a design-time quality profile entry."""
        if not isinstance(d, Mapping):
            d = {}
        template = _optional_str(d.get("templateKey"))
        return cls(
            module_path=_optional_str(d.get("configKey")) or "",
            rule_key=_optional_str(d.get("key")) or "",
            severity=to_checkstyle_severity(d.get("severity")),
            template_key=template or None,
            parameters=_parse_params(d.get("params")),
        )

    @classmethod
    def from_scanner_rule(cls, d: Mapping[str, Any]) -> "RuleRecord":
        """Adapt a runtime active rule as reported by the server."""
        if not isinstance(d, Mapping):
            d = {}
        template = _optional_str(d.get("templateRuleKey"))
        return cls(
            module_path=_optional_str(d.get("internalKey")) or "",
            rule_key=_optional_str(d.get("ruleKey")) or "",
            severity=to_checkstyle_severity(d.get("severity")),
            template_key=template or None,
            parameters=_parse_params(d.get("params")),
        )


def normalize_rule(raw: Any) -> RuleRecord:
    """Return the uniform view for any supported rule shape.

    Dispatch:
      - RuleRecord        -> returned as-is
      - has ``configKey`` -> design-time profile rule
      - otherwise         -> runtime scanner rule
    """
    if isinstance(raw, RuleRecord):
        return raw
    if isinstance(raw, Mapping) and "configKey" in raw:
        return RuleRecord.from_profile_rule(raw)
    return RuleRecord.from_scanner_rule(raw)
