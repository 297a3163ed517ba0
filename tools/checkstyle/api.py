"""tools/checkstyle/api.py

All SonarQube / SonarCloud HTTP calls live here.

Design goals:
  - Keep network I/O separated from rule normalization and XML rendering.
  - Fail loudly: an export built from a partial rule list would silently
    drop checks, so HTTP errors propagate instead of returning partial data.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from .constants import REPOSITORY_KEY
from .types import SonarConfig

PAGE_SIZE = 500


def _auth_headers(cfg: SonarConfig) -> Dict[str, str]:
    return {"Authorization": f"Bearer {cfg.token}"}


def _pick_active(actives: List[Dict[str, Any]], profile_key: str) -> Dict[str, Any]:
    """Pick this profile's activation (a rule can be active in several profiles)."""
    for active in actives:
        if active.get("qProfile") == profile_key:
            return active
    return actives[0] if actives else {}


def to_scanner_rule(rule: Dict[str, Any], active: Dict[str, Any]) -> Dict[str, Any]:
    """Merge one ``rules[]`` entry with its activation into the scanner rule shape."""
    return {
        "ruleKey": rule.get("key"),
        "repository": rule.get("repo") or REPOSITORY_KEY,
        "internalKey": rule.get("internalKey"),
        "templateRuleKey": rule.get("templateKey"),
        "severity": active.get("severity") or rule.get("severity"),
        "params": active.get("params") or [],
    }


def fetch_active_rules(
    cfg: SonarConfig,
    profile_key: str,
    *,
    repository: str = REPOSITORY_KEY,
    page_size: int = PAGE_SIZE,
    timeout: int = 30,
) -> List[Dict[str, Any]]:
    """Fetch the rules activated in a quality profile via /api/rules/search (paginated)."""
    headers = _auth_headers(cfg)
    out: List[Dict[str, Any]] = []
    page = 1

    while True:
        params: Dict[str, Any] = {
            "qprofile": profile_key,
            "activation": "true",
            "repositories": repository,
            "f": "internalKey,templateKey,params,actives",
            "ps": page_size,
            "p": page,
        }
        if cfg.organization:
            params["organization"] = cfg.organization

        resp = requests.get(
            f"{cfg.host.rstrip('/')}/api/rules/search",
            params=params,
            headers=headers,
            timeout=timeout,
        )
        resp.raise_for_status()
        data = resp.json() or {}

        rules = data.get("rules") or []
        actives = data.get("actives") or {}
        for rule in rules:
            active = _pick_active(actives.get(rule.get("key")) or [], profile_key)
            out.append(to_scanner_rule(rule, active))

        total: Optional[int] = data.get("total")
        if len(rules) < page_size or (total is not None and len(out) >= total):
            break
        page += 1

    return out
