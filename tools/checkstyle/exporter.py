"""tools/checkstyle/exporter.py

Render active Checkstyle rules as a Checkstyle configuration document.

Layout of the generated document::

  <?xml ...?><!DOCTYPE ...><!-- Generated by Sonar --><module name="Checker">
    tabWidth property, checker filters, Checker-level modules
    <module name="TreeWalker">
      SuppressWarningsHolder, TreeWalker modules, tree-walker filters
    </module>
  </module>

Ordering rules
--------------
Rules are grouped by their module path (``configKey`` / ``internalKey``).

* Checker-level groups are written in the grouping dict's iteration order.
  Nothing downstream depends on it, so it is left unsorted.
* TreeWalker groups are written sorted by path (case-insensitive), since
  Checkstyle runs tree-walker checks in configuration order.
* Rules inside a group always keep input order; duplicates are kept.

Filter fragments from the settings are trusted XML authored by the platform
and are spliced in verbatim. Everything derived from rules is escaped.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol
from xml.sax.saxutils import escape

from sast_checkstyle.domain.profile import QualityProfile
from sast_checkstyle.domain.rule import RuleRecord, normalize_rule

from .constants import (
    CHECKER_FILTERS_KEY,
    CHECKER_TAB_WIDTH,
    DOCTYPE_DECLARATION,
    GENERATED_COMMENT,
    MIME_TYPE,
    PLUGIN_NAME,
    REPOSITORY_KEY,
    SUPPORTED_LANGUAGES,
    SUPPRESS_WARNINGS_FILTER,
    SUPPRESS_WARNINGS_HOLDER,
    TREE_WALKER_PREFIX,
    TREEWALKER_FILTERS_KEY,
    XML_DECLARATION,
)
from .types import ExporterSettings

logger = logging.getLogger(__name__)

CLOSE_MODULE = "</module>"

# Whitespace as character references so parsers do not normalize it to spaces.
_ATTR_ENTITIES = {'"': "&quot;", "'": "&apos;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}


class Writer(Protocol):
    def write(self, s: str) -> Any: ...


class ExportError(RuntimeError):
    """Writing the document to the sink failed; the sink may hold a partial document."""

    def __init__(self, target: str) -> None:
        super().__init__(f"Fail to export {target}")
        self.target = target


def _is_not_blank(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def escape_xml(value: str) -> str:
    """Escape for an attribute value; non-ASCII becomes numeric references."""
    escaped = escape(value, _ATTR_ENTITIES)
    return escaped.encode("ascii", "xmlcharrefreplace").decode("ascii")


def is_in_tree_walker(module_path: str) -> bool:
    return module_path.lower().startswith(TREE_WALKER_PREFIX.lower())


def arrange_by_module_path(records: Iterable[RuleRecord]) -> Dict[str, List[RuleRecord]]:
    """Group rules by module path, keeping input order inside each group."""
    result: Dict[str, List[RuleRecord]] = {}
    for record in records:
        result.setdefault(record.module_path, []).append(record)
    return result


class CheckstyleProfileExporter:
    """Exports active Checkstyle rules to a Checkstyle XML configuration."""

    key = REPOSITORY_KEY
    name = PLUGIN_NAME
    mime_type = MIME_TYPE
    supported_languages = SUPPORTED_LANGUAGES

    def __init__(self, settings: Optional[ExporterSettings] = None) -> None:
        self.settings = settings or ExporterSettings()

    # -------------------------
    # Export operations
    # -------------------------

    def export_profile(self, profile: QualityProfile, writer: Writer) -> None:
        """Export the checkstyle rules of a design-time quality profile.

        Writes nothing when the profile carries no rule list.

        Raises:
            ExportError: if writing to ``writer`` fails.
        """
        active_rules = profile.active_rules_by_repository(REPOSITORY_KEY)
        if active_rules is None:
            logger.debug("Profile %s has no rules; nothing to export", profile)
            return
        records = [RuleRecord.from_profile_rule(r) for r in active_rules]
        self.export_records(records, writer, target=f"the profile {profile}")

    def export_active_rules(self, active_rules: Iterable[Any], writer: Writer) -> None:
        """Export runtime active rules (scanner shape).

        Entries that declare another ``repository`` are skipped.

        Raises:
            ExportError: if writing to ``writer`` fails.
        """
        records: List[RuleRecord] = []
        for rule in active_rules:
            if isinstance(rule, Mapping) and rule.get("repository") not in (None, REPOSITORY_KEY):
                continue
            records.append(normalize_rule(rule))
        self.export_records(records, writer, target="active rules")

    def export_records(self, records: Iterable[Any], writer: Writer, *, target: str = "active rules") -> None:
        """Write the document for already-selected rules of any supported shape."""
        groups = arrange_by_module_path(normalize_rule(r) for r in records)
        logger.debug(
            "Exporting %d rules in %d module groups (%s)",
            sum(len(v) for v in groups.values()),
            len(groups),
            target,
        )
        try:
            self._generate_xml(writer, groups)
        except (OSError, UnicodeError) as ex:
            # UnicodeError: the sink cannot encode a raw filter fragment.
            raise ExportError(target) from ex

    def render(self, records: Iterable[Any]) -> str:
        """Return the document as a string."""
        buf = io.StringIO()
        self.export_records(records, buf)
        return buf.getvalue()

    # -------------------------
    # Document sections
    # -------------------------

    def _generate_xml(self, writer: Writer, groups: Dict[str, List[RuleRecord]]) -> None:
        _append_xml_header(writer)
        self._append_tab_width(writer)
        self._append_custom_filters(writer)
        _append_checker_modules(writer, groups)
        self._append_tree_walker(writer, groups)
        _append_xml_footer(writer)

    def _append_tab_width(self, writer: Writer) -> None:
        _append_module_property(writer, "tabWidth", self.settings.get(CHECKER_TAB_WIDTH))

    def _append_custom_filters(self, writer: Writer) -> None:
        _append_raw(writer, self.settings.get(CHECKER_FILTERS_KEY))

    def _is_suppress_warnings_enabled(self) -> bool:
        filters_xml = self.settings.get(CHECKER_FILTERS_KEY)
        return filters_xml is not None and SUPPRESS_WARNINGS_FILTER in filters_xml

    def _append_tree_walker(self, writer: Writer, groups: Dict[str, List[RuleRecord]]) -> None:
        writer.write('<module name="TreeWalker">')
        if self._is_suppress_warnings_enabled():
            writer.write(SUPPRESS_WARNINGS_HOLDER)

        tree_walker_paths = sorted(
            (p for p in groups if is_in_tree_walker(p)),
            key=lambda p: (p.lower(), p),
        )
        for module_path in tree_walker_paths:
            for record in groups[module_path]:
                _append_module(writer, record)

        _append_raw(writer, self.settings.get(TREEWALKER_FILTERS_KEY))
        writer.write(CLOSE_MODULE)


def _append_xml_header(writer: Writer) -> None:
    writer.write(XML_DECLARATION + DOCTYPE_DECLARATION + GENERATED_COMMENT + '<module name="Checker">')


def _append_xml_footer(writer: Writer) -> None:
    writer.write(CLOSE_MODULE)


def _append_raw(writer: Writer, fragment: Optional[str]) -> None:
    # Trusted XML: no escaping.
    if _is_not_blank(fragment):
        writer.write(fragment)


def _append_checker_modules(writer: Writer, groups: Dict[str, List[RuleRecord]]) -> None:
    for module_path, records in groups.items():
        if is_in_tree_walker(module_path):
            continue
        for record in records:
            _append_module(writer, record)


def _append_module(writer: Writer, record: RuleRecord) -> None:
    writer.write('<module name="')
    writer.write(escape_xml(record.module_name))
    writer.write('">')
    if record.is_template_instance:
        # Distinguishes several instances of the same template module.
        _append_module_property(writer, "id", record.rule_key)
    _append_module_property(writer, "severity", record.severity)
    for param_key, param_value in record.parameters.items():
        _append_module_property(writer, param_key, param_value)
    writer.write(CLOSE_MODULE)


def _append_module_property(writer: Writer, name: str, value: Optional[str]) -> None:
    if not _is_not_blank(value):
        return
    writer.write('<property name="')
    writer.write(escape_xml(name))
    writer.write('" value="')
    writer.write(escape_xml(value))
    writer.write('"/>')
