from __future__ import annotations

from typing import Tuple

REPOSITORY_KEY = "checkstyle"
PLUGIN_NAME = "Checkstyle"
JAVA_KEY = "java"
SUPPORTED_LANGUAGES: Tuple[str, ...] = (JAVA_KEY,)
MIME_TYPE = "application/xml"

# Sonar property keys (also the keys accepted in a settings file).
CHECKER_FILTERS_KEY = "sonar.checkstyle.filters"
TREEWALKER_FILTERS_KEY = "sonar.checkstyle.treewalkerfilters"
CHECKER_TAB_WIDTH = "sonar.checkstyle.tabWidth"

# Environment variable for each property key.
ENV_VARS = {
    CHECKER_FILTERS_KEY: "SONAR_CHECKSTYLE_FILTERS",
    TREEWALKER_FILTERS_KEY: "SONAR_CHECKSTYLE_TREEWALKER_FILTERS",
    CHECKER_TAB_WIDTH: "SONAR_CHECKSTYLE_TAB_WIDTH",
}

TREE_WALKER_PREFIX = "Checker/TreeWalker/"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
DOCTYPE_DECLARATION = (
    '<!DOCTYPE module PUBLIC "-//Checkstyle//DTD Checkstyle Configuration 1.3//EN" '
    '"https://checkstyle.org/dtds/configuration_1_3.dtd">'
)
GENERATED_COMMENT = "<!-- Generated by Sonar -->"

SUPPRESS_WARNINGS_FILTER = '<module name="SuppressWarningsFilter" />'
SUPPRESS_WARNINGS_HOLDER = '<module name="SuppressWarningsHolder"/> '
