"""sast_checkstyle

Core package for the Checkstyle profile exporter.

Why this exists
---------------
The exporter has two kinds of callers: a design-time path that reads a quality
profile from disk, and a runtime path that pulls active rules from a SonarQube
server. Both must produce the *same* rule view before any XML is written.

This package owns:

* domain types (the uniform rule view and the quality profile container)
* IO helpers (profile loading and atomic writes)

The CLI and the exporter in ``tools/checkstyle`` are thin composition roots on
top of it.
"""

from __future__ import annotations
