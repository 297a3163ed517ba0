"""sast_checkstyle.io.fs

Atomic filesystem writers and small structured-file readers.

Why this module exists
----------------------
A generated Checkstyle configuration is picked up by other processes (the
scanner, CI jobs). If the exporter is interrupted mid-write, a half-written
XML file is worse than no file at all. Writes therefore go to a temp file in
the target directory and are moved into place with ``os.replace``.

The writer hands the open file to a callback, so the exporter can stream into
it directly instead of building the whole document in memory first.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Optional, TextIO

import yaml


def write_stream_atomic(
    path: Path,
    write_fn: Callable[[TextIO], None],
    *,
    encoding: str = "utf-8",
    newline: Optional[str] = None,
) -> None:
    """Stream into a temp file next to ``path``, then os.replace() it into place.

    The CLI passes a callback that runs the exporter against the open temp
    file, so a failed export never replaces an existing configuration.
    """

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f"{p.name}.", suffix=".tmp", dir=str(p.parent))
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline=newline) as f:
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp_path, p)
    finally:
        # If write_fn or os.replace fails, best-effort cleanup of the temp file.
        try:
            if tmp_path.exists():
                tmp_path.unlink()
        except OSError:
            pass


def read_structured(path: Path, *, encoding: str = "utf-8") -> Any:
    """Read a YAML (``.yaml``/``.yml``) or JSON file."""

    p = Path(path)
    text = p.read_text(encoding=encoding)
    if p.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_load(text)
    return json.loads(text)
