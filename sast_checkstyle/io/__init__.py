"""sast_checkstyle.io

Filesystem helpers: atomic writers and profile/settings file readers.
"""

from __future__ import annotations

from .fs import read_structured, write_stream_atomic
from .profile_loader import load_profile

__all__ = [
    "load_profile",
    "read_structured",
    "write_stream_atomic",
]
