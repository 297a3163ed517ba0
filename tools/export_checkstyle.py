#!/usr/bin/env python3
"""
tools/export_checkstyle.py

Export a quality profile as a Checkstyle configuration file.

Preferred invocation (package):
  python -m tools.export_checkstyle --profile profiles/sonar_way.yaml --output checkstyle.xml

From a SonarQube / SonarCloud quality profile (needs SONAR_TOKEN):
  python -m tools.export_checkstyle --qprofile AXk3... --settings checkstyle-settings.yaml

Design goals:
- Thin orchestrator: load settings -> load rules -> export -> write atomically
- ``--output -`` (the default) streams the document to stdout
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import requests
import yaml
from dotenv import load_dotenv

from sast_checkstyle.io import load_profile, write_stream_atomic

from tools.checkstyle.api import fetch_active_rules
from tools.checkstyle.exporter import CheckstyleProfileExporter, ExportError
from tools.checkstyle.settings import ENV_PATH, get_sonar_config, load_settings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Export active Checkstyle rules as a Checkstyle configuration.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--profile", help="Quality profile file (YAML or JSON).")
    src.add_argument("--qprofile", help="Quality profile key on the Sonar server.")
    ap.add_argument("--settings", help="Settings file with sonar.checkstyle.* keys (YAML or JSON).")
    ap.add_argument("--output", default="-", help="Output file. Default: - (stdout).")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return ap.parse_args(argv)


def _info(msg: str, *, to_stdout: bool) -> None:
    # Keep stdout clean when the document itself goes there.
    print(msg, file=sys.stdout if to_stdout else sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Load .env once, at runtime (not import-time)
    load_dotenv(ENV_PATH)

    to_file = args.output != "-"

    try:
        exporter = CheckstyleProfileExporter(load_settings(args.settings))

        if args.profile:
            profile = load_profile(args.profile)

            def _export(f) -> None:
                exporter.export_profile(profile, f)

        else:
            cfg = get_sonar_config()
            active_rules = fetch_active_rules(cfg, args.qprofile)
            _info(f"Fetched {len(active_rules)} active rules from {cfg.host}", to_stdout=to_file)

            def _export(f) -> None:
                exporter.export_active_rules(active_rules, f)

        if to_file:
            out_path = Path(args.output)
            write_stream_atomic(out_path, _export)
            _info(f"📄 Checkstyle configuration saved to: {out_path}", to_stdout=True)
        else:
            _export(sys.stdout)
            sys.stdout.write("\n")
    except (ExportError, OSError, ValueError, yaml.YAMLError, requests.RequestException) as e:
        # json.JSONDecodeError is a ValueError.
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
