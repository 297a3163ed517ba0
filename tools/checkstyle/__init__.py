"""Checkstyle profile export modules.

Split into:
  - constants.py: repository key, Sonar property keys, fixed XML fragments
  - types.py    : small shared data structures (settings, server config)
  - settings.py : settings loading (settings file, .env, environment)
  - exporter.py : rule grouping + XML rendering
  - api.py      : HTTP calls to fetch a quality profile's active rules

The export_checkstyle.py script acts as the orchestration layer.
"""
