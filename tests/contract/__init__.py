"""Contract tests.

Purpose
- Define the transcoder contract once and run it against every adapter so
  the encoding bridge can rely on any of them interchangeably.

Guidelines
- Parametrize implementations via fixtures.
- Assert only the public contract (inputs/outputs/errors), not internals.
"""
