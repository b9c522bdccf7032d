"""Domain layer for USTRING.

Contains the code-unit string type, its search primitives and the low-level
sentinel/byte-order helpers. This package is deliberately technology-agnostic.

Dependency rule: do not import from `ustring.adapters` or `ustring.entrypoints`.
"""
