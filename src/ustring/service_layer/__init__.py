"""Service layer for USTRING.

Implements the conversions between UTF-8 byte strings and ``UString``,
including the fallback policy when transcoding is impossible.

Dependency rule: may import `ustring.domain` and `ustring.interfaces`, but not
`ustring.adapters` or `ustring.entrypoints`.
"""
