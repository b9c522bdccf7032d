"""USTRING

Fixed-width UTF-16 text for renderers that address glyphs by code unit.
Provides the ``UString`` code-unit string type, search over it, and the
bridge that converts between it and UTF-8 byte strings.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
