"""Bootstrap (composition root) for USTRING.

Assembles the text subsystem at runtime: reads configuration, picks the
transcoder adapter and wires it, together with the detected host byte order,
into an `EncodingBridge`.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces).
- This package may import: `ustring.adapters`, `ustring.service_layer`,
  `ustring.interfaces`, `ustring.domain`, and `ustring.config`.
- Inner layers must not import `ustring.bootstrap`.

Public surface:
- Re-export composition factories and the two convenience conversions.
"""

from .bootstrap import (
    TRANSCODERS,
    UnknownTranscoderError,
    build_bridge,
    build_transcoder,
    default_bridge,
    make_standard_string,
    make_unicode_string,
)

__all__ = [
    "TRANSCODERS",
    "UnknownTranscoderError",
    "build_bridge",
    "build_transcoder",
    "default_bridge",
    "make_standard_string",
    "make_unicode_string",
]
