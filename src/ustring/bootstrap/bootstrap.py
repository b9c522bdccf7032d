"""Bootstrap the encoding bridge with its transcoder and host settings."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import cache

from ustring import config
from ustring.adapters.transcoders import CodecsTranscoder, UnavailableTranscoder
from ustring.domain.ustring import UString
from ustring.interfaces.transcoder import Transcoder
from ustring.service_layer.bridge import EncodingBridge

logger = logging.getLogger(__name__)

TRANSCODERS: dict[str, Callable[[], Transcoder]] = {
    "codecs": CodecsTranscoder,
    "none": UnavailableTranscoder,
}


class UnknownTranscoderError(LookupError):
    """Raised when settings name a transcoder that is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown transcoder {name!r}; expected one of {sorted(TRANSCODERS)}"
        )
        self.name = name


def build_transcoder(name: str) -> Transcoder:
    """Instantiate the transcoder registered under *name*."""
    try:
        factory = TRANSCODERS[name]
    except KeyError as e:
        raise UnknownTranscoderError(name) from e
    return factory()


def build_bridge(settings: config.Settings | None = None) -> EncodingBridge:
    """Build an encoding bridge from *settings* (read from the environment if None)."""
    settings = settings or config.get_settings()
    bridge = EncodingBridge(
        build_transcoder(settings.transcoder),
        byte_order=settings.byte_order,
        byte_swap_workaround=settings.byte_swap_workaround,
    )
    logger.debug(
        "Encoding bridge ready: transcoder=%s, byte_order=%s, byte_swap_workaround=%s",
        settings.transcoder,
        settings.byte_order.value,
        bridge.byte_swap_workaround,
    )
    return bridge


@cache
def default_bridge() -> EncodingBridge:
    """Process-wide bridge, built from the environment on first use."""
    return build_bridge()


def make_unicode_string(text: bytes | str) -> UString:
    """Convert UTF-8 text to a ``UString`` using the default bridge."""
    return default_bridge().decode(text)


def make_standard_string(ustr: UString) -> bytes:
    """Narrow a ``UString`` to bytes using the default bridge."""
    return default_bridge().encode(ustr)
