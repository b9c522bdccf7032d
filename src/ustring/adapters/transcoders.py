"""Transcoders for USTRING."""

import codecs
import logging

from ustring.interfaces.transcoder import (
    Transcoder,
    TranscoderFailure,
    TranscoderHandle,
    TranscoderUnavailable,
)

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class CodecsTranscoderHandle(TranscoderHandle):
    """Handle backed by a pair of incremental codecs from the codec registry.

    Each call to ``transcode`` is a complete conversion: the decoder is reset
    before use and flushed at the end, so no state leaks between calls.
    Malformed input is never repaired or replaced.
    """

    def __init__(self, source: codecs.CodecInfo, target: codecs.CodecInfo) -> None:
        self._source = source
        self._target = target
        self._decoder: codecs.IncrementalDecoder | None = source.incrementaldecoder(
            "strict"
        )
        self._encoder: codecs.IncrementalEncoder | None = target.incrementalencoder(
            "strict"
        )

    @property
    def closed(self) -> bool:
        """True once the handle has been released."""
        return self._decoder is None

    def transcode(self, data: bytes) -> bytes:
        """Decode *data* as the source encoding and re-encode it as the target."""
        if self._decoder is None or self._encoder is None:
            raise TranscoderFailure("transcode() called on a closed handle")
        self._decoder.reset()
        self._encoder.reset()
        try:
            text = self._decoder.decode(data, final=True)
        except UnicodeDecodeError as e:
            raise TranscoderFailure(
                f"Invalid {self._source.name} input at byte {e.start}: {e.reason}",
                position=e.start,
            ) from e
        try:
            return self._encoder.encode(text, final=True)
        except UnicodeEncodeError as e:
            raise TranscoderFailure(
                f"Cannot represent input in {self._target.name} "
                f"at character {e.start}: {e.reason}",
                position=e.start,
            ) from e

    def close(self) -> None:
        """Drop the codec state."""
        self._decoder = None
        self._encoder = None


class CodecsTranscoder(Transcoder):
    """Transcoder resolving encodings through Python's codec registry.

    Any encoding name the registry knows (``"UTF-8"``, ``"UTF-16LE"``,
    ``"latin-1"``, ...) can be used on either side.
    """

    def open(self, target: str, source: str = "UTF-8") -> CodecsTranscoderHandle:
        """Look up both codecs and return a ready handle."""
        try:
            source_info = codecs.lookup(source)
            target_info = codecs.lookup(target)
        except LookupError as e:
            raise TranscoderUnavailable(target, source, str(e)) from e
        logger.debug("Opened codecs transcoder %s -> %s", source, target)
        return CodecsTranscoderHandle(source_info, target_info)


class UnavailableTranscoder(Transcoder):
    """Transcoder that refuses every encoding pair.

    Selecting it makes every conversion take the byte-widening fallback,
    which is useful on platforms or in tests where real transcoding must be
    disabled.
    """

    def open(self, target: str, source: str = "UTF-8") -> TranscoderHandle:
        """Always raise TranscoderUnavailable."""
        raise TranscoderUnavailable(target, source, "transcoding is disabled")
