"""Conversion between UTF-8 byte strings and ``UString``.

Decoding never fails: when the transcoder cannot be opened, or rejects the
input partway through, the bridge widens every input byte to one code unit
instead. Encoding is a plain narrowing that replaces any unit above
``0xFF`` with ``?``. Both lossy paths are deterministic and silent towards
the caller; only a transcoder failure is reported, on this module's logger.
"""

import logging
from array import array

from ustring.domain.units import (
    BOM_REV,
    BOM_STD,
    SENTINEL,
    ByteOrder,
    swap_non_ascii,
    terminated_length,
    units_from_bytes,
    widen_bytes,
)
from ustring.domain.ustring import UString
from ustring.interfaces.transcoder import (
    Transcoder,
    TranscoderFailure,
    TranscoderUnavailable,
)

logger = logging.getLogger(__name__)

SOURCE_ENCODING = "UTF-8"
MAX_NARROW_UNIT = 0xFF
REPLACEMENT_BYTE = ord("?")


class EncodingBridge:
    """Two-way converter between UTF-8 bytes and code-unit strings.

    Args:
        transcoder: Service used to turn UTF-8 bytes into UTF-16 bytes.
        byte_order: Host byte order. Decides which UTF-16 flavour is requested
            from the transcoder and whether the big-endian workaround applies.
            Detect it once (see `ustring.config`) and pass it in.
        byte_swap_workaround: On big-endian hosts, swap the bytes of every
            non-ASCII unit produced by the transcoder. Some transcoders emit
            those units in the wrong order even when asked for UTF-16BE.
            None (the default) takes the transcoder's own
            ``swaps_big_endian_units``, which is off for `CodecsTranscoder`.
            Ignored on little-endian hosts.
    """

    def __init__(
        self,
        transcoder: Transcoder,
        byte_order: ByteOrder,
        byte_swap_workaround: bool | None = None,
    ) -> None:
        self._transcoder = transcoder
        self._byte_order = byte_order
        if byte_swap_workaround is None:
            byte_swap_workaround = transcoder.swaps_big_endian_units
        self._byte_swap_workaround = byte_swap_workaround

    @property
    def byte_order(self) -> ByteOrder:
        """Byte order this bridge was configured with."""
        return self._byte_order

    @property
    def byte_swap_workaround(self) -> bool:
        """Whether non-ASCII units are swapped on big-endian hosts."""
        return self._byte_swap_workaround

    @property
    def target_encoding(self) -> str:
        """UTF-16 flavour requested from the transcoder."""
        return self._byte_order.utf16_codec

    # --- UTF-8 -> UString ---

    def decode(self, text: bytes | str) -> UString:
        """Convert UTF-8 text into a ``UString``.

        A leading byte-order mark is dropped, and the result ends at the
        first NUL in the input.

        Args:
            text: UTF-8 encoded bytes. A ``str`` is encoded to UTF-8 first;
                lone surrogates in it are kept so that they fail in the
                transcoder and take the widening fallback.

        Returns:
            UString: The converted text; byte-widened if transcoding failed.
        """
        data = (
            text.encode(SOURCE_ENCODING, "surrogatepass")
            if isinstance(text, str)
            else bytes(text)
        )
        if not data:
            return UString()

        units = self._transcode(data)
        if units is None:
            return self._widen(data)

        start = 0
        if units and units[0] in (BOM_STD, BOM_REV):
            logger.debug("Skipping byte-order mark %#06x", units[0])
            start = 1
        units = units[start : start + terminated_length(units[start:])]

        if self._byte_order is ByteOrder.BIG and self._byte_swap_workaround:
            swapped = swap_non_ascii(units)
            if swapped:
                logger.debug("Byte-swapped %d non-ASCII code unit(s)", swapped)

        return UString.from_units(units)

    def _transcode(self, data: bytes) -> array | None:
        """Run the transcoder over *data* plus a terminating NUL.

        Returns:
            array | None: The produced units, or None when the caller must
            fall back to widening.
        """
        try:
            handle = self._transcoder.open(self.target_encoding, SOURCE_ENCODING)
        except TranscoderUnavailable as e:
            logger.debug("Transcoder unavailable, widening bytes instead: %s", e)
            return None

        with handle:
            try:
                raw = handle.transcode(data + b"\x00")
            except TranscoderFailure as e:
                logger.error("Transcoding %d byte(s) failed: %s", len(data), e)
                raw = None
        if raw is None:
            return None
        return units_from_bytes(raw, self._byte_order)

    @staticmethod
    def _widen(data: bytes) -> UString:
        units = widen_bytes(data)
        return UString.from_units(units[: terminated_length(units)])

    # --- UString -> bytes ---

    def encode(self, ustr: UString) -> bytes:
        """Narrow every code unit of *ustr* to one byte.

        Units above ``0xFF`` become ``b"?"``. The output stops at the first
        zero unit, following byte-string termination.
        """
        out = bytearray()
        for unit in ustr:
            if unit == SENTINEL:
                break
            out.append(REPLACEMENT_BYTE if unit > MAX_NARROW_UNIT else unit)
        return bytes(out)
