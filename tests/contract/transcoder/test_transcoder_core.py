"""Contract tests for Transcoder implementations.

Every adapter that can open UTF-8 -> UTF-16 must behave the same way here,
since the encoding bridge relies on exactly these guarantees.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from ustring.interfaces.transcoder import TranscoderFailure

if TYPE_CHECKING:
    from ustring.interfaces.transcoder import Transcoder

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize("target", ["UTF-16LE", "UTF-16BE"])
def test_transcodes_to_bomless_utf16(transcoder: Transcoder, target: str) -> None:
    """Output is plain UTF-16 in the requested order, without a BOM."""
    text = "Aé中🙂"
    with transcoder.open(target, "UTF-8") as handle:
        assert handle.transcode(text.encode()) == text.encode(target)


def test_terminating_nul_is_transcoded(transcoder: Transcoder) -> None:
    """A trailing NUL byte becomes a zero code unit."""
    with transcoder.open("UTF-16LE") as handle:
        assert handle.transcode(b"a\x00") == b"a\x00\x00\x00"


def test_input_bom_is_preserved(transcoder: Transcoder) -> None:
    """A BOM in the input is passed through; stripping is the caller's job."""
    with transcoder.open("UTF-16LE") as handle:
        assert handle.transcode(b"\xef\xbb\xbfa") == b"\xff\xfea\x00"


def test_empty_input(transcoder: Transcoder) -> None:
    """Empty input gives empty output."""
    with transcoder.open("UTF-16LE") as handle:
        assert handle.transcode(b"") == b""


def test_malformed_input_fails(transcoder: Transcoder) -> None:
    """Invalid UTF-8 raises TranscoderFailure instead of being replaced."""
    with transcoder.open("UTF-16LE") as handle:
        with pytest.raises(TranscoderFailure):
            handle.transcode(b"a\xffb")


def test_handle_is_reusable(transcoder: Transcoder) -> None:
    """One handle can convert several independent buffers."""
    with transcoder.open("UTF-16LE") as handle:
        assert handle.transcode(b"x") == b"x\x00"
        assert handle.transcode(b"y") == b"y\x00"


def test_close_is_idempotent(transcoder: Transcoder) -> None:
    """Closing twice is harmless."""
    handle = transcoder.open("UTF-16LE")
    handle.close()
    handle.close()


def test_transcode_after_close_fails(transcoder: Transcoder) -> None:
    """A closed handle cannot be used."""
    handle = transcoder.open("UTF-16LE")
    handle.close()
    with pytest.raises(TranscoderFailure):
        handle.transcode(b"a")
