"""Fixtures for transcoder contract tests."""

from collections.abc import Iterable

import pytest

from ustring.adapters.transcoders import CodecsTranscoder
from ustring.interfaces.transcoder import Transcoder


@pytest.fixture(params=["codecs"])
def transcoder(request: pytest.FixtureRequest) -> Iterable[Transcoder]:
    """Yield a fresh Transcoder for every adapter able to serve UTF-8 -> UTF-16.

    Supported params:
      - `"codecs"` → CodecsTranscoder

    Extend by adding identifiers to `params` and a matching branch below.
    """
    match request.param:
        case "codecs":
            yield CodecsTranscoder()
        case _:
            raise ValueError(f"unknown transcoder type: {request.param}")
