"""Global pytest fixtures for USTRING."""

from __future__ import annotations

import pytest

from ustring.adapters.transcoders import CodecsTranscoder
from ustring.config import HOST_BYTE_ORDER
from ustring.domain.units import ByteOrder
from ustring.service_layer.bridge import EncodingBridge


@pytest.fixture
def bridge() -> EncodingBridge:
    """Bridge backed by the real codec registry, configured for this host."""
    return EncodingBridge(CodecsTranscoder(), byte_order=HOST_BYTE_ORDER)


@pytest.fixture
def little_endian_bridge() -> EncodingBridge:
    """Bridge pinned to little-endian output, independent of the host."""
    return EncodingBridge(CodecsTranscoder(), byte_order=ByteOrder.LITTLE)

