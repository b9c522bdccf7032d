"""Configuration utilities for USTRING.

This module centralizes the process-wide settings of the text subsystem.
The host byte order is detected exactly once, at import time, and every
bridge built through `ustring.bootstrap` receives it explicitly.
"""

import os
from dataclasses import dataclass

from ustring.domain.units import ByteOrder, detect_host_byte_order

HOST_BYTE_ORDER = detect_host_byte_order()

TRANSCODER_ENV = "USTRING_TRANSCODER"  # pragma: no mutate
BYTE_SWAP_WORKAROUND_ENV = "USTRING_BYTE_SWAP_WORKAROUND"  # pragma: no mutate
HOST_BYTE_ORDER_ENV = "USTRING_HOST_BYTE_ORDER"  # pragma: no mutate

DEFAULT_TRANSCODER = "codecs"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


class InvalidSettingError(ValueError):
    """Raised when an environment variable holds an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}: {reason}")
        self.name = name
        self.value = value


@dataclass(frozen=True)
class Settings:
    """Settings used to wire the encoding bridge."""

    transcoder: str = DEFAULT_TRANSCODER
    byte_order: ByteOrder = HOST_BYTE_ORDER
    byte_swap_workaround: bool | None = None


def _parse_flag(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise InvalidSettingError(name, value, "expected a boolean flag")


def get_settings() -> Settings:
    """Read settings from the environment.

    Recognized variables:
    - `USTRING_TRANSCODER` → transcoder name (default ``codecs``)
    - `USTRING_BYTE_SWAP_WORKAROUND` → force the big-endian unit swap on or
      off (default: whatever the transcoder needs)
    - `USTRING_HOST_BYTE_ORDER` → ``little``/``big``, overrides detection

    Returns:
        Settings: A frozen snapshot of the configuration.

    Raises:
        InvalidSettingError: If a variable holds an unusable value.
    """
    byte_order = HOST_BYTE_ORDER
    if raw_order := os.environ.get(HOST_BYTE_ORDER_ENV):
        try:
            byte_order = ByteOrder.parse(raw_order)
        except ValueError as e:
            raise InvalidSettingError(
                HOST_BYTE_ORDER_ENV, raw_order, "expected 'little' or 'big'"
            ) from e

    workaround = None
    if (raw_flag := os.environ.get(BYTE_SWAP_WORKAROUND_ENV)) is not None:
        workaround = _parse_flag(BYTE_SWAP_WORKAROUND_ENV, raw_flag)

    transcoder = (
        os.environ.get(TRANSCODER_ENV, DEFAULT_TRANSCODER).strip().lower()
        or DEFAULT_TRANSCODER
    )

    return Settings(
        transcoder=transcoder,
        byte_order=byte_order,
        byte_swap_workaround=workaround,
    )
