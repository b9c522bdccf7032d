"""Code-unit level helpers shared by the string type and the encoding bridge.

This module owns the two low-level facts everything else relies on:

- the zero *sentinel* that terminates every code-unit run, and
- the byte order of the host, which decides how raw UTF-16 bytes are read
  back into 16-bit units.
"""

import sys
from array import array
from collections.abc import Iterable
from enum import Enum

SENTINEL = 0
MAX_UNIT = 0xFFFF

# Units with any of these bits set are outside 7-bit ASCII.
NON_ASCII_MASK = 0xFF80

BOM_STD = 0xFEFF
BOM_REV = 0xFFFE

UNIT_TYPECODE = "H"


class ByteOrder(Enum):
    """Byte order of 16-bit units in memory."""

    LITTLE = "little"
    BIG = "big"

    @property
    def utf16_codec(self) -> str:
        """Name of the UTF-16 flavour without BOM for this byte order."""
        return "UTF-16LE" if self is ByteOrder.LITTLE else "UTF-16BE"

    @classmethod
    def parse(cls, value: str) -> "ByteOrder":
        """Build a ByteOrder from ``"little"`` / ``"big"`` (case-insensitive).

        Raises:
            ValueError: If *value* names no known byte order.
        """
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise ValueError(f"Unknown byte order: {value!r}") from e


def detect_host_byte_order() -> ByteOrder:
    """Return the byte order of the running interpreter."""
    return ByteOrder.parse(sys.byteorder)


def check_unit(unit: int) -> int:
    """Return *unit* unchanged if it fits in 16 bits.

    Raises:
        TypeError: If *unit* is not an integer.
        ValueError: If *unit* is outside ``0..0xFFFF``.
    """
    if not isinstance(unit, int) or isinstance(unit, bool):
        raise TypeError(f"Code unit must be an int, got {type(unit).__name__}")
    if not SENTINEL <= unit <= MAX_UNIT:
        raise ValueError(f"Code unit out of 16-bit range: {unit:#x}")
    return unit


def terminated_length(units: Iterable[int]) -> int:
    """Count the units before the first sentinel (or all of them if none)."""
    count = 0
    for unit in units:
        if unit == SENTINEL:
            break
        count += 1
    return count


def copy_until_sentinel(units: Iterable[int] | None) -> array:
    """Copy a zero-terminated run of units, stopping at the first sentinel.

    ``None`` is treated as an empty run. The returned array never contains
    the sentinel itself.
    """
    out = array(UNIT_TYPECODE)
    if units is None:
        return out
    for unit in units:
        if check_unit(unit) == SENTINEL:
            break
        out.append(unit)
    return out


def units_from_bytes(data: bytes, byte_order: ByteOrder) -> array:
    """Read raw UTF-16 bytes laid out in *byte_order* into 16-bit units.

    A trailing odd byte, if any, is dropped.
    """
    out = array(UNIT_TYPECODE)
    out.frombytes(data[: len(data) - len(data) % 2])
    if byte_order.value != sys.byteorder:
        out.byteswap()
    return out


def widen_bytes(data: bytes) -> array:
    """Zero-extend every byte to one code unit (Latin-1 style widening)."""
    return array(UNIT_TYPECODE, iter(data))


def swap_unit_bytes(unit: int) -> int:
    """Exchange the high and low byte of a 16-bit unit."""
    return ((unit << 8) | (unit >> 8)) & MAX_UNIT


def swap_non_ascii(units: array) -> int:
    """Byte-swap, in place, every unit that has a bit of NON_ASCII_MASK set.

    Returns:
        int: The number of units that were swapped.
    """
    swapped = 0
    for i, unit in enumerate(units):
        if unit & NON_ASCII_MASK:
            units[i] = swap_unit_bytes(unit)
            swapped += 1
    return swapped
