"""The fixed-width UTF-16 string type.

A ``UString`` is an ordered run of 16-bit code units. Logically it always
ends with a zero sentinel that is not part of its length; the content is
stored without that terminator and ``terminated()`` hands out a copy with
the sentinel appended, so no operation can ever lose it.

Example:
    ```py
    >>> s = UString.from_units([0x48, 0x69])
    >>> len(s), s.terminated()
    (2, (72, 105, 0))
    >>> s.find(0x69)
    1
    ```
"""

from __future__ import annotations

from array import array
from collections.abc import Iterable, Iterator, Sequence

from .errors import IndexOutOfRangeError, OutOfRangeError
from .search import NPOS, find_unit, find_units
from .units import SENTINEL, UNIT_TYPECODE, check_unit, copy_until_sentinel

__all__ = ["NPOS", "UString"]


class UString:
    """Mutable string of 16-bit code units with an implicit zero terminator."""

    npos = NPOS

    __slots__ = ("_units",)

    def __init__(self, source: Iterable[int] | None = None) -> None:
        """Copy a zero-terminated run of code units.

        Copying stops at the first sentinel; ``None`` (or no argument) gives
        the empty string.
        """
        self._units = copy_until_sentinel(source)

    @classmethod
    def from_units(cls, units: Iterable[int]) -> UString:
        """Build a string holding exactly *units*, zeros included."""
        new = cls()
        new._units = array(UNIT_TYPECODE, (check_unit(u) for u in units))
        return new

    @classmethod
    def _wrap(cls, units: array) -> UString:
        new = cls()
        new._units = units
        return new

    # --- Size ---

    def length(self) -> int:
        """Number of code units, sentinel excluded."""
        return len(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def empty(self) -> bool:
        """True when the string holds no code units."""
        return not self._units

    def clear(self) -> None:
        """Drop all code units, leaving only the sentinel."""
        self._units = array(UNIT_TYPECODE)

    # --- Access ---

    def __getitem__(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError(
                f"UString indices must be integers, not {type(index).__name__}"
            )
        if not 0 <= index < len(self._units):
            raise IndexOutOfRangeError(index, len(self._units))
        return self._units[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._units)

    def units(self) -> tuple[int, ...]:
        """The logical code units."""
        return tuple(self._units)

    def terminated(self) -> tuple[int, ...]:
        """The code units followed by the zero sentinel."""
        return (*self._units, SENTINEL)

    def substr(self, pos: int, n: int = NPOS) -> UString:
        """Return up to *n* code units starting at *pos*.

        *n* is clamped to what remains after *pos*; the default takes the
        rest of the string.

        Raises:
            OutOfRangeError: If *pos* is not a valid index of this string.
            ValueError: If *n* is negative.
        """
        length = len(self._units)
        if not 0 <= pos < length:
            raise OutOfRangeError(pos, length)
        if n < 0:
            raise ValueError(f"substr() length must be non-negative, got {n}")
        if n == NPOS or pos + n > length:
            n = length - pos
        return self._wrap(self._units[pos : pos + n])

    # --- Concatenation ---

    def append(self, other: UString | int) -> UString:
        """Append another string or a single code unit, in place.

        Returns:
            UString: ``self``, so calls can be chained.
        """
        if isinstance(other, UString):
            if not other.empty():
                self._units.extend(other._units)
        else:
            self._units.append(check_unit(other))
        return self

    def __iadd__(self, other: UString | int) -> UString:
        if not isinstance(other, (UString, int)):
            return NotImplemented
        return self.append(other)

    def __add__(self, other: UString) -> UString:
        if not isinstance(other, UString):
            return NotImplemented
        return self._wrap(self._units + other._units)

    # --- Search ---

    def find(self, target: UString | Sequence[int] | int, pos: int = 0) -> int:
        """Locate a code unit or a run of code units at or after *pos*.

        Returns:
            int: The index of the match, or ``NPOS`` when there is none.

        Raises:
            TypeError: If *target* is a ``str``; text must go through the
                encoding bridge before it can be searched for.
        """
        if isinstance(target, str):
            raise TypeError(
                "UString.find() takes a code unit, a UString or a sequence of "
                "code units, not str"
            )
        if isinstance(target, int):
            return find_unit(self._units, target, pos)
        pattern = target._units if isinstance(target, UString) else target
        return find_units(self._units, pattern, pos)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UString):
            return NotImplemented
        return self._units == other._units

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = " ".join(f"{u:04X}" for u in self._units)
        return f"{self.__class__.__name__}([{body}])"
