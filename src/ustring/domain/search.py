"""Search primitives over code-unit sequences.

Both functions scan the raw units directly and report failure with ``NPOS``
instead of raising, so renderers can test ``result == NPOS`` cheaply.
"""

import sys
from collections.abc import Sequence

NPOS = sys.maxsize


def find_unit(haystack: Sequence[int], unit: int, pos: int = 0) -> int:
    """Return the first index ``>= pos`` holding *unit*, else ``NPOS``.

    A negative *pos* is treated as 0.
    """
    for j in range(max(pos, 0), len(haystack)):
        if haystack[j] == unit:
            return j
    return NPOS


def find_units(haystack: Sequence[int], pattern: Sequence[int], pos: int = 0) -> int:
    """Return the start of the first occurrence of *pattern* at or after *pos*.

    The scan keeps a single running match counter. When a unit does not
    match, the counter drops to zero and that same unit is compared again
    against the first pattern unit; earlier units are never revisited. As a
    consequence ``AAB`` is found in ``AAAB`` at no position at all, while
    ``AB`` is found in ``AAB`` at 1.

    A negative *pos* is treated as 0. An empty pattern then matches at *pos*
    as long as it does not lie past the end of *haystack*.

    Returns:
        int: The match start index, or ``NPOS`` when there is no match.
    """
    pos = max(pos, 0)
    length = len(haystack)
    total = len(pattern)
    if total == 0:
        return pos if pos <= length else NPOS

    found = 0
    for j in range(pos, length):
        if haystack[j] != pattern[found]:
            found = 0
            if haystack[j] != pattern[0]:
                continue
        found += 1
        if found == total:
            return j - found + 1
    return NPOS
