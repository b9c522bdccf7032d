"""Hypothesis property tests for ``UString``.

Properties covered:

- **substr length**: ``substr(pos, n)`` has ``min(n, length() - pos)`` units.
- **Concatenation length and associativity** in content.
- **Empty append identity**.
- **find(unit)** returns the first occurrence at or after ``pos``.
- **Empty pattern** matches at ``pos`` for every ``pos <= length()``.
- **Sentinel invariant**: ``terminated()`` always ends with exactly one zero
  past the logical content.
"""

from __future__ import annotations

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from ustring.domain.ustring import NPOS, UString

pytestmark = [pytest.mark.property]

# Non-zero units, so sources copied until the sentinel are not truncated.
units_st = st.lists(st.integers(min_value=1, max_value=0xFFFF), max_size=40)
ustrings = units_st.map(UString.from_units)


@given(ustrings, st.data())
def test_substr_rest_length(s: UString, data: st.DataObject) -> None:
    """substr(pos) keeps everything from pos on."""
    assume(not s.empty())
    pos = data.draw(st.integers(min_value=0, max_value=len(s) - 1))
    part = s.substr(pos)
    assert len(part) == len(s) - pos
    assert part.units() == s.units()[pos:]


@given(ustrings, st.data(), st.integers(min_value=0, max_value=100))
def test_substr_length(s: UString, data: st.DataObject, n: int) -> None:
    """substr(pos, n) has min(n, length() - pos) units."""
    assume(not s.empty())
    pos = data.draw(st.integers(min_value=0, max_value=len(s) - 1))
    assert len(s.substr(pos, n)) == min(n, len(s) - pos)


@given(ustrings, ustrings)
def test_concat_length(a: UString, b: UString) -> None:
    """len(a + b) == len(a) + len(b)."""
    assert len(a + b) == len(a) + len(b)


@given(ustrings, ustrings, ustrings)
def test_concat_associative(a: UString, b: UString, c: UString) -> None:
    """(a + b) + c and a + (b + c) hold the same units."""
    assert (a + b) + c == a + (b + c)


@given(ustrings)
def test_append_empty_identity(a: UString) -> None:
    """Appending an empty string yields an equal string."""
    before = UString.from_units(a)
    a += UString()
    assert a == before


@given(ustrings, st.integers(min_value=1, max_value=0xFFFF), st.data())
def test_find_unit_first_occurrence(s: UString, unit: int, data: st.DataObject) -> None:
    """find(unit, pos) is the first k >= pos with s[k] == unit, else NPOS."""
    pos = data.draw(st.integers(min_value=0, max_value=len(s)))
    expected = next((k for k in range(pos, len(s)) if s[k] == unit), NPOS)
    assert s.find(unit, pos) == expected


@given(ustrings, st.data())
def test_empty_pattern_returns_pos(s: UString, data: st.DataObject) -> None:
    """The empty pattern is found at pos for every pos <= length()."""
    pos = data.draw(st.integers(min_value=0, max_value=len(s)))
    assert s.find(UString(), pos) == pos


@given(ustrings, ustrings)
def test_found_substring_really_matches(s: UString, pattern: UString) -> None:
    """Whenever find() reports a position, the pattern is there."""
    index = s.find(pattern)
    if index != NPOS:
        assert s.units()[index : index + len(pattern)] == pattern.units()


@given(units_st)
def test_terminated_has_single_trailing_sentinel(units: list[int]) -> None:
    """The terminated view is the content followed by one zero."""
    s = UString(units)
    assert s.terminated() == (*units, 0)
    assert len(s) == len(units)
