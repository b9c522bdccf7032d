"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class UStringError(Exception):
    """Base class for errors raised by the code-unit string type."""


# ============================================================================
#                   Range errors (caller programming errors)
# ============================================================================


class OutOfRangeError(UStringError, IndexError):
    """Raised when substr() is given a start position outside the string."""

    def __init__(self, pos: int, length: int) -> None:
        super().__init__(
            f"Position {pos} passed to substr() is out of range "
            f"for a string of length {length}."
        )
        self.pos = pos
        self.length = length


class IndexOutOfRangeError(UStringError, IndexError):
    """Raised when a code unit is read at an index outside the string."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(
            f"Index {index} is out of range for a string of length {length}."
        )
        self.index = index
        self.length = length
