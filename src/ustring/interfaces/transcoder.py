"""Transcoder interface definitions.

A transcoder turns bytes in one character encoding into bytes in another.
The contract is intentionally narrow, two capabilities only:

- ``Transcoder.open(target, source)`` acquires a handle for one encoding pair;
- ``TranscoderHandle.transcode(data)`` converts a complete buffer.

Handles are scoped resources: use them as context managers so they are
released on every exit path.
"""

from __future__ import annotations

import abc
from types import TracebackType

# pylint: disable=too-few-public-methods

# ============================================================================
#                                  Errors
# ============================================================================


class TranscoderError(Exception):
    """Base class for transcoder errors."""


class TranscoderUnavailable(TranscoderError):
    """Raised when a transcoder cannot be opened for the requested pair.

    Attributes:
        target (str): The requested output encoding.
        source (str): The requested input encoding.
    """

    def __init__(self, target: str, source: str, reason: str | None = None) -> None:
        message = f"No transcoder available for {source} -> {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.target = target
        self.source = source


class TranscoderFailure(TranscoderError):
    """Raised when a conversion fails partway through its input.

    Attributes:
        position (int | None): Offset of the offending input byte, when known.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


# ============================================================================
#                                Contracts
# ============================================================================


class TranscoderHandle(abc.ABC):
    """An open conversion for one (source, target) encoding pair."""

    @abc.abstractmethod
    def transcode(self, data: bytes) -> bytes:
        """Convert a complete buffer of source-encoded bytes.

        Raises:
            TranscoderFailure: If the input cannot be converted, or the handle
                has already been closed.
        """

    @abc.abstractmethod
    def close(self) -> None:
        """Release the handle. Calling it more than once has no effect."""

    def __enter__(self) -> TranscoderHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class Transcoder(abc.ABC):
    """Factory for transcoder handles.

    Attributes:
        swaps_big_endian_units: True when the UTF-16BE output of this
            transcoder has the bytes of its non-ASCII units in the wrong
            order. Bridges enable their byte-swap workaround from it unless
            told otherwise.
    """

    swaps_big_endian_units: bool = False

    @abc.abstractmethod
    def open(self, target: str, source: str = "UTF-8") -> TranscoderHandle:
        """Open a handle converting *source* encoded bytes into *target*.

        Raises:
            TranscoderUnavailable: If the pair cannot be served.
        """
