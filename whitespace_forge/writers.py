"""
Output writers.

A writer is an append-only output buffer that can rewind back to an earlier
position. The formatter uses rewinds to delete trailing whitespace and
trailing empty lines after it has already written them.
"""

import abc


class Writer(abc.ABC):
    """Abstract output buffer that supports writes and rewinds."""

    @abc.abstractmethod
    def write(self, byte: int) -> None:
        """Write a single byte and advance the position by one."""

    @abc.abstractmethod
    def write_bytes(self, data: bytes) -> None:
        """Write several bytes and advance the position by their count."""

    @abc.abstractmethod
    def _truncate(self, position: int) -> None:
        """Discard everything after the position."""

    @property
    @abc.abstractmethod
    def position(self) -> int:
        """Number of bytes currently in the output."""

    def rewind(self, previous_position: int) -> None:
        """Discard all bytes written after a previous position."""
        if previous_position < 0 or previous_position > self.position:
            raise ValueError(
                f"Cannot rewind to position {previous_position}, "
                f"current position is {self.position}"
            )
        self._truncate(previous_position)


class BufferWriter(Writer):
    """
    Writer that keeps the output in memory.

    The buffer is allocated up front with the given capacity (usually the
    maximum position measured by a CountingWriter) and grows only if the
    capacity turns out to be too small.
    """

    def __init__(self, capacity: int = 0) -> None:
        self._buffer: bytearray = bytearray(capacity)
        self._position: int = 0

    def write(self, byte: int) -> None:
        if self._position < len(self._buffer):
            self._buffer[self._position] = byte
        else:
            self._buffer.append(byte)
        self._position += 1

    def write_bytes(self, data: bytes) -> None:
        end: int = self._position + len(data)
        self._buffer[self._position : end] = data
        self._position = end

    def _truncate(self, position: int) -> None:
        self._position = position

    @property
    def position(self) -> int:
        return self._position

    def getvalue(self) -> bytes:
        """Bytes written so far."""
        return bytes(self._buffer[: self._position])


class CountingWriter(Writer):
    """Writer that only counts bytes. The bytes themselves are discarded."""

    def __init__(self) -> None:
        self._position: int = 0
        self._maximum_position: int = 0

    def write(self, byte: int) -> None:
        self._position += 1
        self._maximum_position = max(self._maximum_position, self._position)

    def write_bytes(self, data: bytes) -> None:
        self._position += len(data)
        self._maximum_position = max(self._maximum_position, self._position)

    def _truncate(self, position: int) -> None:
        self._position = position

    @property
    def position(self) -> int:
        return self._position

    @property
    def maximum_position(self) -> int:
        """Largest size the output ever reached."""
        return self._maximum_position
