"""A bounded in-memory byte stream with a writing and a reading side."""

from __future__ import annotations


class ByteStream:
    """A flow-controlled byte stream: writes are limited by the capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._buffer = bytearray()
        self._closed = False
        self._error = False
        self._bytes_pushed = 0
        self._bytes_popped = 0

    # Writing side

    def push(self, data: bytes) -> None:
        """Append as much of ``data`` as the available capacity allows."""
        data = bytes(data[: self.available_capacity()])
        self._buffer += data
        self._bytes_pushed += len(data)

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    def available_capacity(self) -> int:
        return self.capacity - len(self._buffer)

    def bytes_pushed(self) -> int:
        return self._bytes_pushed

    # Reading side

    def peek(self) -> bytes:
        """Return the bytes currently buffered without removing them."""
        return bytes(self._buffer)

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        if length < 0:
            raise ValueError("length must be non-negative")
        length = min(length, len(self._buffer))
        del self._buffer[:length]
        self._bytes_popped += length

    def is_finished(self) -> bool:
        """True once the stream is closed and every byte has been popped."""
        return self._closed and not self._buffer

    def bytes_buffered(self) -> int:
        return len(self._buffer)

    def bytes_popped(self) -> int:
        return self._bytes_popped

    # Error state

    def set_error(self) -> None:
        self._error = True

    def has_error(self) -> bool:
        return self._error


def read(stream: ByteStream, max_len: int) -> bytes:
    """Peek and pop up to ``max_len`` bytes from ``stream``."""
    out = bytearray()
    while stream.bytes_buffered() and len(out) < max_len:
        view = stream.peek()
        if not view:
            raise RuntimeError("peek() returned no bytes while bytes are buffered")
        view = view[: max_len - len(out)]
        out += view
        stream.pop(len(view))
    return bytes(out)