"""Reassembles indexed, possibly overlapping substrings into a byte stream."""

from __future__ import annotations

from bisect import bisect_left

from tcpstack.byte_stream import ByteStream


class Reassembler:
    """Writes out-of-order substrings into ``output`` in stream order."""

    def __init__(self, output: ByteStream) -> None:
        self.output = output
        self._starts: list[int] = []
        self._segments: dict[int, bytes] = {}
        self._pending = 0
        self._end_index: int | None = None

    def _split(self, pos: int) -> None:
        """Ensure no stored segment straddles ``pos``."""
        i = bisect_left(self._starts, pos)
        if i < len(self._starts) and self._starts[i] == pos:
            return
        if i == 0:
            return
        prev = self._starts[i - 1]
        segment = self._segments[prev]
        if prev + len(segment) > pos:
            cut = pos - prev
            self._segments[prev] = segment[:cut]
            self._segments[pos] = segment[cut:]
            self._starts.insert(i, pos)

    def _try_close(self) -> None:
        if self._end_index is not None and self._end_index == self.output.bytes_pushed():
            self.output.close()

    def insert(self, first_index: int, data: bytes, is_last_substring: bool) -> None:
        """Insert ``data`` starting at stream index ``first_index``."""
        data = bytes(data)
        if not data:
            if self._end_index is None and is_last_substring:
                self._end_index = first_index
            self._try_close()
            return

        writer = self.output
        if writer.is_closed() or writer.available_capacity() == 0:
            return

        first_unassembled = writer.bytes_pushed()
        first_unacceptable = first_unassembled + writer.available_capacity()

        if first_index + len(data) <= first_unassembled or first_index >= first_unacceptable:
            return

        if first_index + len(data) > first_unacceptable:
            data = data[: first_unacceptable - first_index]
            is_last_substring = False

        if first_index < first_unassembled:
            data = data[first_unassembled - first_index :]
            first_index = first_unassembled

        if self._end_index is None and is_last_substring:
            self._end_index = first_index + len(data)

        end = first_index + len(data)
        self._split(end)
        self._split(first_index)

        lo = bisect_left(self._starts, first_index)
        hi = bisect_left(self._starts, end)
        for start in self._starts[lo:hi]:
            self._pending -= len(self._segments.pop(start))
        del self._starts[lo:hi]

        self._starts.insert(lo, first_index)
        self._segments[first_index] = data
        self._pending += len(data)

        while self._starts and self._starts[0] == writer.bytes_pushed():
            start = self._starts.pop(0)
            payload = self._segments.pop(start)
            self._pending -= len(payload)
            writer.push(payload)

        self._try_close()

    def count_bytes_pending(self) -> int:
        """Number of bytes held internally, not yet written to the output."""
        return self._pending