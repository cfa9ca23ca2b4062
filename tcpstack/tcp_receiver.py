"""The receiving half of a TCP endpoint."""

from __future__ import annotations

from tcpstack.byte_stream import ByteStream
from tcpstack.reassembler import Reassembler
from tcpstack.tcp_messages import TCPReceiverMessage, TCPSenderMessage
from tcpstack.wrapping_integers import Wrap32

_MASK64 = 0xFFFFFFFFFFFFFFFF
_MAX_WINDOW = 0xFFFF


class TCPReceiver:
    """Feeds incoming segments into a reassembler and builds acknowledgments."""

    def __init__(self, reassembler: Reassembler) -> None:
        self.reassembler = reassembler
        self._isn: Wrap32 | None = None

    @property
    def stream(self) -> ByteStream:
        """The byte stream the reassembled data is written to."""
        return self.reassembler.output

    def receive(self, message: TCPSenderMessage) -> None:
        """Insert the payload of ``message`` at its place in the stream."""
        stream = self.stream
        if stream.has_error():
            return
        if message.rst:
            stream.set_error()
            return
        if message.syn and self._isn is None:
            self._isn = message.seqno
        if self._isn is None:
            return

        abs_seqno = message.seqno.unwrap(self._isn, stream.bytes_pushed())
        # The SYN occupies absolute sequence number 0.
        stream_index = 0 if message.syn else (abs_seqno - 1) & _MASK64
        self.reassembler.insert(stream_index, message.payload, message.fin)

    def send(self) -> TCPReceiverMessage:
        """Build the acknowledgment and window advertisement for the peer."""
        stream = self.stream
        ackno = None
        if self._isn is not None:
            next_seq = stream.bytes_pushed() + 1
            if stream.is_closed():
                next_seq += 1
            ackno = Wrap32.wrap(next_seq, self._isn)
        return TCPReceiverMessage(
            ackno=ackno,
            window_size=min(_MAX_WINDOW, stream.available_capacity()),
            rst=stream.has_error(),
        )