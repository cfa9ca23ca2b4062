# tcpstack

The receiving side of a TCP implementation, written in pure Python with no
third-party dependencies.

- `tcpstack.wrapping_integers.Wrap32`: 32-bit sequence numbers that wrap
  around. `Wrap32.wrap(n, zero_point)` maps an absolute index to a sequence
  number. `seqno.unwrap(zero_point, checkpoint)` maps it back to the absolute
  index closest to `checkpoint`. `seqno + n` adds modulo 2**32.
- `tcpstack.byte_stream.ByteStream`: a bounded in-memory byte pipe.
  - Writing side: `push`, `close`, `is_closed`, `available_capacity`,
    `bytes_pushed`.
  - Reading side: `peek`, `pop`, `is_finished`, `bytes_buffered`,
    `bytes_popped`.
  - Error flag: `set_error` and `has_error`.
  - `push` keeps only as many bytes as the remaining capacity allows.
- `tcpstack.byte_stream.read(stream, max_len)`: pops up to `max_len` bytes
  from a stream and returns them.
- `tcpstack.reassembler.Reassembler`: takes substrings that may arrive out of
  order or overlap and writes them into its `output` stream in order.
  - Bytes beyond the stream's available capacity are discarded.
  - The stream is closed once the last byte has been written.
  - `count_bytes_pending()` reports how many bytes are held back while waiting
    for gaps to be filled.
- `tcpstack.tcp_messages`:
  - `TCPSenderMessage` has fields `seqno`, `syn`, `payload`, `fin` and `rst`.
    Its `sequence_length()` counts SYN + payload + FIN.
  - `TCPReceiverMessage` has fields `ackno`, `window_size` and `rst`.
- `tcpstack.tcp_receiver.TCPReceiver`: takes incoming `TCPSenderMessage`s and
  builds acknowledgments.
  - `receive(message)` records the initial sequence number from the SYN and
    inserts payloads into the reassembler at the right stream index.
  - An RST puts the stream into the error state.
  - `send()` returns a `TCPReceiverMessage` with the next expected sequence
    number and the window size, capped at 65535. The SYN and FIN each count
    as one sequence number.

## Installation

```
pip install .
```

## Example

```python
from tcpstack.byte_stream import ByteStream, read
from tcpstack.reassembler import Reassembler
from tcpstack.tcp_messages import TCPSenderMessage
from tcpstack.tcp_receiver import TCPReceiver
from tcpstack.wrapping_integers import Wrap32

isn = Wrap32(1000)
receiver = TCPReceiver(Reassembler(ByteStream(4096)))

receiver.receive(TCPSenderMessage(seqno=isn, syn=True))
# Segments may arrive out of order; the second half is held back.
receiver.receive(TCPSenderMessage(seqno=isn + 6, payload=b"world", fin=True))
receiver.receive(TCPSenderMessage(seqno=isn + 1, payload=b"hello"))

ack = receiver.send()
print(ack.ackno)        # Wrap32(raw_value=1012): SYN + 10 bytes + FIN
print(ack.window_size)  # 4086

print(read(receiver.stream, 100))    # b'helloworld'
print(receiver.stream.is_finished())  # True
```

## What this package does not do

- It has no sending-side state machine. Nothing here turns an outbound
  `ByteStream` into `TCPSenderMessage`s, tracks outstanding segments or
  retransmits on timeout. Callers build `TCPSenderMessage`s themselves.
- It does no network I/O and has no wire format. Messages are plain Python
  objects passed between calls.

## Tests

```
pip install .[test]
pytest
```