"""Building blocks of TCP: wrapping sequence numbers, byte streams, reassembly, messages and a receiver."""

__version__ = "0.1.0"