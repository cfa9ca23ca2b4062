"""32-bit sequence numbers that wrap around relative to a zero point."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_HIGH64 = _MASK64 & ~_MASK32
_DELTA = 1 << 32


@dataclass(frozen=True)
class Wrap32:
    """An unsigned 32-bit value that wraps to zero after 2**32 - 1."""

    raw_value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    @classmethod
    def wrap(cls, n: int, zero_point: Wrap32) -> Wrap32:
        """Wrap the absolute sequence number ``n`` relative to ``zero_point``."""
        return zero_point + (n & _MASK32)

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number closest to ``checkpoint`` that wraps to this value."""
        checkpoint &= _MASK64
        abs_base = (self.raw_value - zero_point.raw_value) & _MASK32
        checkpoint_low = checkpoint & _MASK32
        candidate = (checkpoint & _HIGH64) | abs_base

        if (
            candidate >= _DELTA
            and abs_base > checkpoint_low
            and abs_base - checkpoint_low > _DELTA // 2
        ):
            return candidate - _DELTA
        if (
            candidate < _HIGH64
            and checkpoint_low > abs_base
            and checkpoint_low - abs_base > _DELTA // 2
        ):
            return candidate + _DELTA
        return candidate

    def __add__(self, n: int) -> Wrap32:
        if not isinstance(n, int):
            return NotImplemented
        return Wrap32((self.raw_value + n) & _MASK32)