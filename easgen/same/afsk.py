"""
AFSK bit modulation for SAME bursts.

Each bit is a fixed 1.92 ms tone: MARK carries 4 cycles, SPACE carries 3.
Bytes go out least significant bit first.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

import numpy as np

from .constants import (
    BIT_DURATION, BITS_PER_BYTE,
    MARK_CYCLES, SPACE_CYCLES,
)
from .tone import SineWave


class AfskBit(Enum):
    """A single modulated bit."""
    MARK = 1
    SPACE = 0

    @classmethod
    def from_bool(cls, value: bool) -> 'AfskBit':
        return cls.MARK if value else cls.SPACE

    @property
    def cycles(self) -> int:
        return MARK_CYCLES if self is AfskBit.MARK else SPACE_CYCLES

    @property
    def frequency(self) -> float:
        return self.cycles / BIT_DURATION

    def wave(self, sample_rate: int) -> SineWave:
        return SineWave(self.frequency, sample_rate, BIT_DURATION, self.cycles)

    def render(self, sample_rate: int) -> np.ndarray:
        return self.wave(sample_rate).generate()


@dataclass(frozen=True)
class AfskByte:
    """Eight AFSK bits in transmission order (LSB first)."""
    bits: Tuple[AfskBit, ...]

    def __post_init__(self):
        if len(self.bits) != BITS_PER_BYTE:
            raise ValueError(f"AfskByte needs {BITS_PER_BYTE} bits, got {len(self.bits)}")

    @classmethod
    def from_int(cls, value: int) -> 'AfskByte':
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Byte value out of range: {value}")
        return cls(tuple(
            AfskBit.from_bool((value >> i) & 1)
            for i in range(BITS_PER_BYTE)
        ))

    @property
    def value(self) -> int:
        return sum(bit.value << i for i, bit in enumerate(self.bits))

    def segments(self, sample_rate: int) -> List[np.ndarray]:
        """One tone segment per bit, in bit order."""
        return [bit.render(sample_rate) for bit in self.bits]

    def render(self, sample_rate: int) -> np.ndarray:
        return np.concatenate(self.segments(sample_rate))


def to_afsk_bytes(data: Iterable[int]) -> List[AfskByte]:
    return [AfskByte.from_int(b) for b in data]


def render_byte(value: int, sample_rate: int) -> np.ndarray:
    return AfskByte.from_int(value).render(sample_rate)


def render_bytes(data: Iterable[int], sample_rate: int) -> np.ndarray:
    """
    Modulate a byte string.

    Bit segments are concatenated as-is; every segment starts at zero
    phase so no smoothing is applied at the joins.
    """
    # the bit waveform only depends on the bit value, render each once
    rendered = {bit: bit.render(sample_rate) for bit in AfskBit}
    segments = [
        rendered[bit]
        for afsk_byte in to_afsk_bytes(data)
        for bit in afsk_byte.bits
    ]
    if not segments:
        return np.zeros(0, dtype=np.float64)
    return np.concatenate(segments)
