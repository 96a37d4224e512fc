"""
Sine tone generation.

Every tone starts exactly at zero phase, and the phase step is derived from
the sample count rather than the sample rate, so a whole number of cycles
fits in the segment. Back-to-back segments (AFSK bits, multi-tone mixes)
can then be concatenated without a phase jump at the joins.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np


def sample_count(sample_rate: int, seconds: float) -> int:
    """Number of samples covering `seconds` at `sample_rate`."""
    return max(0, math.floor(sample_rate * seconds))


@dataclass(frozen=True)
class SineWave:
    """
    A single-frequency sine segment.

    `cycles` defaults to ``hz * seconds``; pass it explicitly to pin a
    segment to an exact number of periods (as the AFSK bits do).
    `sample_total` pins the sample count instead of deriving it from
    `seconds`.
    """
    hz: float
    sample_rate: int
    seconds: float
    cycles: Optional[float] = None
    sample_total: Optional[int] = None

    @classmethod
    def from_seconds(cls, hz: float, sample_rate: int, seconds: float) -> 'SineWave':
        return cls(hz, sample_rate, seconds, hz * seconds)

    @classmethod
    def from_cycles(cls, hz: float, sample_rate: int, cycles: float) -> 'SineWave':
        return cls(hz, sample_rate, cycles / hz, cycles)

    @classmethod
    def from_sample_count(cls, hz: float, sample_rate: int, samples: int) -> 'SineWave':
        seconds = samples / sample_rate
        return cls(hz, sample_rate, seconds, hz * seconds, sample_total=samples)

    @property
    def samples(self) -> int:
        if self.sample_total is not None:
            return max(0, self.sample_total)
        return sample_count(self.sample_rate, self.seconds)

    @property
    def total_cycles(self) -> float:
        if self.cycles is None:
            return self.hz * self.seconds
        return self.cycles

    def generate(self, samples: Optional[int] = None) -> np.ndarray:
        """
        Render the wave.

        Sample i is sin(2*pi * i * C / (N - 1)). With N <= 1 there is no
        phase step to take, so N zeros are returned.

        Args:
            samples: override the sample count (used for oversampling)
        """
        n = self.samples if samples is None else samples
        if n <= 1:
            return np.zeros(n, dtype=np.float64)

        index = np.arange(n, dtype=np.float64)
        return np.sin(2 * np.pi * index * self.total_cycles / (n - 1))


def generate_tone(frequencies: Sequence[float], seconds: float, sample_rate: int) -> np.ndarray:
    """
    Generate a mix of one or more frequencies with equal weight.

    Each frequency is rendered over N + 1 samples, the waves are averaged,
    and the trailing sample is dropped. The result has exactly N samples,
    starts at zero phase and ends one step short of it.
    """
    n = sample_count(sample_rate, seconds)
    if not frequencies or n == 0:
        return np.zeros(n, dtype=np.float64)

    waves = [
        SineWave.from_seconds(freq, sample_rate, seconds).generate(n + 1)
        for freq in frequencies
    ]
    mixed = np.mean(waves, axis=0)
    return mixed[:n]
