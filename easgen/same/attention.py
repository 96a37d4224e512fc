"""
Attention signal selection.

SingleTone is the 1050 Hz weather radio alert; CombinedTone is the
853 + 960 Hz broadcast EAS tone. Both run at least 8 seconds.
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Tuple

import numpy as np

from .constants import (
    ATTENTION_SINGLE_FREQ, ATTENTION_FREQ_1, ATTENTION_FREQ_2,
    ATTENTION_DURATION_MIN, ATTENTION_DURATION_DEFAULT,
)
from .tone import generate_tone


@dataclass(frozen=True)
class ToneSpec:
    """A tone section: equal-weight mix of `frequencies` for `duration` seconds."""
    duration: float
    frequencies: Tuple[float, ...]

    def render(self, sample_rate: int) -> np.ndarray:
        return generate_tone(self.frequencies, self.duration, sample_rate)


@dataclass(frozen=True)
class AttentionSignal:
    duration: float

    FREQUENCIES: ClassVar[Tuple[float, ...]] = ()

    def __post_init__(self):
        if not math.isfinite(self.duration) or self.duration < ATTENTION_DURATION_MIN:
            raise ValueError(
                f"Attention signal must last at least {ATTENTION_DURATION_MIN}s: {self.duration}"
            )

    @staticmethod
    def single(duration: float = ATTENTION_DURATION_DEFAULT) -> 'SingleTone':
        return SingleTone(duration)

    @staticmethod
    def combined(duration: float = ATTENTION_DURATION_DEFAULT) -> 'CombinedTone':
        return CombinedTone(duration)

    @staticmethod
    def from_kind(kind: str, duration: float = ATTENTION_DURATION_DEFAULT) -> 'AttentionSignal':
        """Select by name: 'single' or 'combined'."""
        kinds = {'single': SingleTone, 'combined': CombinedTone}
        try:
            signal_cls = kinds[kind.lower()]
        except (AttributeError, KeyError):
            raise ValueError(f"Unknown attention signal kind: {kind}") from None
        return signal_cls(duration)

    @property
    def frequencies(self) -> Tuple[float, ...]:
        return self.FREQUENCIES

    def to_tone(self) -> ToneSpec:
        return ToneSpec(self.duration, self.frequencies)

    def render(self, sample_rate: int) -> np.ndarray:
        return self.to_tone().render(sample_rate)


@dataclass(frozen=True)
class SingleTone(AttentionSignal):
    FREQUENCIES: ClassVar[Tuple[float, ...]] = (ATTENTION_SINGLE_FREQ,)


@dataclass(frozen=True)
class CombinedTone(AttentionSignal):
    FREQUENCIES: ClassVar[Tuple[float, ...]] = (ATTENTION_FREQ_1, ATTENTION_FREQ_2)
