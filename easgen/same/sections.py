"""
Render plan sections.

A warning is an ordered list of sections drawn from a fixed set:
ToneBytes, Silence, Tone and Audio. Rendering is the flat concatenation
of each section's samples.
"""

from dataclasses import dataclass
from typing import Iterable, List, Union

import numpy as np

from .afsk import AfskBit, render_bytes
from .attention import ToneSpec
from .constants import BITS_PER_BYTE
from .tone import sample_count


@dataclass(frozen=True)
class ToneBytes:
    """Bytes sent as AFSK."""
    data: bytes


@dataclass(frozen=True)
class Silence:
    duration: float


@dataclass(frozen=True)
class Tone:
    spec: ToneSpec


@dataclass(frozen=True, eq=False)
class Audio:
    """Raw samples passed through unchanged."""
    samples: np.ndarray


Section = Union[ToneBytes, Silence, Tone, Audio]


def render_section(section: Section, sample_rate: int) -> np.ndarray:
    """Render one section to float64 samples."""
    if isinstance(section, ToneBytes):
        return render_bytes(section.data, sample_rate)
    elif isinstance(section, Silence):
        return np.zeros(sample_count(sample_rate, section.duration), dtype=np.float64)
    elif isinstance(section, Tone):
        return section.spec.render(sample_rate)
    elif isinstance(section, Audio):
        return np.asarray(section.samples, dtype=np.float64).ravel()
    raise TypeError(f"Unsupported section type: {type(section).__name__}")


def section_length(section: Section, sample_rate: int) -> int:
    """Number of samples `section` renders to, computed without rendering."""
    if isinstance(section, ToneBytes):
        bits = len(section.data) * BITS_PER_BYTE
        # MARK and SPACE share the bit duration
        return bits * AfskBit.MARK.wave(sample_rate).samples
    elif isinstance(section, Silence):
        return sample_count(sample_rate, section.duration)
    elif isinstance(section, Tone):
        return sample_count(sample_rate, section.spec.duration)
    elif isinstance(section, Audio):
        return int(np.asarray(section.samples).size)
    raise TypeError(f"Unsupported section type: {type(section).__name__}")


def render_sections(sections: Iterable[Section], sample_rate: int) -> np.ndarray:
    """Concatenate rendered sections into one float32 buffer."""
    rendered: List[np.ndarray] = [render_section(s, sample_rate) for s in sections]
    if not rendered:
        return np.zeros(0, dtype=np.float32)
    return np.concatenate(rendered).astype(np.float32)
