"""
WAV export for rendered warnings.
"""

import io
import wave

import numpy as np

from ..same.constants import SAMPLE_RATE


def to_pcm16(samples: np.ndarray) -> np.ndarray:
    """Convert float samples in [-1, 1] to 16-bit PCM."""
    clipped = np.clip(np.asarray(samples, dtype=np.float64), -1.0, 1.0)
    return np.int16(clipped * 32767)


def _write(target, samples: np.ndarray, sample_rate: int):
    with wave.open(target, 'wb') as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)  # 16-bit
        wav.setframerate(sample_rate)
        wav.writeframes(to_pcm16(samples).tobytes())


def to_wav(samples: np.ndarray, filename: str, sample_rate: int = SAMPLE_RATE):
    """Export audio samples to a WAV file."""
    _write(filename, samples, sample_rate)


def to_bytes(samples: np.ndarray, sample_rate: int = SAMPLE_RATE) -> bytes:
    """Convert audio samples to WAV bytes (for web streaming)."""
    buffer = io.BytesIO()
    _write(buffer, samples, sample_rate)
    return buffer.getvalue()
