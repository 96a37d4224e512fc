import io
import os
import sys
import wave

import numpy as np

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from easgen.audio import to_bytes, to_wav, to_pcm16


def test_wav_bytes_header():
    samples = np.zeros(800, dtype=np.float32)
    wav_bytes = to_bytes(samples, 8000)

    # WAV files start with RIFF header
    assert wav_bytes[:4] == b'RIFF'

    with wave.open(io.BytesIO(wav_bytes), 'rb') as wav:
        assert wav.getnchannels() == 1
        assert wav.getsampwidth() == 2
        assert wav.getframerate() == 8000
        assert wav.getnframes() == 800


def test_pcm_clipping():
    pcm = to_pcm16(np.array([-2.0, -1.0, 0.0, 1.0, 2.0]))
    assert list(pcm) == [-32767, -32767, 0, 32767, 32767]


def test_to_wav_file(tmp_path):
    path = tmp_path / 'alert.wav'
    to_wav(np.zeros(100), str(path), 22050)

    with wave.open(str(path), 'rb') as wav:
        assert wav.getframerate() == 22050
        assert wav.getnframes() == 100
