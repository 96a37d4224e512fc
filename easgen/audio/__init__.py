"""
Audio export.

Writes rendered warnings as mono 16-bit WAV.
"""

from .wav import to_wav, to_bytes, to_pcm16

__all__ = ['to_wav', 'to_bytes', 'to_pcm16']
