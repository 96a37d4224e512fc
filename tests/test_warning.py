"""
Tests for section rendering and full warning composition
"""

import math
import sys
import os
from datetime import datetime, timezone

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from easgen.eas import Originator
from easgen.same import (
    AttentionSignal, CompositionPolicy, EasWarning, Header,
    ToneBytes, Silence, Tone, Audio, ToneSpec,
    render_section, render_sections,
)
from easgen.same.constants import BIT_DURATION
from easgen.same.header import render_eom
from easgen.same.sections import section_length

SAMPLE_RATE = 44100


@pytest.fixture
def header():
    return Header(
        originator=Originator.CIV,
        event='RWT',
        locations=('048100',),
        purge_time='0015',
        issue_time=datetime(2024, 4, 14, 12, 34, tzinfo=timezone.utc),
        callsign='WDAF/FM '
    )


@pytest.fixture
def message():
    """Five seconds of placeholder message audio."""
    t = np.arange(5 * SAMPLE_RATE) / SAMPLE_RATE
    return 0.5 * np.sin(2 * np.pi * 440 * t)


def seconds(s):
    return math.floor(SAMPLE_RATE * s)


class TestSections:
    """Tests for rendering individual sections."""

    def test_silence(self):
        audio = render_section(Silence(1.0), SAMPLE_RATE)
        assert len(audio) == SAMPLE_RATE
        assert not audio.any()

    def test_audio_verbatim(self):
        samples = np.array([0.1, -0.2, 0.3])
        assert np.array_equal(render_section(Audio(samples), SAMPLE_RATE), samples)

    def test_tone(self):
        audio = render_section(Tone(ToneSpec(1.0, (853.0, 960.0))), SAMPLE_RATE)
        assert len(audio) == SAMPLE_RATE

    def test_tone_bytes(self):
        audio = render_section(ToneBytes(b'NNNN'), SAMPLE_RATE)
        assert len(audio) == 4 * 8 * seconds(BIT_DURATION)

    def test_unknown_section(self):
        with pytest.raises(TypeError):
            render_section('silence', SAMPLE_RATE)
        with pytest.raises(TypeError):
            section_length(3.0, SAMPLE_RATE)

    def test_section_length_matches_render(self):
        for section in [ToneBytes(b'ZCZC'), Silence(0.5), Tone(ToneSpec(8.0, (1050.0,))),
                        Audio(np.zeros(123))]:
            assert section_length(section, SAMPLE_RATE) == len(render_section(section, SAMPLE_RATE))

    def test_render_sections_float32(self):
        audio = render_sections([Silence(0.1), ToneBytes(b'A')], SAMPLE_RATE)
        assert audio.dtype == np.float32
        assert len(audio) == seconds(0.1) + 8 * seconds(BIT_DURATION)

    def test_render_no_sections(self):
        assert len(render_sections([], SAMPLE_RATE)) == 0


class TestEasWarning:
    """Tests for the full warning."""

    def test_plan_layout(self, header, message):
        """Header bursts, attention, message, EOM bursts, in order."""
        warning = EasWarning(header, AttentionSignal.combined(8.0))
        plan = warning.sections(message, critical=True)

        header_burst = ToneBytes(header.render())
        eom_burst = ToneBytes(render_eom())
        assert plan[:5] == [header_burst, Silence(1.0), header_burst, Silence(1.0), header_burst]
        assert plan[5:8] == [Silence(1.0), Tone(ToneSpec(8.0, (853.0, 960.0))), Silence(1.0)]
        assert plan[8] == Silence(1.0)
        assert isinstance(plan[9], Audio)
        assert plan[10:] == [
            Silence(1.0), eom_burst, Silence(1.0), eom_burst, Silence(1.0), eom_burst, Silence(1.0)
        ]

    def test_total_length(self, header, message):
        """Output length equals the sum of the independently computed section lengths."""
        warning = EasWarning(header, AttentionSignal.combined(8.0))
        audio = warning.construct(SAMPLE_RATE, message, critical=True)

        bit = seconds(BIT_DURATION)
        header_len = len(header.render()) * 8 * bit
        eom_len = 20 * 8 * bit
        expected = (
            3 * header_len + 2 * seconds(1.0)
            + seconds(1.0) + seconds(8.0) + seconds(1.0)
            + seconds(1.0) + len(message)
            + seconds(1.0) + 3 * eom_len + 2 * seconds(1.0) + seconds(1.0)
        )

        plan = warning.sections(message, critical=True)
        assert len(audio) == expected
        assert len(audio) == sum(section_length(s, SAMPLE_RATE) for s in plan)
        assert len(audio) == sum(len(render_section(s, SAMPLE_RATE)) for s in plan)

    def test_output_format(self, header, message):
        audio = EasWarning(header).construct(SAMPLE_RATE, message)
        assert audio.dtype == np.float32
        assert audio.ndim == 1
        assert np.max(np.abs(audio)) <= 1.0

    def test_message_passed_through(self, header, message):
        warning = EasWarning(header, AttentionSignal.single(8.0))
        plan = warning.sections(message)
        audio = warning.construct(SAMPLE_RATE, message)

        offset = sum(section_length(s, SAMPLE_RATE) for s in plan[:9])
        assert np.array_equal(audio[offset:offset + len(message)], message.astype(np.float32))

    def test_no_message_skips_attention(self, header):
        """Without a message only header, EOM and silences are rendered."""
        plan = EasWarning(header).sections(None, critical=True)

        assert len(plan) == 12
        assert not any(isinstance(s, (Tone, Audio)) for s in plan)

    def test_empty_message_is_absent(self, header):
        plan = EasWarning(header).sections(np.zeros(0), critical=True)
        assert not any(isinstance(s, (Tone, Audio)) for s in plan)

    def test_not_critical_skips_attention(self, header, message):
        plan = EasWarning(header).sections(message, critical=False)

        assert not any(isinstance(s, Tone) for s in plan)
        assert any(isinstance(s, Audio) for s in plan)

    def test_attention_always(self, header):
        policy = CompositionPolicy(attention_always=True)
        plan = EasWarning(header, AttentionSignal.single(9.0), policy).sections()

        assert Tone(ToneSpec(9.0, (1050.0,))) in plan

    def test_message_lead_in(self, header, message):
        policy = CompositionPolicy(message_lead_in=4.0)
        plan = EasWarning(header, policy=policy).sections(message)

        audio_index = next(i for i, s in enumerate(plan) if isinstance(s, Audio))
        assert plan[audio_index - 1] == Silence(4.0)

    def test_negative_policy(self):
        with pytest.raises(ValueError):
            CompositionPolicy(gap=-1.0)

    def test_bad_sample_rate(self, header):
        with pytest.raises(ValueError):
            EasWarning(header).construct(0)
