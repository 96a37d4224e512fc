"""
Full EAS warning composition.

The complete EAS audio structure:
1. Preamble + header, repeated 3x with 1s gaps
2. Attention signal, framed by 1s of silence (see CompositionPolicy)
3. Lead-in silence + voice/audio message, if one is given
4. 1s gap, then preamble + EOM (NNNN) repeated 3x with 1s gaps, then 1s tail
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .attention import AttentionSignal, CombinedTone
from .constants import (
    SAMPLE_RATE, HEADER_REPETITIONS, EOM_REPETITIONS,
    SECTION_GAP, MESSAGE_LEAD_IN, ATTENTION_DURATION_DEFAULT,
)
from .header import Header, render_eom
from .sections import Section, ToneBytes, Silence, Tone, Audio, render_sections

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositionPolicy:
    """
    Knobs for how a warning is laid out.

    attention_always: send the attention signal on every warning. When
        False it is only sent for critical warnings that carry a message.
    message_lead_in: silence before the message audio, in seconds. Use a
        longer pre-roll (e.g. 4.0) ahead of spoken content.
    gap: silence between bursts, in seconds.

    Under the default policy a warning with no message carries no
    attention signal either, even when critical, so its two framing
    silences are left out along with the lead-in.
    """
    attention_always: bool = False
    message_lead_in: float = MESSAGE_LEAD_IN
    gap: float = SECTION_GAP

    def __post_init__(self):
        if self.message_lead_in < 0 or self.gap < 0:
            raise ValueError("Silence durations must not be negative")


DEFAULT_POLICY = CompositionPolicy()


def _has_message(message: Optional[np.ndarray]) -> bool:
    return message is not None and np.asarray(message).size > 0


def bursts(data: bytes, repetitions: int, gap: float) -> List[Section]:
    """`data` sent `repetitions` times with `gap` seconds between sends."""
    sections: List[Section] = []
    for i in range(repetitions):
        sections.append(ToneBytes(data))
        if i < repetitions - 1:
            sections.append(Silence(gap))
    return sections


@dataclass(frozen=True)
class EasWarning:
    """A header plus an attention signal, ready to be rendered to audio."""
    header: Header
    attention: AttentionSignal = field(
        default_factory=lambda: CombinedTone(ATTENTION_DURATION_DEFAULT)
    )
    policy: CompositionPolicy = DEFAULT_POLICY

    def includes_attention(self, message: Optional[np.ndarray] = None, critical: bool = True) -> bool:
        if self.policy.attention_always:
            return True
        return critical and _has_message(message)

    def sections(self, message: Optional[np.ndarray] = None, critical: bool = True) -> List[Section]:
        """
        Build the render plan.

        Args:
            message: message samples, passed through unchanged
            critical: whether the warning warrants the attention signal

        Returns:
            Ordered list of sections
        """
        gap = self.policy.gap
        plan = bursts(self.header.render(), HEADER_REPETITIONS, gap)

        if self.includes_attention(message, critical):
            plan += [Silence(gap), Tone(self.attention.to_tone()), Silence(gap)]

        if _has_message(message):
            plan += [Silence(self.policy.message_lead_in), Audio(message)]

        plan.append(Silence(gap))
        plan += bursts(render_eom(), EOM_REPETITIONS, gap)
        plan.append(Silence(gap))
        return plan

    def construct(
        self,
        sample_rate: int = SAMPLE_RATE,
        message: Optional[np.ndarray] = None,
        critical: bool = True
    ) -> np.ndarray:
        """
        Render the complete warning.

        Returns:
            mono float32 samples in [-1, 1] at `sample_rate`
        """
        if sample_rate <= 0:
            raise ValueError(f"Sample rate must be positive: {sample_rate}")

        plan = self.sections(message, critical)
        logger.debug(
            "Rendering %s with %d sections at %d Hz",
            self.header.to_string(), len(plan), sample_rate
        )
        samples = render_sections(plan, sample_rate)
        logger.debug("Rendered %d samples (%.2fs)", len(samples), len(samples) / sample_rate)
        return samples
