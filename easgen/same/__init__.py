# SAME (Specific Area Message Encoding) synthesis per 47 CFR 11.31
from .afsk import AfskBit, AfskByte
from .attention import AttentionSignal, SingleTone, CombinedTone, ToneSpec
from .header import Header, render_eom
from .sections import ToneBytes, Silence, Tone, Audio, render_section, render_sections
from .tone import SineWave, generate_tone
from .warning import EasWarning, CompositionPolicy

__all__ = [
    'AfskBit', 'AfskByte',
    'AttentionSignal', 'SingleTone', 'CombinedTone', 'ToneSpec',
    'Header', 'render_eom',
    'ToneBytes', 'Silence', 'Tone', 'Audio', 'render_section', 'render_sections',
    'SineWave', 'generate_tone',
    'EasWarning', 'CompositionPolicy',
]
