"""
easgen - synthesize EAS warnings encoded with SAME.
"""

from .same import EasWarning, Header, AttentionSignal, CompositionPolicy
from .eas import Originator

__all__ = ['EasWarning', 'Header', 'AttentionSignal', 'CompositionPolicy', 'Originator']
