# EAS reference data
from .originators import Originator, ORIGINATOR_CODES, get_originator_description

__all__ = ['Originator', 'ORIGINATOR_CODES', 'get_originator_description']
