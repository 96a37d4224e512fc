"""
EAS Originator codes per 47 CFR 11.31
"""

from enum import Enum


class Originator(Enum):
    """Originator field of a SAME header. The value is the wire code."""
    PEP = 'PEP'
    CIV = 'CIV'
    WXR = 'WXR'
    EAS = 'EAS'
    EAN = 'EAN'  # deprecated, kept for legacy national activations

    @classmethod
    def parse(cls, code: str) -> 'Originator':
        if not isinstance(code, str):
            raise ValueError(f"Originator code must be a string: {code!r}")
        try:
            return cls(code.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown originator: {code}") from None

    @property
    def code(self) -> str:
        return self.value

    @property
    def name_long(self) -> str:
        return ORIGINATOR_CODES[self.value]['name']

    @property
    def deprecated(self) -> bool:
        return ORIGINATOR_CODES[self.value].get('deprecated', False)


ORIGINATOR_CODES = {
    'PEP': {
        'name': 'Primary Entry Point System',
        'description': 'Presidential-level alerts from FEMA IPAWS',
        'priority': 1
    },
    'CIV': {
        'name': 'Civil Authorities',
        'description': 'State and local government alerts',
        'priority': 2
    },
    'WXR': {
        'name': 'National Weather Service',
        'description': 'Weather-related warnings and watches',
        'priority': 3
    },
    'EAS': {
        'name': 'EAS Participant',
        'description': 'Broadcast station or cable system',
        'priority': 4
    },
    'EAN': {
        'name': 'Emergency Action Notification Network',
        'description': 'Legacy national originator, replaced by PEP',
        'priority': 1,
        'deprecated': True
    }
}


def get_originator_description(code: str) -> str:
    """Get human-readable description of an originator code."""
    code = code.upper()
    if code in ORIGINATOR_CODES:
        return ORIGINATOR_CODES[code]['name']
    return f"Unknown originator: {code}"
