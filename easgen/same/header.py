"""
SAME header framing per 47 CFR 11.31

Header format: <preamble>ZCZC-ORG-EEE-PSSCCC[-PSSCCC...]+TTTT-JJJHHMM-LLLLLLLL-

Where:
- ORG: Originator code (3 chars)
- EEE: Event code (3 chars)
- PSSCCC: Location code(s) - P=part, SS=state, CCC=county FIPS, at most 31
- TTTT: Purge time in HHMM format
- JJJHHMM: Issue time - Julian day + UTC time
- LLLLLLLL: Callsign (exactly 8 chars, '-' sent as '\\')

The end of message marker is the preamble followed by NNNN.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple, Union

from ..eas.originators import Originator
from .constants import (
    PREAMBLE, HEADER_START, EOM_MARKER,
    FIELD_DELIMITER, CALLSIGN_DELIMITER_SUB,
    EVENT_WIDTH, LOCATION_WIDTH, PURGE_WIDTH, CALLSIGN_WIDTH,
    MAX_LOCATIONS,
)

_EVENT_PATTERN = re.compile(r'^[A-Z]{3}$')
_LOCATION_PATTERN = re.compile(r'^\d{6}$')
_PURGE_PATTERN = re.compile(r'^\d{4}$')


def _is_ascii(text: str) -> bool:
    return all(ord(ch) < 128 for ch in text)


def format_issue_time(issued: datetime) -> str:
    """JJJHHMM: day of year, hour, minute, in UTC."""
    if issued.tzinfo is not None:
        issued = issued.astimezone(timezone.utc)
    julian_day = issued.timetuple().tm_yday
    return f"{julian_day:03d}{issued.hour:02d}{issued.minute:02d}"


def format_purge_time(duration_minutes: int) -> str:
    """TTTT: alert validity as HHMM."""
    if duration_minutes < 0:
        raise ValueError(f"Purge duration must not be negative: {duration_minutes}")
    hours = duration_minutes // 60
    minutes = duration_minutes % 60
    return f"{hours:02d}{minutes:02d}"


@dataclass(frozen=True)
class Header:
    """
    A SAME header. Immutable; rendered on demand.

    Construction validates the fixed field widths and rejects more than
    31 location codes with ValueError.
    """
    originator: Originator
    event: str
    locations: Tuple[str, ...]
    purge_time: str  # HHMM format
    issue_time: datetime
    callsign: str

    def __post_init__(self):
        """Validate fields after initialization."""
        if not isinstance(self.originator, Originator):
            object.__setattr__(self, 'originator', Originator.parse(self.originator))
        object.__setattr__(self, 'locations', tuple(self.locations))

        if not isinstance(self.event, str) or not _EVENT_PATTERN.match(self.event):
            raise ValueError(f"Event code must be {EVENT_WIDTH} uppercase letters: {self.event!r}")
        if len(self.locations) > MAX_LOCATIONS:
            raise ValueError(
                f"At most {MAX_LOCATIONS} location codes allowed, got {len(self.locations)}"
            )
        for loc in self.locations:
            if not _LOCATION_PATTERN.match(loc):
                raise ValueError(f"Location code must be {LOCATION_WIDTH} digits: {loc!r}")
        if not _PURGE_PATTERN.match(self.purge_time):
            raise ValueError(f"Purge time must be {PURGE_WIDTH} digits (HHMM): {self.purge_time!r}")
        if len(self.callsign) != CALLSIGN_WIDTH or not _is_ascii(self.callsign):
            raise ValueError(
                f"Callsign must be exactly {CALLSIGN_WIDTH} ASCII characters: {self.callsign!r}"
            )

    @classmethod
    def create(
        cls,
        originator: Union[Originator, str],
        event: str,
        locations: Iterable[str],
        duration_minutes: int,
        callsign: str,
        issue_datetime: Optional[datetime] = None
    ) -> 'Header':
        """
        Create a header from loosely formatted input.

        Args:
            originator: Originator or its 3-letter code (WXR, PEP, CIV, EAS)
            event: 3-letter event code (TOR, SVR, RWT, etc.)
            locations: 6-digit location codes
            duration_minutes: purge time in minutes
            callsign: station callsign, padded with spaces to 8 chars
            issue_datetime: issue time (defaults to now, UTC)

        Returns:
            Header instance
        """
        for name, value in (('event', event), ('callsign', callsign)):
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string: {value!r}")
        if issue_datetime is None:
            issue_datetime = datetime.now(timezone.utc)
        if len(callsign) > CALLSIGN_WIDTH:
            raise ValueError(f"Callsign max {CALLSIGN_WIDTH} characters: {callsign}")
        if isinstance(originator, str):
            originator = Originator.parse(originator)

        return cls(
            originator=originator,
            event=event.upper(),
            locations=tuple(locations),
            purge_time=format_purge_time(duration_minutes),
            issue_time=issue_datetime,
            callsign=callsign.upper().ljust(CALLSIGN_WIDTH)
        )

    @property
    def wire_callsign(self) -> str:
        return self.callsign.replace(FIELD_DELIMITER, CALLSIGN_DELIMITER_SUB)

    def to_string(self) -> str:
        """The header text as transmitted after the preamble."""
        parts = [HEADER_START, self.originator.code, self.event]
        body = FIELD_DELIMITER.join(parts + list(self.locations))
        return (
            f"{body}+{self.purge_time}"
            f"-{format_issue_time(self.issue_time)}"
            f"-{self.wire_callsign}-"
        )

    def render(self) -> bytes:
        """Preamble plus header text, ready for the bit modulator."""
        return PREAMBLE + self.to_string().encode('ascii')

    def __str__(self) -> str:
        return self.to_string()


def render_eom() -> bytes:
    """Preamble plus NNNN, 20 bytes."""
    return PREAMBLE + EOM_MARKER.encode('ascii')
