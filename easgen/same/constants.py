"""
SAME protocol constants per 47 CFR 11.31
https://www.govinfo.gov/content/pkg/CFR-2010-title47-vol1/xml/CFR-2010-title47-vol1-sec11-31.xml
"""

SAMPLE_RATE = 44100  # default output rate
SAMPLE_RATE_MAX = 192000

# AFSK modulation parameters
BIT_DURATION = 0.00192   # seconds per bit (520.83 baud)
MARK_CYCLES = 4          # binary 1
SPACE_CYCLES = 3         # binary 0
MARK_FREQ = MARK_CYCLES / BIT_DURATION    # ~2083.3 Hz
SPACE_FREQ = SPACE_CYCLES / BIT_DURATION  # 1562.5 Hz
BITS_PER_BYTE = 8

# Attention signal
ATTENTION_SINGLE_FREQ = 1050.0   # Hz, NOAA weather radio tone
ATTENTION_FREQ_1 = 853.0         # Hz
ATTENTION_FREQ_2 = 960.0         # Hz
ATTENTION_DURATION_MIN = 8.0     # seconds
ATTENTION_DURATION_DEFAULT = 8.0
ATTENTION_DURATION_MAX = 25.0   # seconds

# Framing
PREAMBLE_BYTE = 0xAB     # 10101011 binary
PREAMBLE_BYTES = 16
PREAMBLE = bytes([PREAMBLE_BYTE] * PREAMBLE_BYTES)
HEADER_START = "ZCZC"
EOM_MARKER = "NNNN"
FIELD_DELIMITER = "-"
CALLSIGN_DELIMITER_SUB = "\\"  # stands in for '-' inside the callsign

# Field widths
ORIGINATOR_WIDTH = 3
EVENT_WIDTH = 3
LOCATION_WIDTH = 6
PURGE_WIDTH = 4
CALLSIGN_WIDTH = 8
MAX_LOCATIONS = 31

# Timing
HEADER_REPETITIONS = 3   # header sent 3 times
EOM_REPETITIONS = 3      # EOM sent 3 times
SECTION_GAP = 1.0        # seconds of silence between bursts
MESSAGE_LEAD_IN = 1.0    # silence before the message audio
