"""
Flask routes for easgen
"""

import base64
import io
import logging

from flask import Blueprint, request, jsonify, send_file

from ..audio import to_bytes
from ..eas import ORIGINATOR_CODES, get_originator_description
from ..same import AttentionSignal, CompositionPolicy, EasWarning, Header, render_sections
from ..same.warning import bursts
from ..same.constants import (
    SAMPLE_RATE, SAMPLE_RATE_MAX, HEADER_REPETITIONS, SECTION_GAP,
    ATTENTION_DURATION_DEFAULT, ATTENTION_DURATION_MAX,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__)


def _header_from_request(data: dict) -> Header:
    return Header.create(
        originator=data['originator'],
        event=data['event'],
        locations=data['locations'],
        duration_minutes=int(data['duration']),
        callsign=data['callsign']
    )


def _sample_rate(data: dict) -> int:
    sample_rate = int(data.get('sample_rate', SAMPLE_RATE))
    if not 0 < sample_rate <= SAMPLE_RATE_MAX:
        raise ValueError(f"Sample rate must be between 1 and {SAMPLE_RATE_MAX}: {sample_rate}")
    return sample_rate


def _attention(kind: str, duration) -> AttentionSignal:
    duration = float(duration)
    if duration > ATTENTION_DURATION_MAX:
        raise ValueError(f"Attention signal max {ATTENTION_DURATION_MAX}s: {duration}")
    return AttentionSignal.from_kind(kind, duration)


def _describe(header: Header) -> dict:
    return {
        'originator': header.originator.code,
        'originator_name': get_originator_description(header.originator.code),
        'event': header.event,
        'locations': list(header.locations),
        'purge_time': header.purge_time,
        'issue_time': header.issue_time.isoformat(),
        'callsign': header.callsign
    }


@api_bp.route('/encode', methods=['POST'])
def encode_message():
    """
    Encode a SAME warning to audio.

    Request JSON:
        originator: str - originator code (WXR, PEP, CIV, EAS)
        event: str - event code (TOR, SVR, etc.)
        locations: list[str] - FIPS location codes
        duration: int - alert duration in minutes
        callsign: str - station callsign
        attention_duration: float - attention tone duration (optional, default 8, max 25)
        attention_kind: str - 'single' or 'combined' (optional, default combined)
        attention_always: bool - send the attention tone without a message (optional, default true)
        critical: bool - whether the warning warrants the attention tone (optional, default true)
        sample_rate: int - output sample rate (optional, default 44100, max 192000)

    Returns:
        JSON with header string and base64 audio
    """
    data = request.get_json(silent=True) or {}

    try:
        header = _header_from_request(data)
        attention = _attention(
            data.get('attention_kind', 'combined'),
            data.get('attention_duration', ATTENTION_DURATION_DEFAULT)
        )
        sample_rate = _sample_rate(data)

        # no message audio comes through this endpoint, so the tone is sent
        # unconditionally unless the caller opts out
        policy = CompositionPolicy(attention_always=bool(data.get('attention_always', True)))
        warning = EasWarning(header, attention, policy)

        audio = warning.construct(sample_rate, critical=bool(data.get('critical', True)))
        audio_b64 = base64.b64encode(to_bytes(audio, sample_rate)).decode('utf-8')
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Encode request rejected: %s", e)
        return jsonify({
            'success': False,
            'error': str(e)
        }), 400

    logger.info("Encoded %s (%d samples)", header.to_string(), len(audio))
    return jsonify({
        'success': True,
        'header': header.to_string(),
        'audio': audio_b64,
        'audio_format': 'wav',
        'sample_rate': sample_rate,
        'parsed': _describe(header)
    })


@api_bp.route('/encode/header-only', methods=['POST'])
def encode_header_only():
    """
    Encode just the SAME header bursts (no attention tone or EOM).
    Useful for testing or partial generation.
    """
    data = request.get_json(silent=True) or {}

    try:
        header = _header_from_request(data)
        sample_rate = _sample_rate(data)
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Header-only request rejected: %s", e)
        return jsonify({
            'success': False,
            'error': str(e)
        }), 400

    sections = bursts(header.render(), HEADER_REPETITIONS, SECTION_GAP)
    audio = render_sections(sections, sample_rate)
    audio_b64 = base64.b64encode(to_bytes(audio, sample_rate)).decode('utf-8')

    return jsonify({
        'success': True,
        'header': header.to_string(),
        'audio': audio_b64
    })


@api_bp.route('/attention-tone', methods=['GET'])
def get_attention_tone():
    """
    Get just the attention tone audio.
    Query params:
        duration: float - duration in seconds (default 8, 8 to 25)
        kind: str - 'single' or 'combined' (default combined)
        sample_rate: int - output sample rate (default 44100)
    """
    try:
        attention = _attention(
            request.args.get('kind', 'combined'),
            request.args.get('duration', ATTENTION_DURATION_DEFAULT)
        )
        sample_rate = _sample_rate(request.args)
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400

    wav_bytes = to_bytes(attention.render(sample_rate), sample_rate)

    return send_file(
        io.BytesIO(wav_bytes),
        mimetype='audio/wav',
        as_attachment=False,
        download_name='attention.wav'
    )


@api_bp.route('/codes/originators', methods=['GET'])
def get_originator_codes():
    """Get all originator codes."""
    return jsonify(ORIGINATOR_CODES)
