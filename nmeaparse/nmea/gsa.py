"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the
navigation solution together with the dilution of precision values.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                     |   |   |
           | | |                     |   |   +-- VDOP
           | | |                     |   +-- HDOP
           | | |                     +-- PDOP
           | | +-- 12 PRN slots of satellites used (empty if unused)
           | +-- Fix type (1 = none, 2 = 2D, 3 = 3D)
           +-- Selection mode (M = manual, A = automatic)

NMEA 4.11 receivers append a GNSS system ID after VDOP; it is ignored.
"""

import logging

from nmeaparse.nmea.fields import (
    parse_float_field,
    parse_string_field,
    read_fields,
)
from nmeaparse.nmea.types import (
    ErrorCode,
    ErrorSlot,
    GSAMessage,
    MessageType,
    set_error,
)

logger = logging.getLogger(__name__)

_MINIMUM_FIELD_COUNT = 18

_PRN_SLOTS = slice(3, 15)

# Fix types that describe a usable position
_VALID_FIX_TYPES = (2, 3)


def _parse_prns(slots: list[str]) -> list[int]:
    """Collect the PRNs from the twelve satellite slots, skipping empty ones.

    Raises:
        ValueError: If a non-empty slot is not an integer.
    """
    return [int(slot) for slot in slots if slot]


def _build_gsa_message(fields: list[str]) -> GSAMessage:
    """Map GSA field indices onto a ``GSAMessage``.

        fields[1]     -> selection_mode
        fields[2]     -> fix_type (mandatory)
        fields[3:15]  -> satellite_prns
        fields[15]    -> PDOP
        fields[16]    -> HDOP
        fields[17]    -> VDOP

    Raises:
        ValueError: If the fix type is missing or a PRN is not an integer.
    """
    fix_type = int(fields[2])

    return GSAMessage(
        type=MessageType.GSA,
        selection_mode=parse_string_field(fields[1]),
        fix_type=fix_type,
        satellite_prns=_parse_prns(fields[_PRN_SLOTS]),
        position_dilution_of_precision=parse_float_field(fields[15]),
        horizontal_dilution_of_precision=parse_float_field(fields[16]),
        vertical_dilution_of_precision=parse_float_field(fields[17]),
        valid=fix_type in _VALID_FIX_TYPES,
    )


def decode_gsa(
    buffer: bytearray,
    error: ErrorSlot | None = None,
) -> GSAMessage | None:
    """Decode a GSA sentence held in a scratch buffer.

    Args:
        buffer: Private copy of the sentence; rewritten during decoding
        error: Receives an ``ErrorCode`` if decoding fails

    Returns:
        GSAMessage, or None if the sentence fails the shared checks or its
        fix type or a PRN slot cannot be parsed (``INVALID_FIELD``).
    """
    fields = read_fields(buffer, "GSA", _MINIMUM_FIELD_COUNT, error)
    if fields is None:
        return None

    try:
        return _build_gsa_message(fields)
    except (ValueError, IndexError):
        logger.debug("GSA rejected, unparseable field in %r", fields)
        set_error(error, ErrorCode.INVALID_FIELD)
        return None
