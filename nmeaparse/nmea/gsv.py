"""GSV sentence decoder.

GSV (GNSS Satellites in View) reports the satellites the receiver can see,
four per sentence, split over several sentences per cycle.

GSV Sentence Format:
    $GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75
           | | |  |  |  |   |
           | | |  |  |  |   +-- SNR in dB (empty when not tracking)
           | | |  |  |  +-- Azimuth, degrees true
           | | |  |  +-- Elevation, degrees
           | | |  +-- PRN; this block of four repeats up to four times
           | | +-- Satellites in view
           | +-- Message number
           +-- Total number of messages
"""

import logging

from nmeaparse.nmea.fields import parse_int_field, read_fields
from nmeaparse.nmea.types import (
    ErrorCode,
    ErrorSlot,
    GSVMessage,
    MessageType,
    SatelliteInfo,
    set_error,
)

logger = logging.getLogger(__name__)

_MINIMUM_FIELD_COUNT = 4

_FIRST_BLOCK_INDEX = 4
_BLOCK_SIZE = 4


def _parse_satellites(fields: list[str]) -> list[SatelliteInfo]:
    """Decode the satellite blocks following the header fields.

    Incomplete trailing blocks (such as the NMEA 4.11 signal ID) and blocks
    with an empty PRN are skipped.
    """
    satellites = []
    block_count = (len(fields) - _FIRST_BLOCK_INDEX) // _BLOCK_SIZE
    for block in range(block_count):
        start = _FIRST_BLOCK_INDEX + block * _BLOCK_SIZE
        prn, elevation, azimuth, snr = fields[start : start + _BLOCK_SIZE]
        if not prn:
            continue
        satellites.append(
            SatelliteInfo(
                prn=int(prn),
                elevation_degrees=parse_int_field(elevation),
                azimuth_degrees=parse_int_field(azimuth),
                snr_db=parse_int_field(snr),
            )
        )
    return satellites


def _build_gsv_message(fields: list[str]) -> GSVMessage:
    """Map GSV field indices onto a ``GSVMessage``.

    Raises:
        ValueError: If the message counters are missing or inconsistent,
            or a PRN is not an integer.
    """
    total_messages = int(fields[1])
    message_number = int(fields[2])
    if not 1 <= message_number <= total_messages:
        raise ValueError(
            f"message {message_number} of {total_messages} is out of range"
        )

    return GSVMessage(
        type=MessageType.GSV,
        total_messages=total_messages,
        message_number=message_number,
        satellites_in_view=parse_int_field(fields[3]),
        satellites=_parse_satellites(fields),
    )


def decode_gsv(
    buffer: bytearray,
    error: ErrorSlot | None = None,
) -> GSVMessage | None:
    """Decode a GSV sentence held in a scratch buffer.

    Returns:
        GSVMessage, or None if the sentence fails the shared checks or its
        message counters or PRNs cannot be parsed (``INVALID_FIELD``).
    """
    fields = read_fields(buffer, "GSV", _MINIMUM_FIELD_COUNT, error)
    if fields is None:
        return None

    try:
        return _build_gsv_message(fields)
    except (ValueError, IndexError) as e:
        logger.debug("GSV rejected: %s", e)
        set_error(error, ErrorCode.INVALID_FIELD)
        return None
