"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) carries the position fix: UTC time,
coordinates, fix quality, satellite count, HDOP and altitude.

GGA Sentence Format:
    $GPGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*61
           |         |        | |         | | |  |   |     | |     |
           |         |        | |         | | |  |   |     | |     +-- DGPS info (optional)
           |         |        | |         | | |  |   |     | +-- Geoid height (M=meters)
           |         |        | |         | | |  |   +-----+-- Altitude above MSL
           |         |        | |         | | |  +-- HDOP (horizontal dilution)
           |         |        | |         | | +-- Number of satellites
           |         |        | |         | +-- Fix quality (0-6)
           |         |        | +---------+-- Longitude + E/W
           |         +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)
"""

from nmeaparse.nmea.fields import (
    convert_to_decimal_degrees,
    parse_float_field,
    parse_int_field,
    parse_string_field,
    read_fields,
)
from nmeaparse.nmea.types import ErrorSlot, GGAMessage, MessageType

# 14 standard fields (indices 0-13); some receivers append DGPS station info
_MINIMUM_FIELD_COUNT = 14


def _build_gga_message(fields: list[str]) -> GGAMessage:
    """Map GGA field indices onto a ``GGAMessage``.

        fields[1]  -> utc_time
        fields[2]  -> latitude (DDMM.MMMM), fields[3] -> N/S
        fields[4]  -> longitude (DDDMM.MMMM), fields[5] -> E/W
        fields[6]  -> fix_quality
        fields[7]  -> num_satellites
        fields[8]  -> HDOP
        fields[9]  -> altitude above MSL
        fields[11] -> geoid height

    An empty fix quality means no fix, so it defaults to 0.
    """
    fix_quality = parse_int_field(fields[6]) or 0

    return GGAMessage(
        type=MessageType.GGA,
        utc_time=parse_string_field(fields[1]),
        latitude_degrees=convert_to_decimal_degrees(fields[2], fields[3]),
        longitude_degrees=convert_to_decimal_degrees(fields[4], fields[5]),
        fix_quality=fix_quality,
        num_satellites=parse_int_field(fields[7]),
        horizontal_dilution_of_precision=parse_float_field(fields[8]),
        altitude_meters=parse_float_field(fields[9]),
        geoid_height_meters=parse_float_field(fields[11]),
        valid=fix_quality > 0,
    )


def decode_gga(
    buffer: bytearray,
    error: ErrorSlot | None = None,
) -> GGAMessage | None:
    """Decode a GGA sentence held in a scratch buffer.

    Args:
        buffer: Private copy of the sentence; rewritten during decoding
        error: Receives an ``ErrorCode`` if decoding fails

    Returns:
        GGAMessage, or None if the checksum is wrong, the sentence has too
        few fields or is not a GGA sentence from a supported talker.

    Note:
        A returned message with valid=False is a well-formed sentence
        without a fix (fix_quality=0), not a decoding failure. Every GGA
        field is optional: an unparseable value decodes to None (fix quality
        to 0) rather than rejecting the sentence.
    """
    fields = read_fields(buffer, "GGA", _MINIMUM_FIELD_COUNT, error)
    if fields is None:
        return None

    return _build_gga_message(fields)
