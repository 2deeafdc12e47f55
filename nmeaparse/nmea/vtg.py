"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) carries ground speed and heading.

VTG Sentence Format:
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/N)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

When stationary the track angle may be empty.
"""

from nmeaparse.nmea.fields import (
    parse_float_field,
    parse_string_field,
    read_fields,
)
from nmeaparse.nmea.types import ErrorSlot, MessageType, VTGMessage

# 9 fields in the basic format, 10 with the FAA mode indicator
_MINIMUM_FIELD_COUNT = 9

# 1 km/h = 1/3.6 m/s
_KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND = 3.6


def _extract_mode(fields: list[str]) -> str | None:
    """Return the FAA mode indicator (NMEA 2.3+), or None on older receivers."""
    if len(fields) <= 9:
        return None
    return parse_string_field(fields[9])


def _compute_speed_meters_per_second(
    speed_kilometers_per_hour: float | None,
) -> float | None:
    """Convert km/h to m/s, the unit downstream fusion code expects.

    Example:
        >>> _compute_speed_meters_per_second(36.0)
        10.0
    """
    if speed_kilometers_per_hour is None:
        return None
    return speed_kilometers_per_hour / _KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND


def _build_vtg_message(fields: list[str]) -> VTGMessage:
    """Map VTG field indices onto a ``VTGMessage``.

        fields[1] -> track_true_degrees
        fields[5] -> speed_knots
        fields[7] -> speed_kilometers_per_hour (m/s derived from it)
        fields[9] -> mode, if present

    Navigation validity requires a mode indicator other than 'N'.
    """
    speed_kilometers_per_hour = parse_float_field(fields[7])
    mode = _extract_mode(fields)

    return VTGMessage(
        type=MessageType.VTG,
        track_true_degrees=parse_float_field(fields[1]),
        speed_knots=parse_float_field(fields[5]),
        speed_kilometers_per_hour=speed_kilometers_per_hour,
        speed_meters_per_second=_compute_speed_meters_per_second(
            speed_kilometers_per_hour
        ),
        mode=mode,
        valid=mode is not None and mode != "N",
    )


def decode_vtg(
    buffer: bytearray,
    error: ErrorSlot | None = None,
) -> VTGMessage | None:
    """Decode a VTG sentence held in a scratch buffer.

    Returns:
        VTGMessage, or None (with ``error`` set) if the checksum is wrong,
        the sentence has too few fields or is not a VTG sentence. Every VTG
        field is optional, so unparseable values decode to None.
    """
    fields = read_fields(buffer, "VTG", _MINIMUM_FIELD_COUNT, error)
    if fields is None:
        return None

    return _build_vtg_message(fields)
