"""Field-level helpers shared by the sentence decoders.

Decoders receive the sentence as a private ``bytearray`` and are allowed to
rewrite it. ``load_sentence`` and ``split_fields`` do exactly that: they trim
the buffer in place and cut the checksum off before splitting on commas.

NMEA fields may be empty (consecutive commas indicate missing data). The
``parse_*_field`` helpers return None for empty fields so callers can tell
"no data" from "zero value".
"""

import logging

from nmeaparse.nmea.checksum import validate_checksum
from nmeaparse.nmea.types import ErrorCode, ErrorSlot, set_error

logger = logging.getLogger(__name__)

# Talker IDs accepted by the decoders:
#   GP = GPS (USA)
#   GN = Multi-GNSS (combined solution)
#   GL = GLONASS (Russia)
#   GA = Galileo (Europe)
#   GB = BeiDou (China)
#   GQ = QZSS (Japan)
VALID_TALKER_IDS = ("GP", "GN", "GL", "GA", "GB", "GQ")


def load_sentence(buffer: bytearray) -> str:
    """Strip surrounding whitespace from ``buffer`` in place and decode it.

    Bytes outside ASCII are replaced, so they later fail the checksum
    instead of raising.
    """
    buffer[:] = buffer.strip()
    return buffer.decode("ascii", errors="replace")


def split_fields(buffer: bytearray) -> list[str]:
    """Destructively tokenize a checksum-validated sentence.

    Everything from the '*' onwards and the leading '$' are deleted from
    ``buffer`` before the remainder is split on commas.

    Example:
        Input:  bytearray(b"$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25")
        Output: ["GPVTG", "054.7", "T", "034.4", "M", "005.5", "N", "010.2", "K", "A"]
        Buffer afterwards: bytearray(b"GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A")
    """
    del buffer[buffer.index(b"*") :]
    del buffer[:1]
    return buffer.decode("ascii", errors="replace").split(",")


def is_sentence_type(identifier: str, sentence_type: str) -> bool:
    """Check that ``identifier`` is ``sentence_type`` from a supported talker.

    Example:
        is_sentence_type("GNGGA", "GGA") -> True
        is_sentence_type("XXGGA", "GGA") -> False (unsupported talker)
        is_sentence_type("GNVTG", "GGA") -> False
    """
    if len(identifier) != 5:
        return False
    return identifier[:2] in VALID_TALKER_IDS and identifier[2:] == sentence_type


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty or invalid.

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")  # empty field
        None
    """
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_int_field(value: str) -> int | None:
    """Parse a string field to int, returning None if empty or invalid."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_string_field(value: str) -> str | None:
    """Return the field unchanged, or None if empty."""
    if not value:
        return None
    return value


def _parse_coordinate_parts(value: str) -> tuple[int, float] | None:
    """Split a DDDMM.MMMM coordinate into degrees and minutes.

    The two digits before the decimal point are always minutes.

    Example:
        >>> _parse_coordinate_parts("4807.038")  # 48° 07.038'
        (48, 7.038)
    """
    try:
        dot_position = value.index(".")
        degrees = int(value[: dot_position - 2])
        minutes = float(value[dot_position - 2 :])
        return degrees, minutes
    except (ValueError, IndexError):
        return None


def convert_to_decimal_degrees(
    value: str,
    direction: str,
) -> float | None:
    """Convert an NMEA coordinate (DDDMM.MMMM) to signed decimal degrees.

    North/East are positive, South/West negative:
        decimal_degrees = degrees + (minutes / 60)

    Args:
        value: Coordinate in DDDMM.MMMM format (e.g., "4807.038")
        direction: Hemisphere indicator ("N", "S", "E", or "W")

    Returns:
        Decimal degrees, or None if either field is empty or unparseable

    Example:
        >>> convert_to_decimal_degrees("01131.000", "W")
        -11.5166667
    """
    if not value or not direction:
        return None

    parts = _parse_coordinate_parts(value)
    if parts is None:
        return None

    degrees, minutes = parts
    decimal_degrees = degrees + minutes / 60.0

    if direction in ("S", "W"):
        return -decimal_degrees

    return decimal_degrees


def read_fields(
    buffer: bytearray,
    sentence_type: str,
    minimum_field_count: int,
    error: ErrorSlot | None,
) -> list[str] | None:
    """Run the checks every decoder shares and return the sentence's fields.

    In order: whitespace stripping, checksum validation, destructive
    tokenization, field count, and identifier check. The first failing
    check writes its code into ``error`` and None is returned.

    Args:
        buffer: Scratch copy of the sentence; rewritten in place
        sentence_type: Three-letter sentence ID the decoder handles
        minimum_field_count: Fields required, counting the identifier
        error: Caller's error slot, or None

    Returns:
        The fields, identifier first, or None on failure
    """
    sentence = load_sentence(buffer)

    if not validate_checksum(sentence):
        logger.debug("%s rejected, bad checksum: %r", sentence_type, sentence)
        set_error(error, ErrorCode.INVALID_CHECKSUM)
        return None

    fields = split_fields(buffer)
    if len(fields) < minimum_field_count:
        logger.debug(
            "%s rejected, %d fields (need %d)",
            sentence_type,
            len(fields),
            minimum_field_count,
        )
        set_error(error, ErrorCode.MALFORMED_SENTENCE)
        return None

    if not is_sentence_type(fields[0], sentence_type):
        logger.debug("%s rejected, identifier is %r", sentence_type, fields[0])
        set_error(error, ErrorCode.WRONG_SENTENCE_TYPE)
        return None

    return fields
