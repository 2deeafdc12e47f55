"""Message tags, error codes and record types for decoded NMEA sentences.

Design Decisions:
    1. Closed union of records: every sentence kind has its own dataclass and
       ``NMEAMessage`` is the union of them. The leading ``type`` field is the
       discriminator, so consumers can branch on ``record.type`` or use
       ``isinstance`` and get the same answer.

    2. Optional fields (float | None): NMEA fields may be empty, indicated by
       consecutive commas. Using None distinguishes "no data received" from
       "measured zero".

    3. Separate valid flag: ``valid`` indicates navigation validity, NOT parse
       validity. Parse failures are reported as a None return plus an
       ``ErrorCode`` in the caller's ``ErrorSlot``; a successfully parsed
       sentence may still describe an invalid fix.
"""

import enum
from dataclasses import dataclass, field


class MessageType(enum.Enum):
    """Sentence kinds the registry can route.

    Member names match the three-letter sentence identifier. Adding a kind
    means adding a member here, a registry entry and a decoder together.
    """

    GGA = "GGA"
    GSA = "GSA"
    GSV = "GSV"
    VTG = "VTG"
    UNKNOWN = "UNKNOWN"


class ErrorCode(enum.Enum):
    """Reasons a sentence produced no record."""

    # Raised by the dispatcher: the prefix matches no registry entry.
    TYPE_NOT_UNDERSTOOD = "type_not_understood"

    # Raised by decoders.
    INVALID_CHECKSUM = "invalid_checksum"
    MALFORMED_SENTENCE = "malformed_sentence"
    WRONG_SENTENCE_TYPE = "wrong_sentence_type"
    INVALID_FIELD = "invalid_field"


@dataclass
class ErrorSlot:
    """Mutable holder a caller passes in to learn why parsing failed.

    ``code`` stays None on success. On failure it holds the ``ErrorCode`` of
    whichever stage rejected the sentence.

    Example:
        >>> error = ErrorSlot()
        >>> parse("$GPXYZ,1,2,3*00", error) is None
        True
        >>> error.code
        <ErrorCode.TYPE_NOT_UNDERSTOOD: 'type_not_understood'>
    """

    code: ErrorCode | None = None


def set_error(error: ErrorSlot | None, code: ErrorCode) -> None:
    """Write ``code`` into ``error`` if the caller supplied a slot."""
    if error is not None:
        error.code = code


@dataclass
class GGAMessage:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        type: Always ``MessageType.GGA`` once returned by ``parse``.

        utc_time: UTC timestamp in HHMMSS.ss format (e.g., "123519.00").
            None if field was empty.

        latitude_degrees: Latitude in decimal degrees, positive=North.
            None if no fix or field empty.

        longitude_degrees: Longitude in decimal degrees, positive=East.
            None if no fix or field empty.

        fix_quality: GPS fix quality indicator (always present, defaults to 0):
            0 = Invalid, 1 = GPS fix, 2 = DGPS fix, 4 = RTK Fixed,
            5 = RTK Float, 6 = Dead reckoning.

        num_satellites: Number of satellites used in the fix solution.

        horizontal_dilution_of_precision: HDOP; lower is better.

        altitude_meters: Altitude above mean sea level in meters.

        geoid_height_meters: Height of geoid above the WGS84 ellipsoid.

        valid: True only if fix_quality > 0.
    """

    type: MessageType
    utc_time: str | None
    latitude_degrees: float | None
    longitude_degrees: float | None
    fix_quality: int
    num_satellites: int | None
    horizontal_dilution_of_precision: float | None
    altitude_meters: float | None
    geoid_height_meters: float | None
    valid: bool


@dataclass
class GSAMessage:
    """Parsed GSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        type: Always ``MessageType.GSA`` once returned by ``parse``.

        selection_mode: 'M' = manual 2D/3D, 'A' = automatic. None if empty.

        fix_type: 1 = no fix, 2 = 2D fix, 3 = 3D fix.

        satellite_prns: PRNs of the satellites used in the solution, in
            sentence order. Empty slots are dropped.

        position_dilution_of_precision: PDOP, None if empty.
        horizontal_dilution_of_precision: HDOP, None if empty.
        vertical_dilution_of_precision: VDOP, None if empty.

        valid: True only for a 2D or 3D fix.
    """

    type: MessageType
    selection_mode: str | None
    fix_type: int
    satellite_prns: list[int]
    position_dilution_of_precision: float | None
    horizontal_dilution_of_precision: float | None
    vertical_dilution_of_precision: float | None
    valid: bool


@dataclass
class SatelliteInfo:
    """One satellite block of a GSV sentence."""

    prn: int
    elevation_degrees: int | None
    azimuth_degrees: int | None
    snr_db: int | None  # None when the satellite is not being tracked


@dataclass
class GSVMessage:
    """Parsed GSV (GNSS Satellites in View) sentence.

    A full sky view is split across ``total_messages`` sentences of up to
    four satellites each; every sentence decodes to its own record.

    Attributes:
        type: Always ``MessageType.GSV`` once returned by ``parse``.
        total_messages: Number of GSV sentences in this cycle.
        message_number: 1-based index of this sentence within the cycle.
        satellites_in_view: Total satellites visible, None if empty.
        satellites: The satellite blocks carried by this sentence.
    """

    type: MessageType
    total_messages: int
    message_number: int
    satellites_in_view: int | None
    satellites: list[SatelliteInfo] = field(default_factory=list)


@dataclass
class VTGMessage:
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    Attributes:
        type: Always ``MessageType.VTG`` once returned by ``parse``.

        track_true_degrees: Track relative to true north in degrees.
            None when stationary.

        speed_knots: Ground speed in knots, None if empty.

        speed_kilometers_per_hour: Ground speed in km/h, None if empty.

        speed_meters_per_second: Ground speed in m/s, computed from km/h.

        mode: FAA mode indicator (A/D/E/N), None on older receivers.

        valid: True only if mode is present and not 'N'.
    """

    type: MessageType
    track_true_degrees: float | None
    speed_knots: float | None
    speed_kilometers_per_hour: float | None
    speed_meters_per_second: float | None
    mode: str | None
    valid: bool


NMEAMessage = GGAMessage | GSAMessage | GSVMessage | VTGMessage
