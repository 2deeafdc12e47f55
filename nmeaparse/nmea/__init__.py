"""NMEA 0183 sentence decoders for GGA, GSA, GSV and VTG sentences."""

from nmeaparse.nmea.checksum import validate_checksum
from nmeaparse.nmea.gga import decode_gga
from nmeaparse.nmea.gsa import decode_gsa
from nmeaparse.nmea.gsv import decode_gsv
from nmeaparse.nmea.types import (
    ErrorCode,
    ErrorSlot,
    GGAMessage,
    GSAMessage,
    GSVMessage,
    MessageType,
    NMEAMessage,
    SatelliteInfo,
    VTGMessage,
)
from nmeaparse.nmea.vtg import decode_vtg

__all__ = [
    "ErrorCode",
    "ErrorSlot",
    "GGAMessage",
    "GSAMessage",
    "GSVMessage",
    "MessageType",
    "NMEAMessage",
    "SatelliteInfo",
    "VTGMessage",
    "decode_gga",
    "decode_gsa",
    "decode_gsv",
    "decode_vtg",
    "validate_checksum",
]
