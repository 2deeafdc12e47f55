"""Classify NMEA 0183 sentences and decode them into tagged records."""

from nmeaparse.dispatcher import DECODERS, Decoder, parse
from nmeaparse.nmea import (
    ErrorCode,
    ErrorSlot,
    GGAMessage,
    GSAMessage,
    GSVMessage,
    MessageType,
    NMEAMessage,
    SatelliteInfo,
    VTGMessage,
    validate_checksum,
)
from nmeaparse.registry import SENTENCE_TYPES, check_registry, classify

__all__ = [
    "DECODERS",
    "Decoder",
    "ErrorCode",
    "ErrorSlot",
    "GGAMessage",
    "GSAMessage",
    "GSVMessage",
    "MessageType",
    "NMEAMessage",
    "SENTENCE_TYPES",
    "SatelliteInfo",
    "VTGMessage",
    "check_registry",
    "classify",
    "parse",
    "validate_checksum",
]
