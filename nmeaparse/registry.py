"""Sentence type registry.

Maps the six leading characters of a sentence ('$', two-character talker ID,
three-character sentence ID) to a ``MessageType``. The table is plain
immutable data; ``classify`` only reads it, so any number of threads may call
it at once.

Entries are tried in declaration order and the first exact match wins. The
table is checked once at import time so that overlapping or mistyped
prefixes fail loudly instead of making an entry unreachable or routing a
sentence to the wrong decoder.
"""

from collections.abc import Iterable

from nmeaparse.nmea.types import MessageType

__all__ = ["SENTENCE_TYPES", "check_registry", "classify"]

PREFIX_LENGTH = 6

SENTENCE_TYPES: tuple[tuple[str, MessageType], ...] = (
    ("$GPGGA", MessageType.GGA),
    ("$GPGSA", MessageType.GSA),
    ("$GPGSV", MessageType.GSV),
    ("$GPVTG", MessageType.VTG),
    ("$GNGGA", MessageType.GGA),
    ("$GNGSA", MessageType.GSA),
    ("$GNGSV", MessageType.GSV),
    ("$GNVTG", MessageType.VTG),
)


def check_registry(entries: Iterable[tuple[str, MessageType]]) -> None:
    """Reject a registry table that could misroute a sentence.

    Each prefix must be six characters, start with '$', appear only once,
    map to a concrete type, and end with that type's sentence ID.

    Raises:
        ValueError: Describing the first offending entry.
    """
    seen: set[str] = set()
    for prefix, message_type in entries:
        if len(prefix) != PREFIX_LENGTH or not prefix.startswith("$"):
            raise ValueError(f"Malformed sentence prefix {prefix!r}.")
        if prefix in seen:
            raise ValueError(f"Sentence prefix {prefix!r} is registered twice.")
        if message_type is MessageType.UNKNOWN:
            raise ValueError(f"Sentence prefix {prefix!r} maps to UNKNOWN.")
        if prefix[3:] != message_type.value:
            raise ValueError(
                f"Sentence prefix {prefix!r} does not name {message_type.value}."
            )
        seen.add(prefix)


check_registry(SENTENCE_TYPES)


def classify(sentence: str) -> MessageType:
    """Determine the message type of a sentence from its first six characters.

    Args:
        sentence: Raw sentence, e.g. "$GPGGA,123519.00,...*61"

    Returns:
        The type of the first registry entry matching the prefix, or
        ``MessageType.UNKNOWN`` if none does (including sentences shorter
        than six characters).

    Raises:
        TypeError: If ``sentence`` is not a string.
        ValueError: If ``sentence`` is empty.

    Example:
        >>> classify("$GPGGA,000000,...")
        <MessageType.GGA: 'GGA'>
        >>> classify("$GPXYZ,...")
        <MessageType.UNKNOWN: 'UNKNOWN'>
    """
    if not isinstance(sentence, str):
        raise TypeError(f"sentence must be str, not {type(sentence).__name__}")
    if not sentence:
        raise ValueError("sentence must not be empty")

    prefix = sentence[:PREFIX_LENGTH]
    for registered_prefix, message_type in SENTENCE_TYPES:
        if prefix == registered_prefix:
            return message_type
    return MessageType.UNKNOWN
