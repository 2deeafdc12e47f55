"""Sentence dispatcher: classify, decode, and tag.

``parse`` is the only way to turn a raw sentence into a record:

1. ``classify`` the untouched sentence;
2. copy it into a private ``bytearray`` that the decoder may rewrite;
3. hand the copy to the one decoder registered for the type;
4. stamp the returned record with the classified type;
5. clear the copy, whatever the outcome.

Recoverable failures never raise. They return None and, if the caller passed
an ``ErrorSlot``, leave an ``ErrorCode`` in it.
"""

import contextlib
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Protocol

from nmeaparse.nmea.gga import decode_gga
from nmeaparse.nmea.gsa import decode_gsa
from nmeaparse.nmea.gsv import decode_gsv
from nmeaparse.nmea.types import (
    ErrorCode,
    ErrorSlot,
    MessageType,
    NMEAMessage,
    set_error,
)
from nmeaparse.nmea.vtg import decode_vtg
from nmeaparse.registry import SENTENCE_TYPES, classify

__all__ = ["DECODERS", "Decoder", "check_decoders", "parse"]


class Decoder(Protocol):
    """Contract every sentence decoder honors.

    A decoder may rewrite ``buffer`` but must not keep a reference to it after
    returning. When it returns None it writes its own ``ErrorCode`` into
    ``error`` (if given).
    """

    def __call__(
        self, buffer: bytearray, error: ErrorSlot | None = None
    ) -> NMEAMessage | None: ...


DECODERS: MappingProxyType[MessageType, Decoder] = MappingProxyType(
    {
        MessageType.GGA: decode_gga,
        MessageType.GSA: decode_gsa,
        MessageType.GSV: decode_gsv,
        MessageType.VTG: decode_vtg,
    }
)


def check_decoders(
    decoders: Mapping[MessageType, Decoder],
    entries: Iterable[tuple[str, MessageType]],
) -> None:
    """Reject a decoder table that is out of step with the registry.

    Raises:
        ValueError: If ``UNKNOWN`` has a decoder, or a registered type has none.
    """
    if MessageType.UNKNOWN in decoders:
        raise ValueError("UNKNOWN sentences must not have a decoder.")
    undecodable = sorted(
        message_type.value
        for _, message_type in entries
        if message_type not in decoders
    )
    if undecodable:
        raise ValueError(f"No decoder registered for {undecodable}.")


check_decoders(DECODERS, SENTENCE_TYPES)


@contextlib.contextmanager
def _scratch_copy(sentence: str) -> Iterator[bytearray]:
    """Yield a fresh mutable copy of ``sentence``, cleared on exit."""
    buffer = bytearray(sentence.encode("ascii", errors="replace"))
    try:
        yield buffer
    finally:
        buffer.clear()


def parse(sentence: str, error: ErrorSlot | None = None) -> NMEAMessage | None:
    """Decode a sentence into the record type its prefix selects.

    Args:
        sentence: Raw sentence. It is never modified.
        error: Optional slot that receives an ``ErrorCode`` on failure.
            It is reset to None first, so a reused slot never shows a
            stale code after a success.

    Returns:
        A record whose ``type`` equals ``classify(sentence)``, or None if the
        type is not understood (``TYPE_NOT_UNDERSTOOD``) or the decoder
        rejected the sentence (the decoder's code).

    Raises:
        TypeError: If ``sentence`` is not a string.
        ValueError: If ``sentence`` is empty.

    Example:
        >>> error = ErrorSlot()
        >>> parse("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25", error).type
        <MessageType.VTG: 'VTG'>
        >>> parse("$GPXYZ,1*00", error) is None, error.code
        (True, <ErrorCode.TYPE_NOT_UNDERSTOOD: 'type_not_understood'>)
    """
    message_type = classify(sentence)
    if error is not None:
        error.code = None

    if message_type is MessageType.UNKNOWN:
        set_error(error, ErrorCode.TYPE_NOT_UNDERSTOOD)
        return None

    decoder = DECODERS.get(message_type)
    if decoder is None:
        set_error(error, ErrorCode.TYPE_NOT_UNDERSTOOD)
        return None

    with _scratch_copy(sentence) as buffer:
        record = decoder(buffer, error)

    if record is None:
        if error is not None and error.code is None:
            error.code = ErrorCode.MALFORMED_SENTENCE
        return None

    record.type = message_type
    return record
