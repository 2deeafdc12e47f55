"""NMEA checksum validation.

The checksum is the XOR of every character between '$' and '*' (exclusive),
written after the '*' as a two-digit hexadecimal number.

Example sentence structure:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
    ^                 checksum content            ^^
    start                                      checksum (0x39)

The dispatcher never calls into this module; each decoder validates the
sentence it was handed before tokenizing it.
"""

import string


def _split_checksum(sentence: str) -> tuple[str, str] | None:
    """Separate ``$<content>*<checksum>`` into content and checksum text.

    Returns None if the '$' or '*' delimiter is missing, or if the two
    characters after the '*' are missing or not both hexadecimal digits.

    Example:
        >>> _split_checksum("$GPGGA,123519*61")
        ('GPGGA,123519', '61')
    """
    if not sentence.startswith("$") or "*" not in sentence:
        return None

    end = sentence.index("*")
    provided = sentence[end + 1 : end + 3]
    if len(provided) != 2 or not all(c in string.hexdigits for c in provided):
        return None

    return sentence[1:end], provided


def compute_checksum(content: str) -> int:
    """XOR the character codes of ``content``.

    Args:
        content: The text between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Args:
        sentence: Complete sentence including '$', '*', and checksum.
                  Surrounding whitespace and line endings are ignored.

    Returns:
        True if the checksum matches, False if the sentence is missing a
        delimiter, the checksum is truncated or not hexadecimal, or the
        computed value differs.

    Example:
        >>> validate_checksum("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39")
        True
    """
    parts = _split_checksum(sentence.strip())
    if parts is None:
        return False

    content, provided = parts
    return compute_checksum(content) == int(provided, 16)
