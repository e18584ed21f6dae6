"""Byte-string helpers for the ISO 8601 codecs.

The parsers work on ``bytes`` so that every index is a character index.
These helpers raise ``ValueError`` on malformed input; callers translate
that into their own format error.

This module is not part of the public API.
"""

from __future__ import annotations

from fractions import Fraction


def zero_pad(value: int, width: int) -> str:
    """Return the decimal text of value, zero-padded to at least width.

    The sign counts toward the width and nothing is ever truncated.

    Examples:
        >>> zero_pad(7, 2)
        '07'
        >>> zero_pad(-1, 2)
        '-1'
        >>> zero_pad(100, 2)
        '100'
    """
    return f"{value:0{width}d}"


def split_at(data: bytes, *indices: int) -> list[bytes]:
    """Split data at fixed offsets.

    Examples:
        >>> split_at(b"123456", 2, 4)
        [b'12', b'34', b'56']
    """
    parts = []
    start = 0
    for index in indices:
        parts.append(data[start:index])
        start = index
    parts.append(data[start:])
    return parts


def split_keep(data: bytes, delimiters: bytes) -> list[bytes]:
    """Split data on any delimiter byte, keeping each delimiter as a segment.

    Empty segments between adjacent delimiters are kept too, so the
    segment shape reflects the input exactly.

    Examples:
        >>> split_keep(b"12:00,5+01", b".,+-")
        [b'12:00', b',', b'5', b'+', b'01']
        >>> split_keep(b"1200", b".,+-")
        [b'1200']
    """
    segments = []
    start = 0
    for index, byte in enumerate(data):
        if byte in delimiters:
            segments.append(data[start:index])
            segments.append(data[index : index + 1])
            start = index + 1
    segments.append(data[start:])
    return segments


def is_digits(data: bytes) -> bool:
    """Return True if data is non-empty and made only of ASCII digits."""
    return bool(data) and all(0x30 <= byte <= 0x39 for byte in data)


def parse_int(data: bytes) -> int:
    """Parse an optionally signed decimal integer.

    Unlike ``int()``, surrounding whitespace and underscores are rejected.

    Raises:
        ValueError: If data is not an optional sign followed by digits.
    """
    sign = 1
    digits = data
    if data[:1] in (b"+", b"-"):
        sign = -1 if data[:1] == b"-" else 1
        digits = data[1:]
    if not is_digits(digits):
        raise ValueError(f"not a decimal integer: {data!r}")
    return sign * int(digits)


def parse_fraction(data: bytes) -> Fraction:
    """Parse the digits after a radix point as an exact value in [0, 1).

    Examples:
        >>> parse_fraction(b"5")
        Fraction(1, 2)
        >>> parse_fraction(b"125")
        Fraction(1, 8)

    Raises:
        ValueError: If data is empty or contains a non-digit.
    """
    if not is_digits(data):
        raise ValueError(f"not a decimal fraction: {data!r}")
    return Fraction(int(data), 10 ** len(data))


def is_single_byte(data: bytes) -> bool:
    """Return True if every byte is a 7-bit ASCII character."""
    return data.isascii()


__all__ = [
    "zero_pad",
    "split_at",
    "split_keep",
    "is_digits",
    "parse_int",
    "parse_fraction",
    "is_single_byte",
]
