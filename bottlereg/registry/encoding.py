# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
"""
Registry snapshot string unescaping.

Wine stores string data in user.reg / system.reg with C-like escapes:
  - \\a \\b \\e \\f \\n \\r \\t \\v control characters
  - \\xHHHH hex code points (1-4 digits)
  - \\OOO octal code points (1-3 digits)
  - any other escaped character stands for itself

Code points are turned into bytes with the original (RFC 2279) UTF-8
scheme, which goes up to 31 bits and 6-byte sequences and does not reject
surrogates. The result is therefore not always valid UTF-8; it is decoded
with "surrogateescape" so the exact bytes stay recoverable.
"""
from __future__ import annotations

_CONTROL_ESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "e": 0x1B,
    "f": 0x0C,
    "n": 0x0A,
    "r": 0x0D,
    "t": 0x09,
    "v": 0x0B,
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_OCT_DIGITS = frozenset("01234567")

# (upper bound exclusive, sequence length, lead byte marker)
_UTF8_RANGES = (
    (0x80, 1, 0x00),
    (0x800, 2, 0xC0),
    (0x10000, 3, 0xE0),
    (0x200000, 4, 0xF0),
    (0x4000000, 5, 0xF8),
    (0x80000000, 6, 0xFC),
)


def encode_code_point(cp: int) -> bytes:
    """
    Encode one code point with the extended UTF-8 scheme (1-6 bytes).

    Unlike str.encode("utf-8") this accepts surrogates and values above
    U+10FFFF, up to 0x7FFFFFFF.
    """
    if cp < 0:
        raise ValueError(f"negative code point: {cp}")
    for limit, length, marker in _UTF8_RANGES:
        if cp < limit:
            break
    else:
        raise ValueError(f"code point does not fit in 31 bits: {cp:#x}")

    if length == 1:
        return bytes((cp,))

    out = bytearray(length)
    for i in range(length - 1, 0, -1):
        out[i] = 0x80 | (cp & 0x3F)
        cp >>= 6
    out[0] = marker | cp
    return bytes(out)


def _literal(ch: str) -> bytes:
    """UTF-8 bytes of one literal character; escaped surrogates map back to their byte."""
    cp = ord(ch)
    if 0xDC80 <= cp <= 0xDCFF:
        return bytes((cp - 0xDC00,))
    return encode_code_point(cp)


def _take(line: str, pos: int, digits: frozenset, max_len: int) -> int:
    """Return the end index of the digit run starting at pos (at most max_len long)."""
    end = pos
    while end < len(line) and end - pos < max_len and line[end] in digits:
        end += 1
    return end


def unescape_bytes(line: str) -> bytes:
    """Resolve all escapes in `line` and return the raw byte result."""
    out = bytearray()
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch != "\\":
            out += _literal(ch)
            i += 1
            continue

        i += 1
        if i >= n:
            # trailing backslash
            break

        ch = line[i]
        if ch in _CONTROL_ESCAPES:
            out.append(_CONTROL_ESCAPES[ch])
            i += 1
        elif ch == "x":
            end = _take(line, i + 1, _HEX_DIGITS, 4)
            if end == i + 1:
                out += b"x"
            else:
                out += encode_code_point(int(line[i + 1:end], 16))
            i = end
        elif ch in _OCT_DIGITS:
            end = _take(line, i, _OCT_DIGITS, 3)
            out += encode_code_point(int(line[i:end], 8))
            i = end
        else:
            out += _literal(ch)
            i += 1

    return bytes(out)


def unescape(line: str) -> str:
    """
    Resolve all escapes in one registry string.

    Total: never raises. Text without a backslash is returned unchanged.
    """
    if "\\" not in line:
        return line
    return unescape_bytes(line).decode("utf-8", "surrogateescape")
