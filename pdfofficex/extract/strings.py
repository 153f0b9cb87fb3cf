"""Decode PDF literal and hexadecimal string tokens."""

from __future__ import annotations

import re

__all__ = ["decode_hex_string", "decode_literal_string", "decode_string_token", "decode_utf16_be"]

_WHITESPACE = re.compile(r"\s+")
_OCTAL_DIGITS = "01234567"
_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
}


def decode_utf16_be(value: bytes) -> str:
    """Decode big-endian UTF-16 by swapping byte pairs, dropping a dangling byte."""

    even = value[: len(value) - (len(value) % 2)]
    swapped = bytearray(len(even))
    swapped[0::2] = even[1::2]
    swapped[1::2] = even[0::2]
    return swapped.decode("utf-16-le", errors="replace")


def decode_hex_string(token: str) -> str:
    body = _WHITESPACE.sub("", token[1:-1])
    if not body:
        return ""
    if len(body) % 2:
        body += "0"
    value = bytes.fromhex(body)
    if value[:2] == b"\xfe\xff":
        return decode_utf16_be(value[2:])
    if value[:2] == b"\xff\xfe":
        remainder = value[2:]
        remainder = remainder[: len(remainder) - (len(remainder) % 2)]
        return remainder.decode("utf-16-le", errors="replace")
    return value.decode("latin-1")


def decode_literal_string(token: str) -> str:
    """Resolve the escape sequences of a ``( ... )`` token."""

    body = token[1:-1] if token.endswith(")") else token[1:]
    output: list[str] = []
    index = 0
    length = len(body)
    while index < length:
        char = body[index]
        if char != "\\":
            output.append(char)
            index += 1
            continue

        if index + 1 >= length:
            break
        escaped = body[index + 1]

        if escaped in _OCTAL_DIGITS:
            cursor = index + 1
            while cursor < length and cursor - index <= 3 and body[cursor] in _OCTAL_DIGITS:
                cursor += 1
            output.append(chr(int(body[index + 1 : cursor], 8)))
            index = cursor
            continue

        index += 2
        if escaped in _SIMPLE_ESCAPES:
            output.append(_SIMPLE_ESCAPES[escaped])
        elif escaped == "\r":
            if index < length and body[index] == "\n":
                index += 1
        elif escaped != "\n":
            output.append(escaped)

    return "".join(output)


def decode_string_token(token: str) -> str:
    """Decode a literal or hex string token; other input yields ``""``."""

    if token.startswith("("):
        return decode_literal_string(token)
    if token.startswith("<") and token.endswith(">"):
        return decode_hex_string(token)
    return ""
