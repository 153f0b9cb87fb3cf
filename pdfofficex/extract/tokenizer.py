"""Pick the string operands of text-showing operators out of content streams.

This is not an operator interpreter.  Positioning, font and graphics state
operators are ignored; only strings handed to ``Tj``, ``'``, ``"`` and
``TJ`` are reported, in the order the operators appear.
"""

from __future__ import annotations

import re
from typing import Iterator

__all__ = ["iter_show_tokens", "iter_text_objects"]

# Literal strings may contain escapes and one level of balanced parentheses.
_LITERAL = rb"\((?:\\.|[^\\()]|\((?:\\.|[^\\()])*\))*\)"
_HEX = rb"<[\da-fA-F\s]+>"
_STRING = rb"(?:" + _LITERAL + rb"|" + _HEX + rb")"

_BEGIN_TEXT = re.compile(rb"\bBT\b")
_END_TEXT = re.compile(rb"\bET\b")
_SHOW_OPERATION = re.compile(
    rb"\[(?P<array>(?:" + _LITERAL + rb"|" + _HEX + rb"|[^\[\]()<>])*)\]\s*TJ"
    rb"|(?P<direct>" + _STRING + rb")\s*(?:Tj|['\"])",
    re.DOTALL,
)
_STRING_TOKEN = re.compile(_STRING, re.DOTALL)


def iter_text_objects(content: bytes) -> Iterator[bytes]:
    """Yield the bodies of ``BT ... ET`` blocks, or ``content`` when there are none."""

    position = 0
    found = False
    while True:
        begin = _BEGIN_TEXT.search(content, position)
        if begin is None:
            break
        end = _END_TEXT.search(content, begin.end())
        if end is None:
            break
        found = True
        yield content[begin.end() : end.start()]
        position = end.end()
    if not found:
        yield content


def iter_show_tokens(content: bytes) -> Iterator[str]:
    """Yield raw string tokens (delimiters included) shown by ``content``.

    Tokens are returned as Latin-1 text so that every byte maps to exactly
    one code point.
    """

    for block in iter_text_objects(content):
        for match in _SHOW_OPERATION.finditer(block):
            direct = match.group("direct")
            if direct is not None:
                yield direct.decode("latin-1")
                continue
            for token in _STRING_TOKEN.finditer(match.group("array")):
                yield token.group(0).decode("latin-1")
