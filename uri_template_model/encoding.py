"""Encode values for use in URI templates and URIs."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .charset import Charset


def encode_value(value: Any) -> str:
    """Convert a single value into its string form."""
    if (isinstance(value, str)):
        return value
    elif (isinstance(value, bytes)):
        return value.decode('utf8')
    elif (isinstance(value, bool)):
        return str(value).lower()
    return str(value)


def encode_values(value: Any) -> list[str]:
    """
    Convert a value into a list of strings.

    Strings and scalars are a single value, any other sequence
    contributes one string per item.
    """
    if ((not isinstance(value, (str, bytes))) and isinstance(value, Sequence)):
        return [encode_value(item) for item in value]
    return [encode_value(value)]


def pct_encode(value: str, legal: str, pct_encoded: bool = True, charset: type[Charset] = Charset) -> str:
    """Encode a string into legal values, percent-encoding everything else as utf8."""
    output = ''
    index = 0
    while (index < len(value)):
        codepoint = value[index]
        if (codepoint in legal):
            output += codepoint
        elif (pct_encoded and ('%' == codepoint)
              and ((index + 2) < len(value))
              and (value[index + 1].upper() in charset.HEX_DIGIT)
              and (value[index + 2].upper() in charset.HEX_DIGIT)):
            output += value[index:index + 3]
            index += 2
        else:
            for byte in codepoint.encode('utf8'):
                output += '%' + charset.HEX_DIGIT[byte // 16] + charset.HEX_DIGIT[byte % 16]
        index += 1
    return output
