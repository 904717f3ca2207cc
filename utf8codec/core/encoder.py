"""Stateless UTF-8 encoder."""

import logging
from typing import Iterable, List, Union

from .constants import (
    CONTINUATION_PAYLOAD,
    CONTINUATION_TAG,
    MAX_CODE_POINT,
    REPLACEMENT_ENCODING,
    is_surrogate,
)

logger = logging.getLogger(__name__)


def ascii_to_unicode(ascii: Union[str, bytes]) -> List[int]:
    """Reinterpret each byte (or character) of an ASCII string as a code point."""
    if isinstance(ascii, str):
        return [ord(ch) for ch in ascii]
    return list(ascii)


def encode(code_points: Iterable[int]) -> bytes:
    """Encode code points as UTF-8.

    Surrogates, negative values and anything above U+10FFFF are written as
    the encoding of U+FFFD. The function never raises for such values.
    """
    out = bytearray()
    for cp in code_points:
        num_bits = cp.bit_length()
        if cp < 0:
            _replace(out, cp)
        elif num_bits <= 7:
            out.append(cp & 0x7F)
        elif num_bits <= 11:
            out.append(0xC0 | ((cp >> 6) & 0x1F))
            out.append(CONTINUATION_TAG | (cp & CONTINUATION_PAYLOAD))
        elif num_bits <= 16:
            if is_surrogate(cp):
                _replace(out, cp)
                continue
            out.append(0xE0 | ((cp >> 12) & 0x0F))
            out.append(CONTINUATION_TAG | ((cp >> 6) & CONTINUATION_PAYLOAD))
            out.append(CONTINUATION_TAG | (cp & CONTINUATION_PAYLOAD))
        elif num_bits <= 21 and cp <= MAX_CODE_POINT:
            out.append(0xF0 | ((cp >> 18) & 0x07))
            out.append(CONTINUATION_TAG | ((cp >> 12) & CONTINUATION_PAYLOAD))
            out.append(CONTINUATION_TAG | ((cp >> 6) & CONTINUATION_PAYLOAD))
            out.append(CONTINUATION_TAG | (cp & CONTINUATION_PAYLOAD))
        else:
            _replace(out, cp)
    return bytes(out)


def encode_string(text: str) -> bytes:
    return encode(ord(ch) for ch in text)


def _replace(out: bytearray, code_point: int) -> None:
    logger.debug("illegal code point %#x replaced with U+FFFD", code_point)
    out.extend(REPLACEMENT_ENCODING)
