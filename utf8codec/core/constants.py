"""Values shared by the encoder and the decoder (RFC 3629)."""

REPLACEMENT_CHARACTER = 0xFFFD
REPLACEMENT_ENCODING = bytes((0xEF, 0xBF, 0xBD))

SURROGATE_FIRST = 0xD800
SURROGATE_LAST = 0xDFFF

MAX_CODE_POINT = 0x10FFFF

# 10xxxxxx
CONTINUATION_TAG = 0x80
CONTINUATION_MASK = 0xC0
CONTINUATION_PAYLOAD = 0x3F


def is_surrogate(code_point: int) -> bool:
    return SURROGATE_FIRST <= code_point <= SURROGATE_LAST


def is_legal(code_point: int) -> bool:
    """Return True if the value is a Unicode scalar value UTF-8 may carry."""
    return 0 <= code_point <= MAX_CODE_POINT and not is_surrogate(code_point)
