"""Core modules for the utf8codec package."""

from .constants import (  # noqa: F401
    MAX_CODE_POINT,
    REPLACEMENT_CHARACTER,
    REPLACEMENT_ENCODING,
    SURROGATE_FIRST,
    SURROGATE_LAST,
    is_legal,
    is_surrogate,
)
from .decoder import DecoderState, Utf8Decoder  # noqa: F401
from .encoder import ascii_to_unicode, encode, encode_string  # noqa: F401
from .stream import DecodeResult, decode_chunks, decode_string  # noqa: F401
