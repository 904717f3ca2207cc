"""Helpers that run a whole byte stream through one decoder."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from .constants import REPLACEMENT_CHARACTER, is_legal
from .decoder import ByteInput, Utf8Decoder

logger = logging.getLogger(__name__)


@dataclass
class DecodeResult:
    """Code points of a decoded stream and whether it ended mid-sequence."""

    code_points: List[int] = field(default_factory=list)
    truncated: bool = False

    @property
    def text(self) -> str:
        # Permissive decoding can assemble surrogates and values past U+10FFFF,
        # which chr() or a text stream rejects.
        return "".join(
            chr(cp if is_legal(cp) else REPLACEMENT_CHARACTER) for cp in self.code_points
        )


def decode_chunks(chunks: Iterable[ByteInput], strict: bool = False) -> DecodeResult:
    """Decode ``chunks`` in order with a single decoder.

    In permissive mode the bytes of a trailing incomplete sequence are
    dropped and only ``truncated`` records them. In strict mode they are
    also reported in-band as one U+FFFD.
    """
    decoder = Utf8Decoder(strict=strict)
    result = DecodeResult()
    for chunk in chunks:
        result.code_points.extend(decoder.decode(chunk))
    if decoder.is_mid_sequence:
        logger.debug("stream ended inside a multi-byte sequence")
        result.truncated = True
        if strict:
            result.code_points.append(REPLACEMENT_CHARACTER)
    return result


def decode_string(data: ByteInput, strict: bool = False) -> str:
    return decode_chunks([data], strict=strict).text
