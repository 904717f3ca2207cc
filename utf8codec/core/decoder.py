"""Incremental UTF-8 decoder.

A ``Utf8Decoder`` accepts a byte stream in chunks of any size. A multi-byte
sequence cut by a chunk boundary is carried in the decoder state and
finished by the next call, so decoding chunk by chunk yields the same code
points as decoding the whole stream at once.

Malformed input never raises. An illegal lead byte produces U+FFFD in the
output and decoding resumes at the next byte. Bytes of a sequence left
incomplete by the last chunk produce nothing; ``is_mid_sequence`` lets a
caller detect that case after its final chunk.

By default the decoder is permissive: it trusts continuation bytes without
checking their ``10xxxxxx`` tag and does not re-validate the assembled
value. ``strict=True`` turns on those checks; errors still come out as
U+FFFD.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Union

from .constants import (
    CONTINUATION_MASK,
    CONTINUATION_PAYLOAD,
    CONTINUATION_TAG,
    REPLACEMENT_CHARACTER,
    is_legal,
)

logger = logging.getLogger(__name__)

ByteInput = Union[bytes, bytearray, memoryview, str, Iterable[int]]

# Smallest value that needs a sequence of the given length.
_MINIMUM_FOR_LENGTH = {2: 0x80, 3: 0x800, 4: 0x10000}


@dataclass
class DecoderState:
    """Partially assembled code point carried between ``decode`` calls."""

    pending: int = 0
    remaining: int = 0
    # Total length of the sequence in progress; consulted in strict mode.
    length: int = 0

    @property
    def at_boundary(self) -> bool:
        return self.remaining == 0

    def begin(self, payload: int, remaining: int) -> None:
        self.pending = payload
        self.remaining = remaining
        self.length = remaining + 1

    def reset(self) -> None:
        self.pending = 0
        self.remaining = 0
        self.length = 0


def _as_bytes(data: ByteInput) -> bytes:
    if isinstance(data, str):
        # A text blob carries one byte per character.
        return data.encode("latin-1")
    if isinstance(data, int):
        # bytes(n) would read the int as a length.
        raise ValueError(f"expected bytes or an iterable of byte values, got int {data!r}")
    return bytes(data)


class Utf8Decoder:
    """Stateful UTF-8 decoder for one logical byte stream.

    Not thread-safe: use one instance per stream.
    """

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict
        self._state = DecoderState()

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def is_mid_sequence(self) -> bool:
        """True if the bytes seen so far end inside a multi-byte sequence."""
        return not self._state.at_boundary

    def decode(self, data: ByteInput) -> List[int]:
        """Decode the next chunk of the stream and return the completed code points.

        ``data`` is a bytes-like object, an iterable of ints in ``range(256)``
        or a ``str`` whose characters each stand for one byte. Raises
        ``ValueError`` if it cannot be read as bytes at all.
        """
        out: List[int] = []
        for byte in _as_bytes(data):
            self._step(byte, out)
        return out

    def _step(self, byte: int, out: List[int]) -> None:
        state = self._state
        if not state.at_boundary:
            if self._strict and (byte & CONTINUATION_MASK) != CONTINUATION_TAG:
                # The sequence is cut short; the byte starts over as a lead.
                state.reset()
                self._replace(out, "sequence interrupted by %#04x", byte)
            else:
                state.pending = (state.pending << 6) | (byte & CONTINUATION_PAYLOAD)
                state.remaining -= 1
                if state.at_boundary:
                    self._complete(out)
                return

        if byte < 0x80:
            out.append(byte)
        elif (byte & 0xE0) == 0xC0:
            if self._strict and byte < 0xC2:
                self._replace(out, "overlong lead byte %#04x", byte)
            else:
                state.begin(byte & 0x1F, 1)
        elif (byte & 0xF0) == 0xE0:
            state.begin(byte & 0x0F, 2)
        elif (byte & 0xF8) == 0xF0:
            if self._strict and byte > 0xF4:
                self._replace(out, "lead byte %#04x is beyond U+10FFFF", byte)
            else:
                state.begin(byte & 0x07, 3)
        else:
            self._replace(out, "illegal lead byte %#04x", byte)

    def _complete(self, out: List[int]) -> None:
        state = self._state
        code_point, length = state.pending, state.length
        state.reset()
        if self._strict:
            if code_point < _MINIMUM_FOR_LENGTH[length]:
                self._replace(out, "overlong %d-byte form of %#x", length, code_point)
                return
            if not is_legal(code_point):
                self._replace(out, "illegal code point %#x", code_point)
                return
        out.append(code_point)

    @staticmethod
    def _replace(out: List[int], reason: str, *args: object) -> None:
        logger.debug("decoder substituted U+FFFD: " + reason, *args)
        out.append(REPLACEMENT_CHARACTER)
