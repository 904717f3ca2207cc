import logging

from utf8codec.core import (
    REPLACEMENT_ENCODING,
    ascii_to_unicode,
    encode,
    encode_string,
)


def test_ascii_to_unicode():
    assert ascii_to_unicode("Hello") == [0x48, 0x65, 0x6C, 0x6C, 0x6F]
    assert ascii_to_unicode(b"Hello") == [0x48, 0x65, 0x6C, 0x6C, 0x6F]
    assert ascii_to_unicode("") == []


def test_encode_ascii():
    assert encode(ascii_to_unicode("Hello")) == bytes([0x48, 0x65, 0x6C, 0x6C, 0x6F])


def test_encode_symbols():
    # A≢Α.
    assert encode([0x0041, 0x2262, 0x0391, 0x002E]) == bytes(
        [0x41, 0xE2, 0x89, 0xA2, 0xCE, 0x91, 0x2E]
    )


def test_encode_japanese():
    # 日本語
    assert encode([0x65E5, 0x672C, 0x8A9E]) == bytes(
        [0xE6, 0x97, 0xA5, 0xE6, 0x9C, 0xAC, 0xE8, 0xAA, 0x9E]
    )


def test_encode_stump_of_tree():
    # 𣎴
    assert encode([0x233B4]) == bytes([0xF0, 0xA3, 0x8E, 0xB4])


def test_encode_empty():
    assert encode([]) == b""


def test_band_edges():
    cases = {
        0x00: b"\x00",
        0x7F: b"\x7f",
        0x80: b"\xc2\x80",
        0x7FF: b"\xdf\xbf",
        0x800: b"\xe0\xa0\x80",
        0xD7FF: b"\xed\x9f\xbf",
        0xE000: b"\xee\x80\x80",
        0xFFFF: b"\xef\xbf\xbf",
        0x10000: b"\xf0\x90\x80\x80",
        0x10FFFF: b"\xf4\x8f\xbf\xbf",
    }
    for cp, expected in cases.items():
        assert encode([cp]) == expected, hex(cp)


def test_length_bands():
    for cp in (0x00, 0x41, 0x7F):
        assert len(encode([cp])) == 1
    for cp in (0x80, 0x3A9, 0x7FF):
        assert len(encode([cp])) == 2
    for cp in (0x800, 0x20AC, 0xD7FF, 0xE000, 0xFFFF):
        assert len(encode([cp])) == 3
    for cp in (0x10000, 0x1F600, 0x10FFFF):
        assert len(encode([cp])) == 4


def test_surrogates_replaced():
    for cp in (0xD800, 0xDBFF, 0xDC00, 0xDFFF):
        assert encode([cp]) == REPLACEMENT_ENCODING


def test_out_of_range_replaced():
    assert encode([0x110000]) == bytes([0xEF, 0xBF, 0xBD])
    assert encode([0x1FFFFF]) == REPLACEMENT_ENCODING
    assert encode([0x200000]) == REPLACEMENT_ENCODING
    assert encode([0xFFFFFFFF]) == REPLACEMENT_ENCODING
    assert encode([-1]) == REPLACEMENT_ENCODING


def test_replacement_keeps_neighbours():
    assert encode([0x41, 0xD800, 0x42]) == b"A" + REPLACEMENT_ENCODING + b"B"


def test_matches_python_codec_on_legal_values():
    for cp in list(range(0, 0xD800, 97)) + list(range(0xE000, 0x110000, 1013)):
        assert encode([cp]) == chr(cp).encode("utf-8"), hex(cp)


def test_encode_string():
    assert encode_string("日本語") == "日本語".encode("utf-8")
    assert encode_string("a\ud800b") == b"a" + REPLACEMENT_ENCODING + b"b"


def test_substitution_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="utf8codec")
    encode([0xD800])
    assert "U+FFFD" in caplog.text
