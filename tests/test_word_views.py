import sys
import os

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from BCE.BRM.word_views import (
    WordView, unsigned_views, signed_views, to_signed,
    render_unsigned, render_signed,
)


def test_five_bytes_give_two_pairs():
    v = unsigned_views(bytes([1, 2, 3, 4, 5]))
    assert v.words16 == [
        WordView(0, 1, 0x0201, 0x0102),
        WordView(2, 3, 0x0403, 0x0304),
    ]
    assert len(v.words32) == 1


def test_seven_bytes_give_one_quad():
    v = unsigned_views(bytes([0x78, 0x56, 0x34, 0x12, 9, 9, 9]))
    assert v.words32 == [WordView(0, 3, 0x12345678, 0x78563412)]


def test_short_sequences_have_no_words():
    v = unsigned_views(b"\x01")
    assert v.bytes8 == [1]
    assert v.words16 == [] and v.words32 == []
    assert unsigned_views(b"").words16 == []


def test_endian_symmetry():
    for b0, b1 in [(0, 1), (0x12, 0x34), (0xFF, 0x00), (0x80, 0x7F)]:
        fwd = unsigned_views(bytes([b0, b1])).words16[0]
        rev = unsigned_views(bytes([b1, b0])).words16[0]
        assert fwd.be == rev.le
        assert fwd.le == rev.be


def test_unsigned_32_has_no_sign_extension():
    v = unsigned_views(b"\xff\xff\xff\xff\x00\x00\x00\x80")
    assert v.words32[0].le == 0xFFFFFFFF
    assert v.words32[1].le == 0x80000000
    assert v.words32[1].be == 0x00000080
    assert all(isinstance(w.le, int) for w in v.words32)


@pytest.mark.parametrize("value,bits,expected", [
    (127, 8, 127), (128, 8, -128), (255, 8, -1),
    (32767, 16, 32767), (32768, 16, -32768), (65535, 16, -1),
    (2**31 - 1, 32, 2**31 - 1), (2**31, 32, -2**31), (2**32 - 1, 32, -1),
])
def test_to_signed_boundaries(value, bits, expected):
    assert to_signed(value, bits) == expected


def test_to_signed_array():
    out = to_signed(np.array([0, 0x7FFF, 0x8000, 0xFFFF], dtype=np.uint16), 16)
    assert out.tolist() == [0, 32767, -32768, -1]


def test_signed_views():
    v = signed_views(bytes([0x7F, 0x80, 0xFF, 0xFF, 0x01]))
    assert v.bytes8 == [127, -128, -1, -1, 1]
    assert v.words16 == [WordView(0, 1, -32641, 32640), WordView(2, 3, -1, -1)]
    assert v.words32 == [WordView(0, 3, -32641, 2139160575)]


def test_render_unsigned_panel():
    text = render_unsigned(bytes([1, 2, 3, 4, 5]))
    assert text == (
        "uint8_t:\n1 2 3 4 5\n\n"
        "uint16_t (LE/BE pairs):\n[0/1] LE:513 BE:258\n[2/3] LE:1027 BE:772\n\n"
        "uint32_t (LE/BE groups):\n[#0..3] LE:67305985 BE:16909060"
    )


def test_render_signed_panel_placeholders():
    text = render_signed(b"\xff")
    assert text == (
        "int8_t:\n-1\n\n"
        "int16_t (LE/BE pairs):\n-\n\n"
        "int32_t (LE/BE groups):\n-"
    )
