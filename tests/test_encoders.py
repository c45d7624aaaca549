import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from BCE.BRM.text_encoder import FORMATTERS, format_decimal, format_hex, format_binary, format_ascii
from BCE.BRM.crc8 import crc8, crc8_display
from BCE.BRM.inspect_views import bit_layout, render_bit_layout, c_array_literal


def test_formatters():
    data = bytes([0, 255, 16])
    assert format_decimal(data) == "0 255 16"
    assert format_hex(data) == "00 FF 10"
    assert format_binary(data) == "00000000 11111111 00010000"


def test_format_ascii_non_printable():
    assert format_ascii(b"hi\n\x1f ~\x7f\xff") == "hi.. ~.."


def test_formatters_cover_all_sources():
    assert sorted(FORMATTERS) == ["ascii", "binary", "decimal", "hexadecimal"]
    assert all(fmt(b"") == "" for fmt in FORMATTERS.values())


def _reference_crc8(data):
    # Table-driven poly 0x07 / init 0 / no reflection
    table = []
    for i in range(256):
        c = i
        for _ in range(8):
            c = ((c << 1) ^ 0x07) & 0xFF if c & 0x80 else (c << 1) & 0xFF
        table.append(c)
    crc = 0
    for b in data:
        crc = table[crc ^ b]
    return crc


def test_crc8_reference_vectors():
    assert crc8(b"") == 0
    assert crc8(b"\x00") == 0
    assert crc8(b"\x01") == 0x07
    assert crc8(b"123456789") == 0xF4


def test_crc8_matches_table_implementation():
    for data in (b"\xff", b"\xde\xad\xbe\xef", bytes(range(256)), b"hello world"):
        assert crc8(data) == _reference_crc8(data)


def test_crc8_display():
    assert crc8_display(b"") == ""
    assert crc8_display(b"123456789") == "244"


def test_bit_layout():
    assert bit_layout(bytes([0xA5, 1])) == [(0, "10100101"), (1, "00000001")]
    assert render_bit_layout(bytes([0xA5])) == "Byte 0: 10100101  (7..0)"
    assert render_bit_layout(b"") == "-"


def test_c_array_literal():
    assert c_array_literal(bytes([0, 255, 16])) == "uint8_t data[] = { 0x00, 0xFF, 0x10 };"
    assert c_array_literal(b"") == "uint8_t data[] = { };"
