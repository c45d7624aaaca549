# =============================================================================
# text_encoder.py — Byte Sequence → Text Encodings
# =============================================================================
#
#   decimal      [0, 255, 16]  →  "0 255 16"
#   hexadecimal  [0, 255, 16]  →  "00 FF 10"
#   binary       [0, 255, 16]  →  "00000000 11111111 00010000"
#   ASCII        b"hi\n"       →  "hi."      (only 32..126 are shown as-is)

from __future__ import annotations
from typing import Callable

from BCE.BMM.constants import (
    SOURCE_DECIMAL, SOURCE_HEX, SOURCE_BINARY, SOURCE_ASCII,
    PRINTABLE_MIN, PRINTABLE_MAX, NON_PRINTABLE,
)


def format_decimal(data: bytes) -> str:
    return " ".join(str(b) for b in data)


def format_hex(data: bytes) -> str:
    return " ".join(f"{b:02X}" for b in data)


def format_binary(data: bytes) -> str:
    return " ".join(f"{b:08b}" for b in data)


def format_ascii(data: bytes) -> str:
    return "".join(
        chr(b) if PRINTABLE_MIN <= b <= PRINTABLE_MAX else NON_PRINTABLE
        for b in data
    )


FORMATTERS: dict[str, Callable[[bytes], str]] = {
    SOURCE_DECIMAL: format_decimal,
    SOURCE_HEX:     format_hex,
    SOURCE_BINARY:  format_binary,
    SOURCE_ASCII:   format_ascii,
}
