# =============================================================================
# inspect_views.py — Bit Layout and C Array Literal
# =============================================================================

from __future__ import annotations

from BCE.BMM.constants import (
    BIT_ORDER_NOTE, EMPTY_VIEW,
    C_ARRAY_PREFIX, C_ARRAY_SUFFIX, C_ARRAY_EMPTY,
)


def bit_layout(data: bytes) -> list[tuple[int, str]]:
    """(index, 8-char bit string) per byte, bit 7 first."""
    return [(i, f"{b:08b}") for i, b in enumerate(data)]


def render_bit_layout(data: bytes) -> str:
    """
    One line per byte:
        Byte 0: 10100101  (7..0)
    '-' for an empty sequence.
    """
    if not data:
        return EMPTY_VIEW
    return "\n".join(
        f"Byte {i}: {bits}  {BIT_ORDER_NOTE}" for i, bits in bit_layout(data)
    )


def c_array_literal(data: bytes) -> str:
    """[0, 255, 16] → 'uint8_t data[] = { 0x00, 0xFF, 0x10 };'"""
    if not data:
        return C_ARRAY_EMPTY
    return C_ARRAY_PREFIX + ", ".join(f"0x{b:02X}" for b in data) + C_ARRAY_SUFFIX
