# =============================================================================
# word_views.py — Multi-width Integer Views (8 / 16 / 32 bit, LE + BE)
# =============================================================================
#
# Grouping rules:
#   - Groups are consecutive and NON-overlapping, starting at byte 0.
#   - A short tail is dropped: 5 bytes → pairs [0/1] [2/3], byte 4 unused;
#                              7 bytes → quad  [#0..3],     bytes 4-6 unused.
#
# For a pair (b0, b1):            LE = b1*256 + b0        BE = b0*256 + b1
# For a quad (b0, b1, b2, b3):    LE = b3<<24|b2<<16|b1<<8|b0
#                                 BE = b0<<24|b1<<16|b2<<8|b3
#
# Signed views reinterpret the SAME unsigned values as two's complement:
#   8-bit  v >= 0x80       → v - 0x100
#   16-bit v >= 0x8000     → v - 0x10000
#   32-bit v >= 0x80000000 → v - 0x100000000
#
# numpy does the byte-order work: np.frombuffer() with '<u2' / '>u4' dtypes
# reads the truncated buffer directly as little- / big-endian words.
#
# =============================================================================

from __future__ import annotations
from typing import NamedTuple, Union

import numpy as np

from BCE.BMM.constants import (
    WORD16_BYTES, WORD32_BYTES,
    UNSIGNED_HEADINGS, SIGNED_HEADINGS, EMPTY_VIEW,
)


class WordView(NamedTuple):
    start: int   # offset of the first byte in the group
    end:   int   # offset of the last byte in the group (inclusive)
    le:    int   # little-endian interpretation
    be:    int   # big-endian interpretation


class WidthViews(NamedTuple):
    bytes8:  list[int]        # one value per byte
    words16: list[WordView]   # one entry per complete pair
    words32: list[WordView]   # one entry per complete quad


# ---------------------------------------------------------------------------
# Internal: numpy word decode
# ---------------------------------------------------------------------------
def _words(data: bytes, width: int, order: str) -> np.ndarray:
    """Unsigned `width`-byte words in byte order `order` ('<' or '>')."""
    usable = len(data) - len(data) % width
    dtype  = np.dtype(f"{order}u{width}")
    if usable == 0:
        return np.empty(0, dtype=dtype)
    return np.frombuffer(bytes(data[:usable]), dtype=dtype)


def to_signed(value: Union[int, np.ndarray], bits: int) -> Union[int, np.ndarray]:
    """Reinterpret an unsigned `bits`-wide value (or array of them) as two's complement."""
    half = 1 << (bits - 1)
    full = 1 << bits
    if isinstance(value, np.ndarray):
        wide = value.astype(np.int64)
        return np.where(wide >= half, wide - full, wide)
    return value - full if value >= half else value


def _group(data: bytes, width: int, signed: bool) -> list[WordView]:
    le = _words(data, width, "<").astype(np.int64)
    be = _words(data, width, ">").astype(np.int64)
    if signed:
        le = to_signed(le, width * 8)
        be = to_signed(be, width * 8)
    return [
        WordView(i * width, i * width + width - 1, int(lv), int(bv))
        for i, (lv, bv) in enumerate(zip(le.tolist(), be.tolist()))
    ]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def unsigned_views(data: bytes) -> WidthViews:
    return WidthViews(
        bytes8=list(data),
        words16=_group(data, WORD16_BYTES, signed=False),
        words32=_group(data, WORD32_BYTES, signed=False),
    )


def signed_views(data: bytes) -> WidthViews:
    return WidthViews(
        bytes8=[to_signed(b, 8) for b in data],
        words16=_group(data, WORD16_BYTES, signed=True),
        words32=_group(data, WORD32_BYTES, signed=True),
    )


# ── Panel text ──────────────────────────────────────────────────────────────

def _pair_line(w: WordView) -> str:
    return f"[{w.start}/{w.end}] LE:{w.le} BE:{w.be}"


def _quad_line(w: WordView) -> str:
    return f"[#{w.start}..{w.end}] LE:{w.le} BE:{w.be}"


def render_views(views: WidthViews, headings: tuple[str, str, str]) -> str:
    """
    Three blank-line separated sections, each a heading followed by its
    values or '-' when the sequence is too short for that width.
    """
    bodies = (
        " ".join(str(v) for v in views.bytes8),
        "\n".join(_pair_line(w) for w in views.words16),
        "\n".join(_quad_line(w) for w in views.words32),
    )
    return "\n\n".join(
        f"{heading}\n{body or EMPTY_VIEW}" for heading, body in zip(headings, bodies)
    )


def render_unsigned(data: bytes) -> str:
    return render_views(unsigned_views(data), UNSIGNED_HEADINGS)


def render_signed(data: bytes) -> str:
    return render_views(signed_views(data), SIGNED_HEADINGS)
