# =============================================================================
# byte_parser.py — Text → Byte Sequence Parsers
# =============================================================================
#
# Inverse of text_encoder.py.  Turns the text of one input field into the
# canonical byte sequence.
#
# Token rules:
#   - ',' counts as whitespace; tokens are the non-empty whitespace-separated
#     pieces of the trimmed text.
#   - decimal : ^[0-9]{1,3}$ and value <= 255        ("256", "-1" rejected)
#   - hex     : upper-cased, optional 0X, ^[0-9A-F]{1,2}$   ("123" rejected)
#   - binary  : lower-cased, optional 0b, ^[01]{1,8}$       ("201" rejected)
#   - ASCII   : not tokenised; every character → ord(c) & 0xFF
#
# ONE bad token rejects the WHOLE input.  No partial byte sequence is ever
# returned.
#
# =============================================================================

from __future__ import annotations
from typing import Callable, Optional

from BCE.BMM.constants import (
    SOURCE_DECIMAL, SOURCE_HEX, SOURCE_BINARY, SOURCE_ASCII,
    SOURCES, SOURCE_ALIASES,
    DEC_TOKEN_RE, HEX_TOKEN_RE, BIN_TOKEN_RE,
    HEX_PREFIX, BIN_PREFIX, TOKEN_SEPARATOR, WHITESPACE_RE,
    BYTE_MAX, BYTE_MASK,
)


class MalformedTokenError(ValueError):
    """A decimal / hex / binary token failed its format or range check."""

    def __init__(self, source: str, token: str) -> None:
        super().__init__(f"invalid {source} input: {token!r}")
        self.source = source
        self.token  = token


def tokenize(text: str) -> list[str]:
    """Split free-form text on whitespace and commas, dropping empty tokens."""
    return [t for t in WHITESPACE_RE.split(text.replace(TOKEN_SEPARATOR, " ")) if t]


def _strip_prefix(token: str, prefix: str) -> str:
    # Only one prefix is removed: "0x0xFF" stays invalid.
    return token[len(prefix):] if token.startswith(prefix) else token


# ── Per-encoding parsers ────────────────────────────────────────────────────

def parse_decimal(text: str) -> bytes:
    out = bytearray()
    for token in tokenize(text):
        if not DEC_TOKEN_RE.match(token):
            raise MalformedTokenError(SOURCE_DECIMAL, token)
        value = int(token, 10)
        if value > BYTE_MAX:
            raise MalformedTokenError(SOURCE_DECIMAL, token)
        out.append(value)
    return bytes(out)


def parse_hex(text: str) -> bytes:
    """Accepts 'FF', 'ff', '0xFF' and '0XFF' tokens, 1-2 hex digits each."""
    out = bytearray()
    for token in tokenize(text.upper()):
        digits = _strip_prefix(token, HEX_PREFIX)
        if not HEX_TOKEN_RE.match(digits):
            raise MalformedTokenError(SOURCE_HEX, token)
        out.append(int(digits, 16))
    return bytes(out)


def parse_binary(text: str) -> bytes:
    """Accepts '1010', '0b1010' and '0B1010' tokens, 1-8 bits each."""
    out = bytearray()
    for token in tokenize(text.lower()):
        digits = _strip_prefix(token, BIN_PREFIX)
        if not BIN_TOKEN_RE.match(digits):
            raise MalformedTokenError(SOURCE_BINARY, token)
        out.append(int(digits, 2))
    return bytes(out)


def parse_ascii(text: str) -> bytes:
    """
    One byte per character: the low 8 bits of its code point.

    Characters above U+00FF are truncated, not rejected ('Ā' → 0x00).
    """
    return bytes(ord(c) & BYTE_MASK for c in text)


PARSERS: dict[str, Callable[[str], bytes]] = {
    SOURCE_DECIMAL: parse_decimal,
    SOURCE_HEX:     parse_hex,
    SOURCE_BINARY:  parse_binary,
    SOURCE_ASCII:   parse_ascii,
}


# ── Dispatch ────────────────────────────────────────────────────────────────

def canonical_source(source: str) -> str:
    """Map a source tag or its short alias ('dec', 'hex', 'bin') to the canonical tag."""
    tag = source.strip().lower()
    tag = SOURCE_ALIASES.get(tag, tag)
    if tag not in SOURCES:
        raise ValueError(
            f"Unknown source: {source!r}\n"
            f"Valid sources: {sorted(SOURCES) + sorted(SOURCE_ALIASES)}"
        )
    return tag


def parse(source: str, text: str) -> bytes:
    """
    Parse `text` as the encoding named by `source`.

    Raises:
        MalformedTokenError: a token of a decimal / hex / binary input is bad.
        ValueError:          `source` is not a known tag.
    """
    return PARSERS[canonical_source(source)](text)


def try_parse(source: str, text: str) -> Optional[bytes]:
    """Same as parse() but returns None instead of raising MalformedTokenError."""
    try:
        return parse(source, text)
    except MalformedTokenError:
        return None
