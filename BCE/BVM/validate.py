#!/usr/bin/env python3
# =============================================================================
# validate.py — BCE Self-Validation Suite
# =============================================================================
#
# Run directly:  python -m BCE.BVM.validate
#             or python BCE/BVM/validate.py (from project root)
#
# Tests:
#   1. Constants integrity   — patterns, CRC parameters, templates
#   2. Parsers               — accepted forms, rejected tokens, round-trip
#   3. CRC-8                 — reference vectors + table cross-check
#   4. Integer views         — truncation, endian symmetry, sign boundaries
#   5. Bridge                — state transitions, dispatch, JSON entry point
# =============================================================================

import sys
import os
import json
import random

# Allow running from project root without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from BCE.BMM.constants import (
    SOURCES, SOURCE_DECIMAL, SOURCE_HEX, SOURCE_BINARY, SOURCE_ASCII,
    DEC_TOKEN_RE, HEX_TOKEN_RE, BIN_TOKEN_RE,
    CRC8_POLY, CRC8_INIT, CRC8_CHECK, CRC8_CHECK_INPUT,
    PANELS, PANEL_C_ARRAY, C_ARRAY_EMPTY,
)
from BCE.BPM.byte_parser import MalformedTokenError, parse, try_parse
from BCE.BRM.text_encoder import FORMATTERS
from BCE.BRM.crc8 import crc8, crc8_display
from BCE.BRM.word_views import unsigned_views, signed_views, to_signed
from BCE.BRM.inspect_views import c_array_literal
from BCE.BBM.converter_bridge import clear_state, convert, dispatch, handle_json

PASS = "[PASS]"
FAIL = "[FAIL]"
INFO = "[INFO]"

failures = 0

def check(label: str, condition: bool, detail: str = "") -> bool:
    global failures
    if condition:
        print(f"  {PASS} {label}")
    else:
        print(f"  {FAIL} {label}{(' -- ' + detail) if detail else ''}")
        failures += 1
    return condition


# =============================================================================
# TEST 1 — Constants Integrity
# =============================================================================
print("\n" + "="*60)
print("TEST 1 — Constants Integrity")
print("="*60)

check("CRC8_POLY = 0x07",            CRC8_POLY == 0x07)
check("CRC8_INIT = 0x00",            CRC8_INIT == 0x00)
check("Four source tags",            len(SOURCES) == 4, f"got {SOURCES}")
check("Decimal pattern: 1-3 digits", DEC_TOKEN_RE.match("255") and not DEC_TOKEN_RE.match("1000"))
check("Hex pattern: 1-2 digits",     HEX_TOKEN_RE.match("FF") and not HEX_TOKEN_RE.match("FFF"))
check("Hex pattern: upper-case only", not HEX_TOKEN_RE.match("ff"))
check("Binary pattern: 1-8 bits",    BIN_TOKEN_RE.match("10101010") and not BIN_TOKEN_RE.match("101010101"))
check("C_ARRAY panel in panel list", PANEL_C_ARRAY in PANELS)


# =============================================================================
# TEST 2 — Parsers
# =============================================================================
print("\n" + "="*60)
print("TEST 2 — Parsers")
print("="*60)

check("Decimal: commas + spaces",   parse(SOURCE_DECIMAL, " 1, 2,,3  255 ") == bytes([1, 2, 3, 255]))
check("Hex: mixed case + 0x",       parse(SOURCE_HEX, "de 0xAD 0Xbe EF") == bytes([0xDE, 0xAD, 0xBE, 0xEF]))
check("Hex: single digit",          parse(SOURCE_HEX, "F") == b"\x0f")
check("Binary: 0b prefix + short",  parse(SOURCE_BINARY, "0B1 11111111") == bytes([1, 255]))
check("ASCII: one byte per char",   parse(SOURCE_ASCII, "Hi!") == b"Hi!")
check("ASCII: low 8 bits of U+0141", parse(SOURCE_ASCII, "Ł") == b"\x41")
check("Empty text → empty bytes",   all(parse(s, "  ") == b"" for s in (SOURCE_DECIMAL, SOURCE_HEX, SOURCE_BINARY)))

for source, bad in [
    (SOURCE_DECIMAL, "1 256"), (SOURCE_DECIMAL, "-1"), (SOURCE_DECIMAL, "abc"),
    (SOURCE_HEX, "G1"), (SOURCE_HEX, "123"),
    (SOURCE_BINARY, "201"),
]:
    try:
        parse(source, bad)
        check(f"{source}: reject {bad!r}", False, "parsed without error")
    except MalformedTokenError as e:
        check(f"{source}: reject {bad!r}", e.source == source)
    check(f"{source}: try_parse({bad!r}) is None", try_parse(source, bad) is None)

rng = random.Random(0x07)
round_trip_ok = True
for n in range(65):
    data = bytes(rng.randrange(256) for _ in range(n))
    for source in (SOURCE_DECIMAL, SOURCE_HEX, SOURCE_BINARY):
        if parse(source, FORMATTERS[source](data)) != data:
            round_trip_ok = False
print(f"  {INFO} Round-trip checked on 65 random sequences x 3 encodings")
check("Round-trip dec/hex/bin for lengths 0-64", round_trip_ok)


# =============================================================================
# TEST 3 — CRC-8
# =============================================================================
print("\n" + "="*60)
print("TEST 3 — CRC-8")
print("="*60)

check("CRC-8 of empty = 0",          crc8(b"") == 0)
check("CRC-8 of [0x00] = 0",         crc8(b"\x00") == 0)
check("CRC-8 of [0x01] = 0x07",      crc8(b"\x01") == 0x07)
check("CRC-8 check value '123456789' = 0xF4",
      crc8(CRC8_CHECK_INPUT) == CRC8_CHECK, f"got 0x{crc8(CRC8_CHECK_INPUT):02X}")
check("Display blank for empty",     crc8_display(b"") == "")

# Independent table-driven implementation
_table = []
for i in range(256):
    c = i
    for _ in range(8):
        c = ((c << 1) ^ 0x07) & 0xFF if c & 0x80 else (c << 1) & 0xFF
    _table.append(c)

def _crc_table(data: bytes) -> int:
    c = 0
    for b in data:
        c = _table[c ^ b]
    return c

table_ok = all(
    crc8(d) == _crc_table(d)
    for d in (bytes(rng.randrange(256) for _ in range(rng.randrange(1, 64))) for _ in range(200))
)
check("Bitwise CRC matches table CRC on 200 random inputs", table_ok)


# =============================================================================
# TEST 4 — Integer Views
# =============================================================================
print("\n" + "="*60)
print("TEST 4 — Integer Views")
print("="*60)

u5 = unsigned_views(bytes([1, 2, 3, 4, 5]))
check("5 bytes → 2 pairs",           len(u5.words16) == 2, f"got {len(u5.words16)}")
check("Pairs cover bytes 0-1, 2-3",  [(w.start, w.end) for w in u5.words16] == [(0, 1), (2, 3)])
check("5 bytes → 1 quad",            len(u5.words32) == 1)

u7 = unsigned_views(bytes(range(7)))
check("7 bytes → 1 quad (0-3)",      [(w.start, w.end) for w in u7.words32] == [(0, 3)])

p = unsigned_views(bytes([0x12, 0x34])).words16[0]
q = unsigned_views(bytes([0x34, 0x12])).words16[0]
check("LE16(12 34) = 0x3412",        p.le == 0x3412)
check("BE16(12 34) = 0x1234",        p.be == 0x1234)
check("Endian symmetry BE(b0,b1) = LE(b1,b0)", p.be == q.le and p.le == q.be)

w = unsigned_views(bytes([0xFF, 0xFF, 0xFF, 0xFF])).words32[0]
check("uint32 max stays unsigned",   w.le == 0xFFFFFFFF and w.be == 0xFFFFFFFF)

for bits, cases in [
    (8,  [(127, 127), (128, -128), (255, -1)]),
    (16, [(32767, 32767), (32768, -32768), (65535, -1)]),
    (32, [(2**31 - 1, 2**31 - 1), (2**31, -2**31), (2**32 - 1, -1)]),
]:
    for value, expected in cases:
        check(f"to_signed({value}, {bits}) = {expected}", to_signed(value, bits) == expected)

s = signed_views(bytes([0x00, 0x80, 0xFF, 0xFF]))
check("int8 view of 00 80 FF FF",    s.bytes8 == [0, -128, -1, -1])
check("int16 LE of 00 80 = -32768",  s.words16[0].le == -32768)
check("int32 BE of 00 80 FF FF",     s.words32[0].be == 0x0080FFFF)
check("C literal [0,255,16]",        c_array_literal(bytes([0, 255, 16])) == "uint8_t data[] = { 0x00, 0xFF, 0x10 };")
check("C literal empty",             c_array_literal(b"") == C_ARRAY_EMPTY)


# =============================================================================
# TEST 5 — Bridge
# =============================================================================
print("\n" + "="*60)
print("TEST 5 — Bridge")
print("="*60)

st0 = clear_state()
check("Clear: no bytes, literal panel default",
      st0.data is None and st0.panels[PANEL_C_ARRAY] == C_ARRAY_EMPTY)

st1 = convert(st0, "hex", "DE AD")
check("Convert hex: bytes set",      st1.data == b"\xde\xad" and st1.error_source is None)
check("Convert hex: decimal panel",  st1.panels["decimal"] == "222 173")

st2 = convert(st1, "decimal", "1 999")
check("Bad decimal: bytes unchanged", st2.data == st1.data)
check("Bad decimal: panels unchanged", st2.panels == st1.panels)
check("Bad decimal: field flagged",  st2.error_source == SOURCE_DECIMAL)

st3 = convert(st2, "binary", "   ")
check("Empty binary: field flagged", st3.error_source == SOURCE_BINARY and st3.data == st1.data)

st4 = dispatch(st3, "clear")
check("Dispatch clear resets",       st4 == clear_state())

try:
    dispatch(st4, "octal", "7")
    check("Unknown trigger rejected", False)
except ValueError:
    check("Unknown trigger rejected", True)

out = json.loads(handle_json("", "ascii", "OK"))
check("handle_json: ascii OK",       out["bytes"] == [79, 75] and out["panels"]["hexadecimal"] == "4F 4B")
out2 = json.loads(handle_json(json.dumps(out), "hex", "ZZ"))
check("handle_json: keeps bytes on error", out2["bytes"] == [79, 75] and out2["error_source"] == SOURCE_HEX)
out3 = json.loads(handle_json("{not json", "hex", "00"))
check("handle_json: bad state → error dict", "error" in out3 and "traceback" in out3)


# =============================================================================
# Summary
# =============================================================================
print("\n" + "="*60)
if failures == 0:
    print(f"  ALL TESTS PASSED")
else:
    print(f"  {failures} TEST(S) FAILED")
print("="*60 + "\n")
sys.exit(0 if failures == 0 else 1)
