# =============================================================================
# Byte Conversion Engine (BCE)
# Runs inside Pyodide (Python-in-browser) or desktop CPython.
# =============================================================================
#
# ── PYTHON OWNS THE BYTES ─────────────────────────────────────────────────────
#
# RESPONSIBLE for (Python owns these completely):
#   - Parsing the four input encodings into ONE canonical byte sequence
#       decimal      "222 173 190 239"
#       hexadecimal  "DE AD 0xBE ef"
#       binary       "11011110 0b10101101"
#       ASCII        "hello"  (one byte per character, low 8 bits)
#   - Re-rendering that sequence into all four encodings at once
#   - CRC-8 (poly 0x07, init 0x00, no reflection, no final XOR)
#   - Inspection views: uint/int 8/16/32 (LE + BE), bit layout, C literal
#
# NOT responsible for:
#   - DOM wiring, highlighting the bad field, clipboard access
#       JS owns the page.  Python only says WHICH source failed.
#   - Persisting anything.  Every convert replaces the previous result.
#
# ── DATA FLOW ─────────────────────────────────────────────────────────────────
#   JS (UI)     → user presses "Convert" under the hex box
#   JS (bridge) → handle_json(state_json, "hexadecimal", text)
#   Python      → parse → bytes → every panel re-rendered
#   Output      → JSON state; JS writes each panel back into its element
#
# A failed parse NEVER touches the byte sequence or any rendered panel.
# The returned state only carries error_source = <the offending field>.
#
# ── Module layout ─────────────────────────────────────────────────────────────
#   BMM/constants.py           — tags, token patterns, CRC params, templates
#   BPM/byte_parser.py         — tokenizer + text → bytes parsers
#   BRM/text_encoder.py        — bytes → dec / hex / bin / ASCII text
#   BRM/crc8.py                — CRC-8/0x07 checksum
#   BRM/word_views.py          — 8/16/32-bit unsigned + signed views (numpy)
#   BRM/inspect_views.py       — bit layout + C array literal
#   BBM/converter_bridge.py    — ConverterState, dispatch table, JSON entry
#   BVM/byte_inspect.py        — command-line inspector
#   BVM/validate.py            — self-validation suite
# =============================================================================
