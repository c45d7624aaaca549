#!/usr/bin/env python3
# =============================================================================
# byte_inspect.py — Byte Converter Inspector
# =============================================================================
#
# Runs one input through the whole engine and prints every panel the page
# would show.
#
# Usage:
#   python -m BCE.BVM.byte_inspect "DE AD BE EF" --source hex
#   python -m BCE.BVM.byte_inspect "1, 2, 3, 250"
#   python -m BCE.BVM.byte_inspect "hello" --source ascii --json
#
# Output sections:
#   [1] Input            — source tag, raw text, token count
#   [2] Encodings        — decimal / hex / binary / ASCII
#   [3] CRC-8            — poly 0x07 checksum (dec + hex)
#   [4] Unsigned view    — uint8 / uint16 / uint32, LE + BE
#   [5] Signed view      — int8 / int16 / int32, LE + BE
#   [6] Bit layout       — bit 7 .. bit 0 per byte
#   [7] C literal        — uint8_t data[] = { ... };
#   VERDICT              — ACCEPTED / REJECTED with the bad token
#
# =============================================================================

from __future__ import annotations
import sys, os, argparse, json

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from BCE.BMM.constants import (
    SOURCES, SOURCE_ALIASES, SOURCE_ASCII,
    PANEL_DECIMAL, PANEL_HEX, PANEL_BINARY, PANEL_ASCII,
    PANEL_UNSIGNED, PANEL_SIGNED, PANEL_BITS, PANEL_C_ARRAY,
)
from BCE.BPM.byte_parser import MalformedTokenError, canonical_source, parse, tokenize
from BCE.BRM.crc8 import crc8
from BCE.BBM.converter_bridge import clear_state, dispatch, render_panels, state_to_dict

DIVIDER = "=" * 68


def _indent(block: str) -> str:
    return "\n".join(f"    {line}" for line in block.splitlines())


def run_inspect(text: str, source: str) -> bool:
    """
    Print the full report for one input.
    Returns True if the input was accepted, False otherwise.
    """
    tag = canonical_source(source)

    print(f"\n{DIVIDER}")
    print(f"  Byte Converter Inspector")
    print(DIVIDER)

    # -----------------------------------------------------------------------
    # [1] Input
    # -----------------------------------------------------------------------
    print(f"\n  -- [1] Input --")
    print(f"  Source   : {tag}")
    print(f"  Text     : {text!r}")
    if tag != SOURCE_ASCII:
        print(f"  Tokens   : {len(tokenize(text))}")

    try:
        data = parse(tag, text)
    except MalformedTokenError as e:
        print(f"\n{DIVIDER}")
        print(f"  VERDICT: REJECTED — {e}")
        print(f"{DIVIDER}\n")
        return False

    if not data:
        print(f"\n{DIVIDER}")
        print(f"  VERDICT: REJECTED — no bytes in {tag} input")
        print(f"{DIVIDER}\n")
        return False

    panels = render_panels(data)
    print(f"  Bytes    : {len(data)}")

    # -----------------------------------------------------------------------
    # [2] Encodings
    # -----------------------------------------------------------------------
    print(f"\n  -- [2] Encodings --")
    print(f"  Decimal  : {panels[PANEL_DECIMAL]}")
    print(f"  Hex      : {panels[PANEL_HEX]}")
    print(f"  Binary   : {panels[PANEL_BINARY]}")
    print(f"  ASCII    : {panels[PANEL_ASCII]}")

    # -----------------------------------------------------------------------
    # [3] CRC-8
    # -----------------------------------------------------------------------
    crc = crc8(data)
    print(f"\n  -- [3] CRC-8 (poly 0x07, init 0x00) --")
    print(f"  CRC-8    : {crc}  (0x{crc:02X})")

    # -----------------------------------------------------------------------
    # [4] / [5] Integer views
    # -----------------------------------------------------------------------
    print(f"\n  -- [4] Unsigned View --")
    print(_indent(panels[PANEL_UNSIGNED]))
    print(f"\n  -- [5] Signed View --")
    print(_indent(panels[PANEL_SIGNED]))

    # -----------------------------------------------------------------------
    # [6] Bit layout
    # -----------------------------------------------------------------------
    print(f"\n  -- [6] Bit Layout --")
    print(_indent(panels[PANEL_BITS]))

    # -----------------------------------------------------------------------
    # [7] C literal
    # -----------------------------------------------------------------------
    print(f"\n  -- [7] C Literal --")
    print(f"  {panels[PANEL_C_ARRAY]}")

    print(f"\n{DIVIDER}")
    print(f"  VERDICT: ACCEPTED — {len(data)} byte(s)")
    print(f"{DIVIDER}\n")
    return True


def run_json(text: str, source: str) -> bool:
    """Print the bridge state dict for one input.  Returns False if rejected."""
    state = dispatch(clear_state(), source, text)
    print(json.dumps(state_to_dict(state), indent=2))
    return state.error_source is None


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------
def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Byte Converter Inspector",
    )
    parser.add_argument("text", help="Input text, e.g. \"DE AD BE EF\" or \"1, 2, 3\"")
    parser.add_argument(
        "--source", choices=list(SOURCES) + sorted(SOURCE_ALIASES), default="decimal",
        help="Encoding of TEXT, default decimal",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the bridge state as JSON instead of the report",
    )
    args = parser.parse_args(argv)

    if args.json:
        ok = run_json(args.text, args.source)
    else:
        ok = run_inspect(args.text, args.source)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
