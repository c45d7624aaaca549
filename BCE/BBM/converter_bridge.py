# =============================================================================
# BCE/BBM/converter_bridge.py — Converter Bridge (Pyodide + desktop)
# =============================================================================
#
# The page owns NO byte state of its own.  Every button press becomes one
# call into this module with the previous state; the result is the next state.
#
# Entry point (available as a Pyodide global after import):
#
#   handle_json(state_json, trigger, text) -> str
#       state_json : JSON string from the previous call, or "" / "null"
#       trigger    : "decimal" | "hexadecimal" | "binary" | "ascii"
#                    | "dec" | "hex" | "bin" | "clear"
#       text       : contents of the field whose button was pressed
#       returns    : JSON string
#                    {
#                      "bytes":        [int, ...] | null,
#                      "error_source": "hexadecimal" | ... | null,
#                      "panels": {
#                        "decimal": "...", "hexadecimal": "...",
#                        "binary": "...",  "ascii": "...",
#                        "crc8": "...",    "unsigned": "...",
#                        "signed": "...",  "bits": "...",
#                        "c_array": "uint8_t data[] = { ... };"
#                      }
#                    }
#                    On an unexpected error: {error, traceback}
#
# The JavaScript caller:
#   1. Writes every panel back into its element.
#   2. Highlights the field named by error_source (if any).
#   3. Keeps the JSON string for the next call.
# =============================================================================

from __future__ import annotations
import json
from typing import Callable, NamedTuple, Optional

from BCE.BMM.constants import (
    SOURCES, SOURCE_ALIASES, TRIGGER_CLEAR,
    PANELS, PANEL_CRC8, PANEL_UNSIGNED, PANEL_SIGNED, PANEL_BITS, PANEL_C_ARRAY,
    C_ARRAY_EMPTY, COPY_ALL_LABELS, COPY_ALL_CRC_LABEL, BYTE_MAX,
)
from BCE.BPM.byte_parser import MalformedTokenError, canonical_source, parse
from BCE.BRM.text_encoder import FORMATTERS
from BCE.BRM.crc8 import crc8_display
from BCE.BRM.word_views import render_unsigned, render_signed
from BCE.BRM.inspect_views import render_bit_layout, c_array_literal


class ConverterState(NamedTuple):
    data:         Optional[bytes]   # last successfully parsed sequence
    panels:       dict[str, str]    # panel name → rendered text
    error_source: Optional[str]     # field flagged by the last convert


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------
def render_panels(data: bytes) -> dict[str, str]:
    """Every panel for one byte sequence."""
    panels = {source: fmt(data) for source, fmt in FORMATTERS.items()}
    panels[PANEL_CRC8]     = crc8_display(data)
    panels[PANEL_UNSIGNED] = render_unsigned(data)
    panels[PANEL_SIGNED]   = render_signed(data)
    panels[PANEL_BITS]     = render_bit_layout(data)
    panels[PANEL_C_ARRAY]  = c_array_literal(data)
    return panels


def cleared_panels() -> dict[str, str]:
    panels = {name: "" for name in PANELS}
    panels[PANEL_C_ARRAY] = C_ARRAY_EMPTY
    return panels


# ---------------------------------------------------------------------------
# State transitions
# ---------------------------------------------------------------------------
def clear_state() -> ConverterState:
    return ConverterState(data=None, panels=cleared_panels(), error_source=None)


def convert(state: ConverterState, source: str, text: str) -> ConverterState:
    """
    Parse `text` as `source` and re-render every panel.

    On a malformed token, or input with no bytes at all, the previous bytes
    and panels are kept and only error_source changes.

    Raises:
        ValueError: `source` is not a known tag.
    """
    tag = canonical_source(source)
    try:
        data = parse(tag, text)
    except MalformedTokenError:
        return state._replace(error_source=tag)
    if not data:
        return state._replace(error_source=tag)
    return ConverterState(data=data, panels=render_panels(data), error_source=None)


def _convert_from(source: str) -> Callable[[ConverterState, str], ConverterState]:
    def handler(state: ConverterState, text: str) -> ConverterState:
        return convert(state, source, text)
    return handler


def _clear(state: ConverterState, text: str) -> ConverterState:
    return clear_state()


# Trigger tag → operation.  Aliases share the canonical handler.
HANDLERS: dict[str, Callable[[ConverterState, str], ConverterState]] = {
    source: _convert_from(source) for source in SOURCES
}
HANDLERS.update({alias: HANDLERS[tag] for alias, tag in SOURCE_ALIASES.items()})
HANDLERS[TRIGGER_CLEAR] = _clear


def dispatch(state: Optional[ConverterState], trigger: str, text: str = "") -> ConverterState:
    """Run the operation bound to `trigger`.  A None state starts from clear_state()."""
    handler = HANDLERS.get(trigger.strip().lower())
    if handler is None:
        raise ValueError(
            f"Unknown trigger: {trigger!r}\n"
            f"Valid triggers: {sorted(HANDLERS)}"
        )
    return handler(state if state is not None else clear_state(), text)


def copy_all_text(state: ConverterState) -> str:
    """The DEC / HEX / BIN / ASCII / CRC block the 'copy all' button puts on the clipboard."""
    blocks = [f"{label}\n{state.panels.get(name, '')}" for label, name in COPY_ALL_LABELS]
    return "\n\n".join(blocks) + "\n\n" + COPY_ALL_CRC_LABEL + state.panels.get(PANEL_CRC8, "")


# ---------------------------------------------------------------------------
# JS boundary
# ---------------------------------------------------------------------------
def state_to_dict(state: ConverterState) -> dict:
    return {
        "bytes":        list(state.data) if state.data is not None else None,
        "error_source": state.error_source,
        "panels":       dict(state.panels),
    }


def state_from_dict(d: Optional[dict]) -> ConverterState:
    """
    Rebuild a state sent back by the page.  Missing panels are filled with
    their cleared value.

    Raises:
        ValueError: the state, its bytes or its panels have the wrong shape,
            or a byte is not an integer in 0..255.
    """
    if not d:
        return clear_state()
    if not isinstance(d, dict):
        raise ValueError(f"state must be an object, got {type(d).__name__}")
    raw = d.get("bytes")
    if raw is not None and not isinstance(raw, list):
        raise ValueError(f"state bytes must be a list, got {type(raw).__name__}")
    for b in raw or ():
        # bool is an int subclass; JSON true must not become 0x01
        if isinstance(b, bool) or not isinstance(b, int) or not 0 <= b <= BYTE_MAX:
            raise ValueError(f"state byte must be an integer 0..{BYTE_MAX}, got {b!r}")
    sent = d.get("panels") or {}
    if not isinstance(sent, dict):
        raise ValueError(f"state panels must be an object, got {type(sent).__name__}")
    panels = cleared_panels()
    panels.update(sent)
    return ConverterState(
        data=bytes(raw) if raw is not None else None,
        panels=panels,
        error_source=d.get("error_source"),
    )


def handle(state_dict: Optional[dict], trigger: str, text: str = "") -> dict:
    """Dict-in / dict-out form of dispatch(), used by the HTTP bridge."""
    return state_to_dict(dispatch(state_from_dict(state_dict), trigger, text))


def handle_json(state_json, trigger, text=""):
    """
    Safe Pyodide entry point.  Always returns a JSON string.
    On error returns {error, traceback}.
    """
    try:
        previous = json.loads(state_json) if state_json else None
        return json.dumps(handle(previous, str(trigger), str(text)))
    except Exception as _exc:
        import traceback as _tb
        return json.dumps({
            "error":     str(_exc),
            "traceback": _tb.format_exc(),
        })
