# =============================================================================
# BCE/BBM/__init__.py — Byte Bridge Module
# =============================================================================
#
# The BBM is the only part of BCE the page (or the desktop HTTP bridge) talks
# to.  It owns nothing between calls: the caller passes the previous
# ConverterState in and gets the next one back.
#
# Data flow:
#   JS: button press → handle_json(previous_state_json, trigger, field_text)
#   Python (Pyodide): dispatch table → parse → render every panel
#   JS: writes panels into the page, highlights error_source if set
#
# Sub-modules:
#   converter_bridge.py  — ConverterState, HANDLERS dispatch table,
#                          copy_all_text(), handle_json() entry point
# =============================================================================
