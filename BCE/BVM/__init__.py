# =============================================================================
# BCE/BVM/__init__.py — Byte Verification Module
# =============================================================================
#
# Tools for checking the engine from a terminal, without the page.
#
# Sub-modules:
#   byte_inspect.py  — full report for one input (CLI + importable)
#   validate.py      — self-validation suite for the entire BCE stack
# =============================================================================
