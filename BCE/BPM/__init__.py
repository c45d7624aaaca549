# =============================================================================
# BCE/BPM/__init__.py — Byte Parsing Module
# =============================================================================
#
# Turns the text of one input field into the canonical byte sequence.
#
# Sub-modules:
#   byte_parser.py  — tokenizer, decimal / hex / binary / ASCII parsers,
#                     MalformedTokenError, parse() dispatch by source tag
# =============================================================================
