# =============================================================================
# BCE/BRM/__init__.py — Byte Rendering Module
# =============================================================================
#
# Everything that goes FROM the canonical byte sequence TO text.  All functions
# are pure: bytes in, str / list / NamedTuple out.  Nothing here can fail for
# a valid byte sequence.
#
# Modules:
#   text_encoder.py   — decimal / hex / binary / ASCII renderings
#   crc8.py           — CRC-8 poly 0x07 checksum
#   word_views.py     — uint/int 8, 16, 32 views, LE + BE (numpy-backed)
#   inspect_views.py  — per-byte bit layout and C array literal
# =============================================================================
