# =============================================================================
# BCE/BMM/__init__.py — Byte Mapping Module
# =============================================================================
#
# The BMM is the single source of truth for every codec constant: source tags,
# token patterns, the CRC-8 parameters, integer group widths, the printable
# ASCII window and all panel text templates.
#
# All other BCE sub-modules import exclusively from here.
# Never define codec constants outside this module.
#
# Sub-modules:
#   constants.py  — all tags, patterns, widths and templates
# =============================================================================
