# =============================================================================
# constants.py — BMM Codec Constants and Templates
# =============================================================================
#
# Every value the parsers, renderers and bridge agree on lives here.
# Changing a template here changes what the browser panels show.

import re

# -----------------------------------------------------------------------------
# SOURCE TAGS
# -----------------------------------------------------------------------------
# Canonical tag = the input field a convert was triggered from.

SOURCE_DECIMAL = "decimal"
SOURCE_HEX     = "hexadecimal"
SOURCE_BINARY  = "binary"
SOURCE_ASCII   = "ascii"

SOURCES = (SOURCE_DECIMAL, SOURCE_HEX, SOURCE_BINARY, SOURCE_ASCII)

# Short names used by the page's element ids (decArea, hexArea, binArea, ...)
SOURCE_ALIASES = {
    "dec": SOURCE_DECIMAL,
    "hex": SOURCE_HEX,
    "bin": SOURCE_BINARY,
}

# Bridge trigger that resets every panel
TRIGGER_CLEAR = "clear"


# -----------------------------------------------------------------------------
# TOKEN PATTERNS
# -----------------------------------------------------------------------------
# Applied per token AFTER case normalisation and prefix stripping.

DEC_TOKEN_RE = re.compile(r"^[0-9]{1,3}$")
HEX_TOKEN_RE = re.compile(r"^[0-9A-F]{1,2}$")
BIN_TOKEN_RE = re.compile(r"^[01]{1,8}$")

HEX_PREFIX = "0X"   # compared against the upper-cased token
BIN_PREFIX = "0b"   # compared against the lower-cased token

TOKEN_SEPARATOR = ","   # treated exactly like whitespace

# Token whitespace is the browser's \s set, not str.split()'s: U+FEFF splits,
# the \x1c-\x1f control separators do not.
WHITESPACE_RE = re.compile(
    "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)

BYTE_MAX = 255
BYTE_MASK = 0xFF


# -----------------------------------------------------------------------------
# CRC-8  (poly 0x07, init 0x00, refin=False, refout=False, xorout=0x00)
# -----------------------------------------------------------------------------
# Same parameter set catalogued as CRC-8/SMBUS.  Check value = 0xF4 for the
# nine ASCII bytes "123456789".

CRC8_POLY   = 0x07
CRC8_INIT   = 0x00
CRC8_XOROUT = 0x00
CRC8_CHECK  = 0xF4
CRC8_CHECK_INPUT = b"123456789"


# -----------------------------------------------------------------------------
# INTEGER VIEWS
# -----------------------------------------------------------------------------
# Group sizes in BYTES.  Groups never overlap and start at offset 0; a short
# tail (1 byte for 16-bit, 1-3 bytes for 32-bit) is dropped.

WORD16_BYTES = 2
WORD32_BYTES = 4


# -----------------------------------------------------------------------------
# ASCII RENDERING
# -----------------------------------------------------------------------------
PRINTABLE_MIN = 32     # ' '
PRINTABLE_MAX = 126    # '~'
NON_PRINTABLE = "."


# -----------------------------------------------------------------------------
# PANEL TEMPLATES
# -----------------------------------------------------------------------------
EMPTY_VIEW = "-"   # shown in a view section that has no data

C_ARRAY_PREFIX = "uint8_t data[] = { "
C_ARRAY_SUFFIX = " };"
C_ARRAY_EMPTY  = "uint8_t data[] = { };"

BIT_ORDER_NOTE = "(7..0)"   # bit layout is MSB first

UNSIGNED_HEADINGS = (
    "uint8_t:",
    "uint16_t (LE/BE pairs):",
    "uint32_t (LE/BE groups):",
)
SIGNED_HEADINGS = (
    "int8_t:",
    "int16_t (LE/BE pairs):",
    "int32_t (LE/BE groups):",
)

# Rendered panel names — keys of ConverterState.panels
PANEL_DECIMAL  = "decimal"
PANEL_HEX      = "hexadecimal"
PANEL_BINARY   = "binary"
PANEL_ASCII    = "ascii"
PANEL_CRC8     = "crc8"
PANEL_UNSIGNED = "unsigned"
PANEL_SIGNED   = "signed"
PANEL_BITS     = "bits"
PANEL_C_ARRAY  = "c_array"

PANELS = (
    PANEL_DECIMAL, PANEL_HEX, PANEL_BINARY, PANEL_ASCII, PANEL_CRC8,
    PANEL_UNSIGNED, PANEL_SIGNED, PANEL_BITS, PANEL_C_ARRAY,
)

# "Copy all" block labels, in output order
COPY_ALL_LABELS = (
    ("DEC:", PANEL_DECIMAL),
    ("HEX:", PANEL_HEX),
    ("BIN:", PANEL_BINARY),
    ("ASCII:", PANEL_ASCII),
)
COPY_ALL_CRC_LABEL = "CRC-8 (dec): "
