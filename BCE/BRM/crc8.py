# =============================================================================
# crc8.py — CRC-8 (poly 0x07) Checksum
# =============================================================================
#
# Parameters (the only variant this engine computes):
#   width=8  poly=0x07  init=0x00  refin=False  refout=False  xorout=0x00
#
# Per byte:
#   crc ^= byte
#   8 times:  crc = ((crc << 1) ^ 0x07) & 0xFF  if crc & 0x80
#             crc = (crc << 1) & 0xFF           otherwise
#
# The register is never reflected, so bit 7 is always the one tested.

from BCE.BMM.constants import CRC8_POLY, CRC8_INIT, CRC8_XOROUT


def crc8(data: bytes, poly: int = CRC8_POLY, init: int = CRC8_INIT,
         xorout: int = CRC8_XOROUT) -> int:
    """
    Bitwise CRC-8 over `data`.

    Returns:
        int 0..255.  Empty input returns `init` (0 by default).
    """
    crc = init & 0xFF
    for b in data:
        crc ^= b
        for _ in range(8):
            crc = (((crc << 1) & 0xFF) ^ poly) if (crc & 0x80) else ((crc << 1) & 0xFF)
    return (crc ^ xorout) & 0xFF


def crc8_display(data: bytes) -> str:
    """Decimal CRC as shown in the checksum field; blank for an empty sequence."""
    return str(crc8(data)) if data else ""
