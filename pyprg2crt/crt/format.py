"""Constants describing the CRT container layout."""

from __future__ import annotations

import struct

CRT_SIGNATURE = b"C64 CARTRIDGE   "
CRT_HEADER_LENGTH = 0x40
CRT_VERSION = 0x0100
CRT_NAME_LENGTH = 32

CHIP_SIGNATURE = b"CHIP"
CHIP_HEADER_LENGTH = 0x10
CHIP_TYPE_ROM = 0x0000
CHIP_LOAD_ADDRESS = 0x8000

MAX_BANKS = 0x100

# signature, header length, version, hardware type, EXROM, GAME, reserved, name
HEADER_STRUCT = struct.Struct(">16sIH2sBB6s32s")
# signature, packet length, chip type, bank (high, low), load address, ROM size
CHIP_STRUCT = struct.Struct(">4sIHBBHH")
