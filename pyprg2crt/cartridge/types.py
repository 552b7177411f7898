"""Cartridge hardware types understood by the CRT writer."""

from __future__ import annotations

import struct
from enum import Enum
from typing import Dict, Optional

from pyprg2crt.errors import InvalidCartridgeTypeError


class CartridgeType(Enum):
    """Supported cartridge layouts, valued by their CRT hardware type number."""

    NORMAL_8K = 0x0000
    NORMAL_16K = 0x0001
    ULTIMAX = 0x0002
    OCEAN_TYPE_1 = 0x0012
    EASYFLASH = 0x0020
    EASYFLASH_XBANK = 0x0021

    @property
    def code(self) -> bytes:
        """Big-endian hardware type field as stored in the CRT header."""

        return hardware_code(self)

    @classmethod
    def from_code(cls, code: int) -> Optional["CartridgeType"]:
        for member in cls:
            if member.value == code:
                return member
        return None


# Command-line names; the EasyFlash "Xbank" mode shares the EasyFlash layout.
CARTRIDGE_TYPE_NAMES: Dict[str, CartridgeType] = {
    "normal8k": CartridgeType.NORMAL_8K,
    "normal16k": CartridgeType.NORMAL_16K,
    "ultimax": CartridgeType.ULTIMAX,
    "ocean1": CartridgeType.OCEAN_TYPE_1,
    "easyflash": CartridgeType.EASYFLASH,
    "easyflash-xbank": CartridgeType.EASYFLASH_XBANK,
}

DEFAULT_CARTRIDGE_TYPE = CartridgeType.EASYFLASH

_HARDWARE_CODES: Dict[CartridgeType, bytes] = {
    member: struct.pack(">H", member.value) for member in CartridgeType
}


def hardware_code(cartridge_type: CartridgeType) -> bytes:
    """Return the 2-byte hardware type code for ``cartridge_type``."""

    return _HARDWARE_CODES[cartridge_type]


def parse_cartridge_type(name: str) -> CartridgeType:
    """Resolve a command-line cartridge type name."""

    key = name.strip().lower().replace("_", "-")
    try:
        return CARTRIDGE_TYPE_NAMES[key]
    except KeyError:
        choices = ", ".join(CARTRIDGE_TYPE_NAMES)
        raise InvalidCartridgeTypeError(
            f"Unknown cartridge type '{name}' (expected one of: {choices})"
        ) from None
