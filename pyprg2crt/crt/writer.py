"""CRT image writer: global header followed by one CHIP packet per bank."""

from __future__ import annotations

from pyprg2crt.errors import RomTooLargeError
from pyprg2crt.rom import BANK_SIZE, split_banks
from pyprg2crt.utils import debug_log

from .format import (
    CHIP_HEADER_LENGTH,
    CHIP_LOAD_ADDRESS,
    CHIP_SIGNATURE,
    CHIP_STRUCT,
    CHIP_TYPE_ROM,
    CRT_HEADER_LENGTH,
    CRT_NAME_LENGTH,
    CRT_SIGNATURE,
    CRT_VERSION,
    HEADER_STRUCT,
    MAX_BANKS,
)

EXROM_LINE = 0x00
GAME_LINE = 0x00
CHIP_PACKET_LENGTH = CHIP_HEADER_LENGTH + BANK_SIZE


def build_crt_header(hardware_code: bytes) -> bytes:
    """Return the 64-byte CRT header for the given 2-byte hardware code."""

    if len(hardware_code) != 2:
        raise ValueError(f"hardware code must be 2 bytes, got {len(hardware_code)}")
    return HEADER_STRUCT.pack(
        CRT_SIGNATURE,
        CRT_HEADER_LENGTH,
        CRT_VERSION,
        bytes(hardware_code),
        EXROM_LINE,
        GAME_LINE,
        bytes(6),
        bytes(CRT_NAME_LENGTH),
    )


def build_chip_packet(bank: int, data: bytes) -> bytes:
    """Return a CHIP packet carrying one 8 KiB ROM bank at ``$8000``."""

    if not 0 <= bank < MAX_BANKS:
        raise RomTooLargeError(f"Bank {bank} does not fit the one-byte bank number")
    if len(data) != BANK_SIZE:
        raise ValueError(f"bank data must be {BANK_SIZE} bytes, got {len(data)}")
    header = CHIP_STRUCT.pack(
        CHIP_SIGNATURE,
        CHIP_PACKET_LENGTH,
        CHIP_TYPE_ROM,
        0x00,
        bank,
        CHIP_LOAD_ADDRESS,
        BANK_SIZE,
    )
    return header + data


def write_crt(rom_content: bytes, hardware_code: bytes) -> bytes:
    """Serialise ``rom_content`` into a complete CRT image."""

    banks = len(rom_content) // BANK_SIZE
    if banks > MAX_BANKS:
        raise RomTooLargeError(
            f"ROM content needs {banks} banks, at most {MAX_BANKS} are addressable"
        )

    parts = [build_crt_header(hardware_code)]
    for bank, data in split_banks(rom_content):
        parts.append(build_chip_packet(bank, data))
    image = b"".join(parts)

    debug_log(
        "crt",
        "hardware_code=%s chips=%d length=%d",
        bytes(hardware_code).hex(),
        banks,
        len(image),
    )
    return image
