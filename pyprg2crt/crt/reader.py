"""CRT image reader used to inspect and verify generated cartridges."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import List, Optional

from pyprg2crt.cartridge import CartridgeType
from pyprg2crt.errors import CrtFormatError

from .format import CHIP_SIGNATURE, CHIP_STRUCT, CRT_SIGNATURE, HEADER_STRUCT


@dataclass
class ChipPacket:
    """One CHIP packet of a CRT image."""

    chip_type: int
    bank: int
    load_address: int
    data: bytes = b""

    @property
    def rom_size(self) -> int:
        return len(self.data)


@dataclass
class CartridgeImage:
    """Header fields and CHIP packets of a parsed CRT image."""

    header_length: int
    version: int
    hardware_type: int
    exrom: int
    game: int
    name: str = ""
    chips: List[ChipPacket] = field(default_factory=list)

    @property
    def cartridge_type(self) -> Optional[CartridgeType]:
        return CartridgeType.from_code(self.hardware_type)

    def rom_content(self) -> bytes:
        """Concatenate chip data in ascending bank order."""

        ordered = sorted(self.chips, key=lambda chip: chip.bank)
        return b"".join(chip.data for chip in ordered)


def parse_crt(data: bytes) -> CartridgeImage:
    """Parse a complete CRT image held in memory."""

    return _CrtReader(io.BytesIO(data)).read()


class _CrtReader:
    def __init__(self, stream: io.BytesIO) -> None:
        self._stream = stream

    def read(self) -> CartridgeImage:
        raw = self._read_exact(HEADER_STRUCT.size, "CRT header")
        signature, header_length, version, hardware, exrom, game, _reserved, name = HEADER_STRUCT.unpack(raw)
        if signature != CRT_SIGNATURE:
            raise CrtFormatError("Invalid CRT signature")
        if header_length < HEADER_STRUCT.size:
            raise CrtFormatError(f"Invalid CRT header length: {header_length:#x}")
        # Headers longer than 0x40 carry extra bytes before the first packet.
        self._read_exact(header_length - HEADER_STRUCT.size, "CRT header")

        image = CartridgeImage(
            header_length=header_length,
            version=version,
            hardware_type=int.from_bytes(hardware, "big"),
            exrom=exrom,
            game=game,
            name=name.rstrip(b"\x00").decode("ascii", errors="replace"),
        )

        while True:
            chip = self._read_chip()
            if chip is None:
                break
            image.chips.append(chip)
        return image

    def _read_chip(self) -> Optional[ChipPacket]:
        raw = self._stream.read(CHIP_STRUCT.size)
        if not raw:
            return None
        if len(raw) < CHIP_STRUCT.size:
            raise CrtFormatError("Unexpected end of CRT file in CHIP header")

        signature, packet_length, chip_type, bank_high, bank_low, load_address, rom_size = CHIP_STRUCT.unpack(raw)
        if signature != CHIP_SIGNATURE:
            raise CrtFormatError(f"Invalid CHIP signature: {signature!r}")
        if packet_length != CHIP_STRUCT.size + rom_size:
            raise CrtFormatError(
                f"CHIP packet length {packet_length:#x} does not match ROM size {rom_size:#x}"
            )

        data = self._read_exact(rom_size, "CHIP data")
        return ChipPacket(
            chip_type=chip_type,
            bank=(bank_high << 8) | bank_low,
            load_address=load_address,
            data=data,
        )

    def _read_exact(self, length: int, what: str) -> bytes:
        data = self._stream.read(length)
        if len(data) < length:
            raise CrtFormatError(f"Unexpected end of CRT file in {what}")
        return data
