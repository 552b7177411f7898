"""CRT container writer and reader."""

from __future__ import annotations

from .format import CHIP_HEADER_LENGTH, CRT_HEADER_LENGTH, CRT_SIGNATURE, MAX_BANKS
from .reader import CartridgeImage, ChipPacket, parse_crt
from .writer import CHIP_PACKET_LENGTH, build_chip_packet, build_crt_header, write_crt

__all__ = [
    "CHIP_HEADER_LENGTH",
    "CHIP_PACKET_LENGTH",
    "CRT_HEADER_LENGTH",
    "CRT_SIGNATURE",
    "MAX_BANKS",
    "CartridgeImage",
    "ChipPacket",
    "build_chip_packet",
    "build_crt_header",
    "parse_crt",
    "write_crt",
]
