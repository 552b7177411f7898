"""Cartridge type registry."""

from __future__ import annotations

from .types import (
    CARTRIDGE_TYPE_NAMES,
    DEFAULT_CARTRIDGE_TYPE,
    CartridgeType,
    hardware_code,
    parse_cartridge_type,
)

__all__ = [
    "CARTRIDGE_TYPE_NAMES",
    "DEFAULT_CARTRIDGE_TYPE",
    "CartridgeType",
    "hardware_code",
    "parse_cartridge_type",
]
