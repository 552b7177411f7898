"""ROM content helpers."""

from __future__ import annotations

from .image import BANK_SIZE, FILL_BYTE, bank_count, build_rom_content, padded_length, split_banks

__all__ = [
    "BANK_SIZE",
    "FILL_BYTE",
    "bank_count",
    "build_rom_content",
    "padded_length",
    "split_banks",
]
