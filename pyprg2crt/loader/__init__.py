"""PRG loading and cartridge boot loader payload."""

from __future__ import annotations

from .prg import load_prg, load_prg_from_path
from .program import LOAD_ADDRESS_SIZE, PrgImage
from .stub import (
    LOADER_STUB,
    LOADER_STUB_SIZE,
    PROGRAM_OFFSET,
    SIZE_FIELD_SIZE,
    build_loader_payload,
)

__all__ = [
    "LOAD_ADDRESS_SIZE",
    "LOADER_STUB",
    "LOADER_STUB_SIZE",
    "PROGRAM_OFFSET",
    "SIZE_FIELD_SIZE",
    "PrgImage",
    "build_loader_payload",
    "load_prg",
    "load_prg_from_path",
]
