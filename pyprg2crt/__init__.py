"""Commodore 64 PRG to CRT cartridge image converter.

A PRG program is wrapped behind a small boot loader, padded to whole 8 KiB
banks and serialised as a CRT container that emulators and flash tools load
directly. ``run.py`` exposes the pipeline on the command line.
"""

from __future__ import annotations

from . import cartridge, crt, loader, rom, utils
from .convert import ConversionConfig, convert_file, convert_prg
from .errors import ConversionError

__all__: list[str] = [
    "cartridge",
    "loader",
    "rom",
    "crt",
    "utils",
    "ConversionConfig",
    "ConversionError",
    "convert_file",
    "convert_prg",
]
