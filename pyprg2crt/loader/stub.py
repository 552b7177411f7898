"""Cartridge boot loader that copies the embedded PRG into RAM and runs it.

The stub is a pre-assembled 6502 image mapped at ``$8000``. It starts with
the CBM80 autostart vectors, initialises KERNAL and BASIC, moves a small
copier into the cassette buffer at ``$0340`` and jumps there. The copier
reads the size field (``$80AC``) and the load address (``$80AE``) that
directly follow the stub, copies the program body bank by bank through
``$DE00``, switches the cartridge off via ``$DE02`` and issues ``RUN``.

The addresses above are baked into the code, so the stub must stay exactly
``LOADER_STUB_SIZE`` bytes long.
"""

from __future__ import annotations

import struct

from pyprg2crt.utils import debug_log

from .program import PrgImage

LOADER_STUB_SIZE = 172
SIZE_FIELD_SIZE = 2

LOADER_STUB = bytes.fromhex(
    "09 80 09 80 c3 c2 cd 38 30 78 8e 16 d0 20 a3 fd"
    "20 50 fd 20 15 fd 20 5b ff 58 20 53 e4 20 bf e3"
    "20 22 e4 a2 fb 9a a2 77 bd 34 80 9d 40 03 ca 10"
    "f7 4c 40 03 78 a9 00 85 f7 8d 00 de a9 b0 85 fb"
    "a9 80 85 fc ad ae 80 85 fd 85 2b ad af 80 85 fe"
    "85 2c ad ac 80 85 f9 ad ad 80 85 fa a0 00 a5 f9"
    "05 fa f0 2c b1 fb 91 fd a5 f9 d0 02 c6 fa c6 f9"
    "e6 fd d0 02 e6 fe e6 fb d0 e4 e6 fc a5 fc c9 a0"
    "d0 dc a9 80 85 fc e6 f7 a5 f7 8d 00 de 4c 6a 03"
    "a5 fd 85 2d 85 2f 85 31 a5 fe 85 2e 85 30 85 32"
    "a9 04 8d 02 de 58 20 59 a6 4c ae a7"
)

PROGRAM_OFFSET = LOADER_STUB_SIZE + SIZE_FIELD_SIZE


def build_loader_payload(prg: PrgImage) -> bytes:
    """Return the loader stub, the body size field and the full PRG image."""

    size_field = struct.pack("<H", prg.body_length)
    payload = LOADER_STUB + size_field + prg.data
    debug_log("prg", "payload_length=%d size_field=%s", len(payload), size_field.hex())
    return payload
