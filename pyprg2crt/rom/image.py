"""ROM content assembly: pads the loader payload to whole 8 KiB banks."""

from __future__ import annotations

from typing import Iterator

from pyprg2crt.utils import debug_log

BANK_SIZE = 0x2000
FILL_BYTE = 0x00


def padded_length(length: int) -> int:
    """Round ``length`` up to the next multiple of ``BANK_SIZE``."""

    return -(-length // BANK_SIZE) * BANK_SIZE


def bank_count(length: int) -> int:
    return padded_length(length) // BANK_SIZE


def build_rom_content(payload: bytes) -> bytes:
    """Return ``payload`` followed by zero fill up to a bank boundary."""

    target = padded_length(len(payload))
    content = bytes(payload) + bytes([FILL_BYTE]) * (target - len(payload))
    debug_log(
        "rom",
        "payload_length=%d padding=%d banks=%d",
        len(payload),
        target - len(payload),
        target // BANK_SIZE,
    )
    return content


def split_banks(content: bytes) -> Iterator[tuple[int, bytes]]:
    """Yield ``(bank, data)`` pairs in ascending bank order."""

    if len(content) % BANK_SIZE:
        raise ValueError(f"ROM content length {len(content)} is not a multiple of {BANK_SIZE}")
    view = memoryview(content)
    for bank, offset in enumerate(range(0, len(content), BANK_SIZE)):
        yield bank, bytes(view[offset : offset + BANK_SIZE])
