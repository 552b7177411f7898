"""PRG image structure for Commodore 64 program files."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from pyprg2crt.errors import PrgFormatError

LOAD_ADDRESS_SIZE = 2
MAX_BODY_LENGTH = 0xFFFF


@dataclass(frozen=True)
class PrgImage:
    """A PRG file: 16-bit little-endian load address followed by the body."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) < LOAD_ADDRESS_SIZE:
            raise PrgFormatError(
                f"PRG image too short: {len(self.data)} byte(s), need at least {LOAD_ADDRESS_SIZE}"
            )
        if len(self.data) - LOAD_ADDRESS_SIZE > MAX_BODY_LENGTH:
            raise PrgFormatError(
                f"PRG body of {len(self.data) - LOAD_ADDRESS_SIZE} bytes does not fit a 16-bit size field"
            )

    @classmethod
    def from_bytes(cls, data: bytes) -> "PrgImage":
        return cls(bytes(data))

    @property
    def load_address(self) -> int:
        return struct.unpack_from("<H", self.data, 0)[0]

    @property
    def body(self) -> bytes:
        return self.data[LOAD_ADDRESS_SIZE:]

    @property
    def body_length(self) -> int:
        return len(self.data) - LOAD_ADDRESS_SIZE

    def __len__(self) -> int:
        return len(self.data)
