"""PRG file loading."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from pyprg2crt.errors import InputNotFoundError, InputReadError
from pyprg2crt.utils import debug_log

from .program import PrgImage


def load_prg(stream: BinaryIO) -> PrgImage:
    """Read a complete PRG image from ``stream``."""

    image = PrgImage.from_bytes(stream.read())
    debug_log(
        "prg",
        "load_address=%04X body_length=%d",
        image.load_address,
        image.body_length,
    )
    return image


def load_prg_from_path(path: Path) -> PrgImage:
    """Load a PRG image from the filesystem."""

    if not path.exists():
        raise InputNotFoundError(f"PRG file not found: {path}")
    try:
        with path.open("rb") as handle:
            return load_prg(handle)
    except OSError as exc:
        raise InputReadError(f"Cannot read PRG file {path}: {exc}") from exc
