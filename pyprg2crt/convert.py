"""PRG to CRT conversion pipeline."""

from __future__ import annotations

import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path

from pyprg2crt.cartridge import DEFAULT_CARTRIDGE_TYPE, CartridgeType, hardware_code
from pyprg2crt.crt import write_crt
from pyprg2crt.errors import OutputWriteError
from pyprg2crt.loader import PrgImage, build_loader_payload, load_prg_from_path
from pyprg2crt.rom import build_rom_content
from pyprg2crt.utils import debug_log


@dataclass
class ConversionConfig:
    """Paths and cartridge type for one conversion run."""

    input_path: Path
    output_path: Path
    cartridge_type: CartridgeType = DEFAULT_CARTRIDGE_TYPE


def convert_prg(prg: bytes | PrgImage, cartridge_type: CartridgeType = DEFAULT_CARTRIDGE_TYPE) -> bytes:
    """Convert a PRG image into the bytes of a CRT image."""

    image = prg if isinstance(prg, PrgImage) else PrgImage.from_bytes(prg)
    payload = build_loader_payload(image)
    rom_content = build_rom_content(payload)
    return write_crt(rom_content, hardware_code(cartridge_type))


def convert_file(config: ConversionConfig) -> int:
    """Convert ``config.input_path`` and write the CRT image; return its size."""

    prg = load_prg_from_path(config.input_path)
    image = convert_prg(prg, config.cartridge_type)
    write_output(config.output_path, image)
    return len(image)


def write_output(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path`` atomically; ``path`` is untouched on failure."""

    try:
        fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as exc:
        raise OutputWriteError(f"Cannot create output file {path}: {exc}") from exc

    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(temp_path, _output_mode(path))
        os.replace(temp_path, path)
    except OSError as exc:
        temp_path.unlink(missing_ok=True)
        raise OutputWriteError(f"Cannot write output file {path}: {exc}") from exc
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise

    debug_log("io", "wrote %d bytes to %s", len(data), path)


def _output_mode(path: Path) -> int:
    """Keep the mode of an existing destination, else apply the process umask."""

    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask
