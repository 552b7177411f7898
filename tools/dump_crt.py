"""Print the header and CHIP table of a CRT image for diagnostics."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Ensure repository root is importable when executed as a script.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pyprg2crt.crt import CartridgeImage, parse_crt
from pyprg2crt.errors import CrtFormatError


def describe(image: CartridgeImage) -> list[str]:
    cart_type = image.cartridge_type
    type_name = cart_type.name if cart_type is not None else "unknown"
    lines = [
        f"header_length={image.header_length:#x} version={image.version >> 8}.{image.version & 0xFF}",
        f"hardware_type={image.hardware_type:#06x} ({type_name}) exrom={image.exrom} game={image.game}",
        f"name={image.name!r} chips={len(image.chips)}",
    ]
    for index, chip in enumerate(image.chips):
        lines.append(
            f"  chip {index:3d}: bank={chip.bank:3d} type={chip.chip_type} "
            f"load=${chip.load_address:04X} size=${chip.rom_size:04X}"
        )
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("crt", type=Path, help="CRT file to inspect")
    args = parser.parse_args(argv)

    try:
        image = parse_crt(args.crt.read_bytes())
    except (OSError, CrtFormatError) as exc:
        parser.exit(1, f"dump_crt.py: {exc}\n")

    for line in describe(image):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
