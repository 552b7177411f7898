"""Command-line entry point for the PRG to CRT converter.

Reads a Commodore 64 PRG file, wraps it behind the cartridge boot loader and
writes a CRT image. The output file is only replaced once the complete image
has been written.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pyprg2crt.cartridge import CARTRIDGE_TYPE_NAMES, parse_cartridge_type
from pyprg2crt.convert import ConversionConfig, convert_file
from pyprg2crt.errors import ConversionError, InvalidCartridgeTypeError


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run.py",
        description="Convert a C64 PRG file into a CRT cartridge image",
    )
    parser.add_argument(
        "input",
        type=Path,
        help="PRG file to convert (2-byte load address followed by the program)",
    )
    parser.add_argument(
        "output",
        type=Path,
        help="Destination CRT file",
    )
    parser.add_argument(
        "--type",
        dest="cartridge_type",
        default="easyflash",
        help=(
            "Cartridge hardware type written to the CRT header: "
            f"{', '.join(CARTRIDGE_TYPE_NAMES)} (default: easyflash)"
        ),
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        cartridge_type = parse_cartridge_type(args.cartridge_type)
    except InvalidCartridgeTypeError as exc:
        parser.error(str(exc))

    try:
        config = ConversionConfig(
            input_path=args.input,
            output_path=args.output,
            cartridge_type=cartridge_type,
        )
        size = convert_file(config)
    except ConversionError as exc:
        parser.exit(1, f"run.py: {exc}\n")

    print(f"{args.output}: {size} bytes ({cartridge_type.name})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
