"""Tests for the cartridge type registry."""

from __future__ import annotations

import pytest

from pyprg2crt.cartridge import (
    CARTRIDGE_TYPE_NAMES,
    DEFAULT_CARTRIDGE_TYPE,
    CartridgeType,
    hardware_code,
    parse_cartridge_type,
)
from pyprg2crt.errors import InvalidCartridgeTypeError


@pytest.mark.parametrize(
    ("cartridge_type", "expected"),
    [
        (CartridgeType.NORMAL_8K, b"\x00\x00"),
        (CartridgeType.NORMAL_16K, b"\x00\x01"),
        (CartridgeType.ULTIMAX, b"\x00\x02"),
        (CartridgeType.OCEAN_TYPE_1, b"\x00\x12"),
        (CartridgeType.EASYFLASH, b"\x00\x20"),
        (CartridgeType.EASYFLASH_XBANK, b"\x00\x21"),
    ],
)
def test_hardware_codes(cartridge_type: CartridgeType, expected: bytes) -> None:
    assert hardware_code(cartridge_type) == expected
    assert cartridge_type.code == expected


def test_every_type_has_a_command_line_name() -> None:
    assert set(CARTRIDGE_TYPE_NAMES.values()) == set(CartridgeType)


def test_default_is_easyflash() -> None:
    assert DEFAULT_CARTRIDGE_TYPE is CartridgeType.EASYFLASH


def test_parse_cartridge_type_normalises_names() -> None:
    assert parse_cartridge_type("EasyFlash") is CartridgeType.EASYFLASH
    assert parse_cartridge_type(" easyflash_xbank ") is CartridgeType.EASYFLASH_XBANK
    assert parse_cartridge_type("OCEAN1") is CartridgeType.OCEAN_TYPE_1


def test_parse_cartridge_type_rejects_unknown_name() -> None:
    with pytest.raises(InvalidCartridgeTypeError, match="magicdesk"):
        parse_cartridge_type("magicdesk")


def test_from_code_round_trips_and_reports_unknown() -> None:
    for member in CartridgeType:
        assert CartridgeType.from_code(member.value) is member
    assert CartridgeType.from_code(0x0013) is None
