"""Tests for the CRT dump diagnostic script."""

from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

from pyprg2crt.cartridge import CartridgeType
from pyprg2crt.convert import convert_prg

_SCRIPT = Path(__file__).resolve().parents[2] / "tools" / "dump_crt.py"


def _load_tool():
    spec = importlib.util.spec_from_file_location("dump_crt", _SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_dump_crt_prints_chip_table(tmp_path, capsys) -> None:
    crt_path = tmp_path / "game.crt"
    crt_path.write_bytes(convert_prg(b"\x01\x08" + bytes(9000), CartridgeType.EASYFLASH_XBANK))

    assert _load_tool().main([str(crt_path)]) == 0

    out = capsys.readouterr().out
    assert "hardware_type=0x0021 (EASYFLASH_XBANK)" in out
    assert "chips=2" in out
    assert "chip   1: bank=  1 type=0 load=$8000 size=$2000" in out


def test_dump_crt_rejects_garbage(tmp_path, capsys) -> None:
    crt_path = tmp_path / "bad.crt"
    crt_path.write_bytes(b"not a cartridge")

    with pytest.raises(SystemExit) as excinfo:
        _load_tool().main([str(crt_path)])
    assert excinfo.value.code == 1
    assert "dump_crt.py:" in capsys.readouterr().err
