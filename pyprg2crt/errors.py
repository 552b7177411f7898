"""Exception hierarchy shared by every stage of the conversion pipeline."""

from __future__ import annotations


class ConversionError(RuntimeError):
    """Base class for failures that abort a PRG to CRT conversion."""


class InputNotFoundError(ConversionError):
    """Raised when the PRG input path does not exist."""


class InputReadError(ConversionError):
    """Raised when the PRG input exists but cannot be read."""


class PrgFormatError(ConversionError):
    """Raised when a PRG image is too short to carry a load address."""


class InvalidCartridgeTypeError(ConversionError):
    """Raised for a cartridge type name that is not in the registry."""


class RomTooLargeError(ConversionError):
    """Raised when the ROM content does not fit the one-byte bank number."""


class OutputWriteError(ConversionError):
    """Raised when the CRT image cannot be written to its destination."""


class CrtFormatError(ConversionError):
    """Raised when a CRT image violates the expected structure."""
