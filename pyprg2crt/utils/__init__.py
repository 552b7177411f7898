"""Utility helpers for the PRG to CRT converter."""

from .debug import debug_enabled, debug_log, reset_categories

__all__ = [
    "debug_enabled",
    "debug_log",
    "reset_categories",
]
