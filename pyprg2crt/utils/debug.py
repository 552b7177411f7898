"""Lightweight debug logging helpers for the PRG to CRT converter.

Output is enabled through ``PRG2CRT_DEBUG``, a comma separated list of
categories or ``all``. The pipeline logs under ``prg`` (PRG image and loader
payload), ``rom`` (padding and bank count), ``crt`` (header and chip packets)
and ``io`` (output file written).
"""

from __future__ import annotations

import os
from typing import Iterable

ENV_VARIABLE = "PRG2CRT_DEBUG"

_CATEGORIES: set[str] | None = None


def _load_categories() -> set[str]:
    global _CATEGORIES
    if _CATEGORIES is not None:
        return _CATEGORIES
    value = os.environ.get(ENV_VARIABLE, "")
    if not value:
        _CATEGORIES = set()
        return _CATEGORIES
    parts: Iterable[str] = (part.strip().lower() for part in value.split(","))
    _CATEGORIES = {part for part in parts if part}
    return _CATEGORIES


def reset_categories() -> None:
    """Forget the cached category set so ``PRG2CRT_DEBUG`` is read again."""

    global _CATEGORIES
    _CATEGORIES = None


def debug_enabled(category: str | None = None) -> bool:
    categories = _load_categories()
    if not categories:
        return False
    if "all" in categories:
        return True
    if category is None:
        return True
    return category.lower() in categories


def debug_log(category: str, message: str, *args) -> None:
    if not debug_enabled(category):
        return
    prefix = f"[PRG2CRT][{category}]"
    if args:
        try:
            message = message % args
        except (TypeError, ValueError):
            message = f"{message} {args!r}"
    print(f"{prefix} {message}")
