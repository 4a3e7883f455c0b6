#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/shared/sanitizer.py

import argparse
import math
import re

from okcolor.core.errors import UnknownFormatError
from okcolor.core.formats import ColorFormat, resolve_format
from .parser import FLOAT_PATTERN

# Regex anchored on both ends so trailing garbage such as "10deg" is rejected
_FLOAT_ARG_RE = re.compile(rf"\s*({FLOAT_PATTERN})\s*")
_INT_ARG_RE = re.compile(r"\s*([-+]?[0-9]+)\s*")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_signed_float(value: str):
    if value is None:
        return None
    m = _FLOAT_ARG_RE.fullmatch(str(value))
    if not m:
        return None
    val = float(m.group(1))
    return val if math.isfinite(val) else None


def _extract_signed_int(value: str):
    if value is None:
        return None
    m = _INT_ARG_RE.fullmatch(str(value))
    return int(m.group(1)) if m else None


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_format(v: str) -> ColorFormat:
    """Validator for format names and aliases (e.g., 'hex', 'rgba', '0x')."""
    try:
        return resolve_format(v)
    except UnknownFormatError:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid color format: '{raw}'") from None


def handle_float_any(v: str) -> float:
    """Validator for unbounded floating-point CLI arguments."""
    val = _extract_signed_float(v)
    if val is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid numeric value: '{raw}'")
    return val


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = handle_float_any(v)
        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "from_format": handle_format,
    "to_format": handle_format,
    "float_0_1": handle_float_range(0.0, 1.0),
    "float_signed_1": handle_float_range(-1.0, 1.0),
    "float_signed_360": handle_float_range(-360.0, 360.0),
    "seed": handle_int_range(0, 999_999_999_999_999_999),
}
