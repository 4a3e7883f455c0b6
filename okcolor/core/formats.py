#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/core/formats.py

import enum

from . import config as c
from .errors import UnknownFormatError


class ColorFormat(enum.Enum):
    """Closed set of textual color syntaxes, used for parsing and output."""
    HEX = "hex"
    HEX_LITERAL = "hex_literal"
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"
    RAW_RGB = "raw_rgb"
    RAW_RGB_FLOAT = "raw_rgb_float"
    RAW_RGB_LINEAR = "raw_rgb_linear"
    RAW_OKLCH = "raw_oklch"

    @property
    def is_oklch(self) -> bool:
        return self in (ColorFormat.OKLCH, ColorFormat.RAW_OKLCH)

    def __str__(self) -> str:
        return self.value


def resolve_format(name) -> ColorFormat:
    """Resolve a format name or alias (case-insensitive) to a ColorFormat."""
    if isinstance(name, ColorFormat):
        return name
    key = str(name).strip().lower().replace("-", "_")
    try:
        return ColorFormat(c.FORMAT_ALIASES[key])
    except KeyError:
        raise UnknownFormatError(f"unknown color format: '{name}'") from None
