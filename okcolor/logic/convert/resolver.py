#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/logic/convert/resolver.py

"""
Format detection and dispatch.

Detection order, first match wins:
1. leading '#'          -> hex
2. leading '0x' / '0X'  -> hex literal (ARGB when 8 digits)
3. `identifier(`        -> the named functional grammar
4. anything else        -> bare numeric list
"""

import random
from typing import NamedTuple, Optional

from okcolor.core import config as c
from okcolor.core.color import LinearRgba, Oklch, Oklrch, Srgba
from okcolor.core.errors import ColorParseError, NoFormatMatched
from okcolor.core.formats import ColorFormat, resolve_format
from okcolor.core.gamut import map_to_gamut
from okcolor.shared import parser
from okcolor.shared.parser import FUNCTION_RE, STRING_PARSERS


class ParsedColor(NamedTuple):
    color: Oklrch
    format: ColorFormat
    use_alpha: bool


def to_oklrch(value) -> Oklrch:
    """Promote any grammar result to the canonical representation."""
    if isinstance(value, Oklrch):
        return value
    if isinstance(value, Oklch):
        return value.to_oklrch()
    if isinstance(value, LinearRgba):
        return Oklrch.from_linear(value)
    if isinstance(value, Srgba):
        return Oklrch.from_srgba(value)
    raise TypeError(f"cannot convert {type(value).__name__} to Oklrch")


def detect_and_parse(text: str):
    """Run the detection order. Returns (value, use_alpha, format)."""
    if text.startswith("#"):
        return (*parser.parse_hex_string(text), ColorFormat.HEX)
    if text[:2] in ("0x", "0X"):
        return (*parser.parse_hex_literal_string(text), ColorFormat.HEX_LITERAL)
    if FUNCTION_RE.match(text):
        return parser.parse_function(text)
    try:
        return parser.parse_raw_auto(text)
    except ColorParseError as err:
        raise NoFormatMatched(
            f"no color format recognized ({err.expected})", err.offset, text
        ) from err


def parse_color(text: str, fmt: Optional[ColorFormat] = None) -> ParsedColor:
    """
    Parse color text into canonical Oklrch.

    With `fmt` set only that grammar runs; otherwise the format is detected.
    Offsets in raised errors are UTF-8 byte offsets into the stripped text.
    """
    text = str(text).strip()
    try:
        if fmt is None:
            value, use_alpha, detected = detect_and_parse(text)
        else:
            detected = resolve_format(fmt)
            value, use_alpha = STRING_PARSERS[detected](text)
    except ColorParseError as err:
        err.to_byte_offset(text)
        raise
    return ParsedColor(to_oklrch(value), detected, use_alpha)


def random_color(rng: Optional[random.Random] = None, strategy: str = "chroma") -> Oklrch:
    """A random in-gamut color drawn in Oklrch space."""
    rng = rng or random.Random()
    color = Oklrch(
        rng.uniform(*c.RANDOM_LIGHTNESS),
        rng.uniform(*c.RANDOM_CHROMA),
        rng.uniform(0.0, c.HUE_MAX),
    )
    return map_to_gamut(color, strategy)
