#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/shared/parser.py

"""
Grammars for every supported color syntax.

Each parser takes the trimmed input text and returns `(value, use_alpha)`
where `value` is an `Srgba`, a `LinearRgba` or, for the oklch forms, an
`Oklch`. Failures raise a `ColorParseError` subclass carrying the offset
into the text.
"""

import math
import re
from typing import List, Optional, Tuple

from okcolor.core import config as c
from okcolor.core.color import LinearRgba, Oklch, Srgba
from okcolor.core.conversions import hsl_to_srgb
from okcolor.core.errors import (
    MalformedNumber,
    NoFormatMatched,
    UnknownFunction,
    WrongArity,
    WrongDigitCount,
)
from okcolor.core.formats import ColorFormat

# [-+]?                            -> Optional sign
# (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)  -> "12", "12.", "12.5" or ".5"
# (?:[eE][-+]?[0-9]+)?              -> Optional exponent
FLOAT_PATTERN = r"[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?"

CSS_NUMBER_RE = re.compile(rf"({FLOAT_PATTERN})(%?)")
CSS_ANGLE_RE = re.compile(rf"({FLOAT_PATTERN})(deg|grad|rad|turn)?", re.IGNORECASE)
FLOAT_RE = re.compile(FLOAT_PATTERN)
FUNCTION_RE = re.compile(r"([A-Za-z][A-Za-z0-9_-]*)\s*\(")
HEX_DIGIT_RE = re.compile(r"[0-9A-Fa-f]")
RAW_TOKEN_RE = re.compile(r"[^\s,]+")
RAW_SEPARATOR_RE = re.compile(r"\s*,\s*|\s+")

_ARG_DELIMITERS = " \t\r\n,/)"


# ==========================================
# Lexing Helpers
# ==========================================


class _Token:
    """A raw functional argument and where it starts in the input."""

    __slots__ = ("text", "offset")

    def __init__(self, text: str, offset: int):
        self.text = text
        self.offset = offset

    def number(self) -> Tuple[float, bool]:
        """(value, is_percent) for a bare number or a percentage."""
        m = CSS_NUMBER_RE.fullmatch(self.text)
        if not m:
            raise MalformedNumber(f"invalid number '{self.text}'", self.offset)
        return _finite(m.group(1), self.offset), bool(m.group(2))

    def angle(self) -> float:
        """Hue in degrees, normalized into [0, 360)."""
        m = CSS_ANGLE_RE.fullmatch(self.text)
        if not m:
            raise MalformedNumber(f"invalid angle '{self.text}'", self.offset)
        value = _finite(m.group(1), self.offset)
        unit = (m.group(2) or "deg").lower()
        value *= c.ANGLE_UNITS[unit]
        h = value % c.HUE_MAX
        return 0.0 if h >= c.HUE_MAX else h

    def unit(self) -> float:
        """Number as-is, percentage divided by 100."""
        value, is_percent = self.number()
        return value / c.PERCENT if is_percent else value


def _finite(s: str, offset: int) -> float:
    v = float(s)
    if not math.isfinite(v):
        raise MalformedNumber(f"non-finite numeric value '{s}'", offset)
    return v


class _Scanner:
    """Cursor over the input used by the functional grammars."""

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def peek(self) -> Optional[str]:
        return self.text[self.pos] if self.pos < len(self.text) else None

    def skip_ws(self) -> bool:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1
        return self.pos > start

    def read_token(self) -> _Token:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] not in _ARG_DELIMITERS:
            self.pos += 1
        if self.pos == start:
            if self.peek() is None:
                raise NoFormatMatched("expected ')'", self.pos)
            raise MalformedNumber(f"expected a number, found '{self.peek()}'", self.pos)
        return _Token(self.text[start:self.pos], start)


# ==========================================
# Functional Grammars: rgb() hsl() oklch()
# ==========================================


def _split_function(text: str) -> Tuple[str, int]:
    """Return (lowercased name, index just past '(') for `name(...)` input."""
    m = FUNCTION_RE.match(text)
    if not m:
        raise NoFormatMatched("expected a function like 'rgb('", 0)
    return m.group(1).lower(), m.end()


def _parse_arguments(text: str, start: int) -> Tuple[List[_Token], Optional[_Token]]:
    """
    Read the argument list after '(' up to the matching ')'.

    Accepts comma separated (`1, 2, 3, 0.5`) and space separated with a
    slash before alpha (`1 2 3 / 50%`). Returns (channels, alpha).
    """
    sc = _Scanner(text, start)
    args: List[_Token] = []
    slash_at = None

    sc.skip_ws()
    if sc.peek() != ")":
        while True:
            args.append(sc.read_token())
            sc.skip_ws()
            ch = sc.peek()
            if ch is None:
                raise NoFormatMatched("expected ')'", sc.pos)
            if ch == ")":
                break
            if ch == ",":
                sc.pos += 1
                sc.skip_ws()
            elif ch == "/":
                if slash_at is not None:
                    raise NoFormatMatched("unexpected second '/'", sc.pos)
                slash_at = len(args)
                sc.pos += 1
                sc.skip_ws()

    sc.pos += 1  # closing ')'
    sc.skip_ws()
    if sc.peek() is not None:
        raise NoFormatMatched("unexpected text after ')'", sc.pos)

    arity_error = WrongArity(
        "expected 3 channel arguments and an optional alpha", start - 1
    )
    if slash_at is not None:
        if slash_at != 3 or len(args) != 4:
            raise arity_error
        return args[:3], args[3]
    if len(args) == 3:
        return args, None
    if len(args) == 4:
        return args[:3], args[3]
    raise arity_error


def _alpha(token: Optional[_Token]) -> float:
    return c.UNIT if token is None else token.unit()


def _rgb_channel(token: _Token) -> float:
    value, is_percent = token.number()
    if is_percent:
        return value / c.PERCENT
    return round(value) / c.RGB_MAX


def _rgb_function(args: List[_Token], alpha: Optional[_Token]) -> Srgba:
    r, g, b = (_rgb_channel(t) for t in args)
    return Srgba(r, g, b, _alpha(alpha))


def _hsl_function(args: List[_Token], alpha: Optional[_Token]) -> Srgba:
    h = args[0].angle()
    s = args[1].unit()
    L = args[2].unit()
    return Srgba(*hsl_to_srgb(h, s, L), _alpha(alpha))


def _oklch_function(args: List[_Token], alpha: Optional[_Token]) -> Oklch:
    L = args[0].unit()
    chroma, is_percent = args[1].number()
    if is_percent:
        chroma = chroma / c.PERCENT * c.OKLCH_CHROMA_PERCENT_MAX
    return Oklch(L, chroma, args[2].angle(), _alpha(alpha))


# Function name -> (format tag, channel reader)
FUNCTION_GRAMMARS = {
    "rgb": (ColorFormat.RGB, _rgb_function),
    "rgba": (ColorFormat.RGB, _rgb_function),
    "hsl": (ColorFormat.HSL, _hsl_function),
    "hsla": (ColorFormat.HSL, _hsl_function),
    "oklch": (ColorFormat.OKLCH, _oklch_function),
}


def parse_function(text: str, expected: Optional[ColorFormat] = None):
    """Parse any `name(...)` form. Returns (value, use_alpha, format)."""
    name, start = _split_function(text)
    try:
        fmt, reader = FUNCTION_GRAMMARS[name]
    except KeyError:
        raise UnknownFunction(f"unknown function format '{name}'", 0) from None
    if expected is not None and fmt is not expected:
        raise NoFormatMatched(f"expected '{expected.value}(', found '{name}('", 0)
    args, alpha = _parse_arguments(text, start)
    return reader(args, alpha), alpha is not None, fmt


def parse_rgb_string(text: str):
    value, use_alpha, _ = parse_function(text, ColorFormat.RGB)
    return value, use_alpha


def parse_hsl_string(text: str):
    value, use_alpha, _ = parse_function(text, ColorFormat.HSL)
    return value, use_alpha


def parse_oklch_string(text: str):
    value, use_alpha, _ = parse_function(text, ColorFormat.OKLCH)
    return value, use_alpha


# ==========================================
# Hex Grammars
# ==========================================


def _hex_digits(text: str, prefix_len: int, counts: Tuple[int, ...]) -> str:
    digits = text[prefix_len:]
    for i, ch in enumerate(digits):
        if not HEX_DIGIT_RE.fullmatch(ch):
            raise NoFormatMatched(f"expected hex digit, found '{ch}'", prefix_len + i)
    if len(digits) not in counts:
        allowed = ", ".join(str(n) for n in counts[:-1]) + f" or {counts[-1]}"
        raise WrongDigitCount(
            f"expected {allowed} hex digits, found {len(digits)}", prefix_len
        )
    return digits


def parse_hex_string(text: str):
    """`#RGB`, `#RGBA`, `#RRGGBB` or `#RRGGBBAA`."""
    if not text.startswith("#"):
        raise NoFormatMatched("expected '#'", 0)
    digits = _hex_digits(text, 1, c.HEX_DIGIT_COUNTS)
    if len(digits) in (3, 4):
        # e.g., 'abc' becomes 'aabbcc'
        digits = "".join(ch * 2 for ch in digits)
    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    use_alpha = len(channels) == 4
    if not use_alpha:
        channels.append(int(c.RGB_MAX))
    return Srgba.from_u8(*channels), use_alpha


def parse_hex_literal_string(text: str):
    """`0xRRGGBB` or `0xAARRGGBB` (alpha byte first)."""
    if text[:2] not in ("0x", "0X"):
        raise NoFormatMatched("expected '0x'", 0)
    digits = _hex_digits(text, 2, c.HEX_LITERAL_DIGIT_COUNTS)
    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(channels) == 4:
        a, r, g, b = channels
        return Srgba.from_u8(r, g, b, a), True
    return Srgba.from_u8(*channels), False


# ==========================================
# Bare Numeric Lists
# ==========================================


def _parse_number_list(text: str) -> List[float]:
    """3 or 4 numbers separated by commas and/or whitespace."""
    tokens = list(RAW_TOKEN_RE.finditer(text))
    pos = 0
    values = []
    for i, m in enumerate(tokens):
        gap = text[pos:m.start()]
        if i == 0 and gap:
            raise NoFormatMatched("expected a number", 0)
        if i > 0 and not RAW_SEPARATOR_RE.fullmatch(gap):
            raise NoFormatMatched("expected ',' or whitespace between numbers", pos)
        if not FLOAT_RE.fullmatch(m.group()):
            raise MalformedNumber(f"invalid number '{m.group()}'", m.start())
        values.append(_finite(m.group(), m.start()))
        pos = m.end()
    if text[pos:].strip():
        raise NoFormatMatched("expected a number", pos)
    if len(values) not in (3, 4):
        raise WrongArity(f"expected 3 or 4 numbers, found {len(values)}", 0)
    return values


def parse_raw_rgb_string(text: str):
    """`r, g, b[, a]` with every value in 0-255."""
    values = _parse_number_list(text)
    return Srgba.from_u8(*values), len(values) == 4


def parse_raw_rgb_float_string(text: str):
    """`r, g, b[, a]` with every value in 0-1."""
    values = _parse_number_list(text)
    return Srgba(*values), len(values) == 4


def parse_raw_rgb_linear_string(text: str):
    """`r, g, b[, a]` linear-light values in 0-1."""
    values = _parse_number_list(text)
    return LinearRgba(*values), len(values) == 4


def parse_raw_oklch_string(text: str):
    """`L, C, H[, a]` with raw OKLab lightness and hue in degrees."""
    values = _parse_number_list(text)
    return Oklch(*values), len(values) == 4


def parse_raw_auto(text: str):
    """
    Bare list with the whole-tuple range heuristic.

    If any value is greater than 1 every value (alpha included) is read
    as 0-255; otherwise every value is read as 0-1. Returns
    (value, use_alpha, format).
    """
    values = _parse_number_list(text)
    use_alpha = len(values) == 4
    if any(v > c.UNIT for v in values):
        return Srgba.from_u8(*values), use_alpha, ColorFormat.RAW_RGB
    return Srgba(*values), use_alpha, ColorFormat.RAW_RGB_FLOAT


# Central dictionary to map format tags to their respective parsing functions
STRING_PARSERS = {
    ColorFormat.HEX: parse_hex_string,
    ColorFormat.HEX_LITERAL: parse_hex_literal_string,
    ColorFormat.RGB: parse_rgb_string,
    ColorFormat.HSL: parse_hsl_string,
    ColorFormat.OKLCH: parse_oklch_string,
    ColorFormat.RAW_RGB: parse_raw_rgb_string,
    ColorFormat.RAW_RGB_FLOAT: parse_raw_rgb_float_string,
    ColorFormat.RAW_RGB_LINEAR: parse_raw_rgb_linear_string,
    ColorFormat.RAW_OKLCH: parse_raw_oklch_string,
}
