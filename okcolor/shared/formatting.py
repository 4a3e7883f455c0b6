#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/shared/formatting.py

from okcolor.core import config as c
from okcolor.core.color import Oklrch
from okcolor.core.conversions import normalize_hue, srgb_to_hsl
from okcolor.core.formats import ColorFormat, resolve_format
from okcolor.core.gamut import map_to_gamut


def _num(value: float, decimals: int) -> str:
    """CSS number: rounded, negatives (and -0) as 0, trailing zeros dropped."""
    v = round(value, decimals)
    if not v > 0:
        return "0"
    s = f"{v:.{decimals}f}"
    return s.rstrip("0").rstrip(".") if "." in s else s


def _raw(value: float, decimals: int) -> str:
    """Raw number: rounded, negatives as 0, always with a decimal point."""
    v = round(value, decimals)
    if not v > 0:
        v = 0.0
    return repr(float(v))


def _hue(value: float) -> float:
    """Round a hue, then wrap it so 359.999 prints as 0 rather than 360."""
    return normalize_hue(round(value, c.PRECISION_HUE))


def _css_alpha(alpha: float) -> str:
    if alpha >= c.UNIT:
        return ""
    return f" / {_num(alpha * c.PERCENT, c.PRECISION_ALPHA_PERCENT)}%"


def _hex_bytes(*values: int) -> str:
    return "".join(f"{v:02x}" for v in values)


def format_colorspace(fmt: ColorFormat, color: Oklrch, use_alpha: bool = False) -> str:
    """
    Render an already gamut-resolved color in the given format.

    RGB-family formats clamp their channels; oklch forms print the color
    as-is with the raw OKLab lightness.
    """
    if fmt.is_oklch:
        lch = color.to_oklch()
        L = lch.lightness
        C = lch.chroma
        H = _hue(lch.hue)
        if fmt is ColorFormat.OKLCH:
            return (
                f"oklch({_num(L, c.PRECISION_UNIT)} {_num(C, c.PRECISION_UNIT)} "
                f"{_num(H, c.PRECISION_HUE)}{_css_alpha(lch.alpha)})"
            )
        parts = [_raw(L, c.PRECISION_UNIT), _raw(C, c.PRECISION_UNIT), _raw(H, c.PRECISION_HUE)]
        if use_alpha:
            parts.append(_raw(lch.alpha, c.PRECISION_UNIT))
        return ", ".join(parts)

    if fmt is ColorFormat.RAW_RGB_LINEAR:
        lin = color.to_linear().clamped()
        values = [lin.red, lin.green, lin.blue] + ([lin.alpha] if use_alpha else [])
        return ", ".join(_raw(v, c.PRECISION_UNIT) for v in values)

    srgb = color.to_srgba().clamped()
    r, g, b, a = srgb.to_u8()
    with_alpha = use_alpha or srgb.alpha < c.UNIT

    if fmt is ColorFormat.HEX:
        return "#" + _hex_bytes(r, g, b, *([a] if with_alpha else []))
    elif fmt is ColorFormat.HEX_LITERAL:
        return "0x" + _hex_bytes(*([a] if with_alpha else []), r, g, b)
    elif fmt is ColorFormat.RGB:
        return f"rgb({r} {g} {b}{_css_alpha(srgb.alpha)})"
    elif fmt is ColorFormat.HSL:
        h, s, L = srgb_to_hsl(srgb.red, srgb.green, srgb.blue)
        h = _hue(h)
        return (
            f"hsl({_num(h, c.PRECISION_HUE)} {_num(s * c.PERCENT, c.PRECISION_PERCENT)}% "
            f"{_num(L * c.PERCENT, c.PRECISION_PERCENT)}%{_css_alpha(srgb.alpha)})"
        )
    elif fmt is ColorFormat.RAW_RGB:
        return ", ".join(str(v) for v in ((r, g, b, a) if use_alpha else (r, g, b)))
    elif fmt is ColorFormat.RAW_RGB_FLOAT:
        values = [srgb.red, srgb.green, srgb.blue] + ([srgb.alpha] if use_alpha else [])
        return ", ".join(_raw(v, c.PRECISION_UNIT) for v in values)

    raise ValueError(f"unsupported output format: '{fmt}'")


def format_color(
    color: Oklrch,
    fmt,
    use_alpha: bool = False,
    clip: bool = False,
    strategy: str = "chroma",
) -> str:
    """
    Format a canonical color.

    RGB-family outputs are always gamut mapped with `strategy` first.
    The oklch forms keep out-of-gamut values unless `clip` is set.
    """
    fmt = resolve_format(fmt)
    if clip or not fmt.is_oklch:
        color = map_to_gamut(color, strategy)
    return format_colorspace(fmt, color, use_alpha)


def to_packed_rgb(color: Oklrch, strategy: str = "chroma") -> int:
    """Gamut-mapped color packed as a 0xRRGGBB integer."""
    r, g, b, _ = map_to_gamut(color, strategy).to_srgba().to_u8()
    return (r << 16) | (g << 8) | b
