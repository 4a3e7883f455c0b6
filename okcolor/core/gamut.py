#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/core/gamut.py

"""
Gamut checks and gamut mapping for canonical Oklrch colors.

Strategies:
- chroma: keep Lr and hue, reduce chroma to the sRGB boundary (default)
- project: move along the line toward clamp(L, 0, 1), keeping the hue
"""

from . import config as c
from . import conversions as conv
from .color import LinearRgba, Oklab, Oklrch
from okcolor.shared.clamping import _clamp01


def in_gamut(color: Oklrch) -> bool:
    """True iff every linear sRGB channel of the color lies in [0, 1]."""
    return color.to_linear().in_gamut()


def _in_gamut_at(lightness_r: float, chroma: float, hue: float) -> bool:
    return in_gamut(Oklrch(lightness_r, chroma, hue))


def max_chroma(lightness_r: float, hue: float, upper: float = c.GAMUT_SEARCH_MAX_CHROMA) -> float:
    """
    Largest in-gamut chroma for a fixed Lr and hue, found by bisection.

    `upper` must be out of gamut for the search to be meaningful; the
    default is beyond the sRGB boundary for every hue.
    """
    lightness_r = _clamp01(lightness_r)
    if _in_gamut_at(lightness_r, upper, hue):
        return upper
    if not _in_gamut_at(lightness_r, 0.0, hue):
        return 0.0

    low, high = 0.0, upper
    for _ in range(c.GAMUT_MAP_BINARY_SEARCH_ITERATIONS):
        mid = (low + high) / c.DIV_2
        if _in_gamut_at(lightness_r, mid, hue):
            low = mid
        else:
            high = mid
    return low


def clip_chroma(color: Oklrch) -> Oklrch:
    """Reduce chroma at fixed Lr and hue until the color is inside sRGB."""
    if in_gamut(color):
        return color

    lightness_r = _clamp01(color.lightness)
    candidate = color.replace(lightness=lightness_r)
    if in_gamut(candidate):
        return candidate

    low, high = 0.0, min(color.chroma, c.GAMUT_SEARCH_MAX_CHROMA)
    if not _in_gamut_at(lightness_r, low, color.hue):
        return candidate.replace(chroma=0.0)

    for _ in range(c.GAMUT_MAP_BINARY_SEARCH_ITERATIONS):
        mid = (low + high) / c.DIV_2
        if _in_gamut_at(lightness_r, mid, color.hue):
            low = mid
        else:
            high = mid

    return candidate.replace(chroma=low)


def project_to_gamut(color: Oklrch) -> Oklrch:
    """
    Chroma-preserving projection toward clamp(L, 0, 1).

    Uses the analytic gamut intersection (cusp triangle plus one Halley
    step). When the projected color differs from the input by less than
    FALLBACK_EPS in every linear channel the input is returned unchanged.
    """
    rgba = color.to_linear()
    if rgba.in_gamut():
        return color

    lab = rgba.to_oklab()
    L = lab.lightness
    C = max(c.GAMUT_SEARCH_MIN_CHROMA, (lab.a * lab.a + lab.b * lab.b) ** 0.5)
    a_ = lab.a / C
    b_ = lab.b / C

    L0 = _clamp01(L)
    t = conv.find_gamut_intersection(a_, b_, L, C, L0)
    l_clipped = L0 * (c.UNIT - t) + t * L
    c_clipped = t * C

    result = Oklab(l_clipped, c_clipped * a_, c_clipped * b_, color.alpha).to_linear().clamped()
    if not is_fallback(rgba, result):
        return color
    return Oklrch.from_linear(result)


def is_fallback(original: LinearRgba, mapped: LinearRgba) -> bool:
    """True when mapping moved any linear channel by a visible amount."""
    pairs = zip(
        (original.red, original.green, original.blue),
        (mapped.red, mapped.green, mapped.blue),
    )
    return any(abs(a - b) > c.FALLBACK_EPS for a, b in pairs)


GAMUT_STRATEGIES = {
    "chroma": clip_chroma,
    "project": project_to_gamut,
}


def map_to_gamut(color: Oklrch, strategy: str = "chroma") -> Oklrch:
    """Return an in-gamut version of the color using the named strategy."""
    try:
        mapper = GAMUT_STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"unknown gamut strategy: '{strategy}'") from None
    return mapper(color)
