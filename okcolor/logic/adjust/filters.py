#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/logic/adjust/filters.py

from typing import Optional

from okcolor.core.color import EditMode, Oklrch
from okcolor.shared.clamping import _clamp01

# Channels each edit mode owns; hue is shared by both
MODE_CHANNELS = {
    EditMode.OKLRCH: ("lightness", "chroma"),
    EditMode.OKHSV: ("saturation", "value"),
}


def rotate_hue(color: Oklrch, degrees: float) -> Oklrch:
    """Shift hue by `degrees`, wrapping into [0, 360)."""
    return color.replace(hue=color.hue + degrees)


def shift_lightness(color: Oklrch, delta: float) -> Oklrch:
    return color.replace(lightness=_clamp01(color.lightness + delta))


def shift_chroma(color: Oklrch, delta: float) -> Oklrch:
    return color.replace(chroma=max(0.0, color.chroma + delta))


def shift_okhsv(color: Oklrch, saturation: float = 0.0, value: float = 0.0) -> Oklrch:
    """Edit saturation / value in Okhsv, both clamped to [0, 1]."""
    hsv = color.to_okhsv()
    hsv = hsv.replace(
        saturation=_clamp01(hsv.saturation + saturation),
        value=_clamp01(hsv.value + value),
    )
    return hsv.to_oklrch()


def set_alpha(color: Oklrch, alpha: float) -> Oklrch:
    return color.replace(alpha=_clamp01(alpha))


def adjust(
    color: Oklrch,
    mode: EditMode = EditMode.OKLRCH,
    hue: float = 0.0,
    lightness: float = 0.0,
    chroma: float = 0.0,
    saturation: float = 0.0,
    value: float = 0.0,
    alpha: Optional[float] = None,
) -> Oklrch:
    """
    Apply deltas in the projection selected by `mode` and return a new color.

    Oklrch mode edits lightness and chroma, Okhsv mode edits saturation and
    value. Passing a non-zero delta that belongs to the other mode raises
    ValueError. `alpha` is an absolute override.
    """
    mode = EditMode(mode)
    deltas = {
        "lightness": lightness,
        "chroma": chroma,
        "saturation": saturation,
        "value": value,
    }
    for other, channels in MODE_CHANNELS.items():
        if other is mode:
            continue
        for name in channels:
            if deltas[name]:
                raise ValueError(f"'{name}' cannot be edited in {mode.value} mode")

    out = color
    if hue:
        out = rotate_hue(out, hue)
    if mode is EditMode.OKLRCH:
        if lightness:
            out = shift_lightness(out, lightness)
        if chroma:
            out = shift_chroma(out, chroma)
    elif saturation or value:
        out = shift_okhsv(out, saturation, value)
    if alpha is not None:
        out = set_alpha(out, alpha)
    return out
