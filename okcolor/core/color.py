#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/core/color.py

"""
Immutable color values.

`Oklrch` is the canonical editing representation. Gamma-encoded and
linear RGB are separate types so the two spaces are never mixed in
arithmetic. Every transform returns a new value.
"""

import dataclasses
import enum
from dataclasses import dataclass

from . import config as c
from . import conversions as conv
from okcolor.shared.clamping import _clamp01


@dataclass(frozen=True)
class Srgba:
    """Gamma-encoded (display) sRGB, channels nominally in [0, 1]."""
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_u8(cls, r: float, g: float, b: float, a: float = c.RGB_MAX) -> "Srgba":
        return cls(r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX, a / c.RGB_MAX)

    def to_linear(self) -> "LinearRgba":
        return LinearRgba(
            conv.srgb_decode(self.red),
            conv.srgb_decode(self.green),
            conv.srgb_decode(self.blue),
            self.alpha,
        )

    def clamped(self) -> "Srgba":
        return Srgba(*(_clamp01(v) for v in (self.red, self.green, self.blue, self.alpha)))

    def to_u8(self):
        """Round the clamped channels to 8-bit integers (r, g, b, a)."""
        return tuple(int(round(v * c.RGB_MAX)) for v in dataclasses.astuple(self.clamped()))


@dataclass(frozen=True)
class LinearRgba:
    """Linear-light sRGB, channels nominally in [0, 1]."""
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def to_srgb(self) -> Srgba:
        return Srgba(
            conv.srgb_encode(self.red),
            conv.srgb_encode(self.green),
            conv.srgb_encode(self.blue),
            self.alpha,
        )

    def to_oklab(self) -> "Oklab":
        return Oklab(*conv.linear_srgb_to_oklab(self.red, self.green, self.blue), self.alpha)

    def in_gamut(self) -> bool:
        return all(0.0 <= v <= 1.0 for v in (self.red, self.green, self.blue))

    def clamped(self) -> "LinearRgba":
        return LinearRgba(_clamp01(self.red), _clamp01(self.green), _clamp01(self.blue), self.alpha)


@dataclass(frozen=True)
class Oklab:
    lightness: float
    a: float
    b: float
    alpha: float = 1.0

    def to_linear(self) -> LinearRgba:
        return LinearRgba(*conv.oklab_to_linear_srgb(self.lightness, self.a, self.b), self.alpha)

    def to_oklch(self) -> "Oklch":
        return Oklch(*conv.oklab_to_oklch(self.lightness, self.a, self.b), self.alpha)


@dataclass(frozen=True)
class Oklch:
    """Polar OKLab with the raw OKLab lightness (CSS `oklch()` semantics)."""
    lightness: float
    chroma: float
    hue: float
    alpha: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "hue", conv.normalize_hue(self.hue))

    def to_oklab(self) -> Oklab:
        return Oklab(*conv.oklch_to_oklab(self.lightness, self.chroma, self.hue), self.alpha)

    def to_oklrch(self) -> "Oklrch":
        return Oklrch(conv.toe(self.lightness), self.chroma, self.hue, self.alpha)


@dataclass(frozen=True)
class Oklrch:
    """Oklch with the toe-corrected lightness estimate Lr."""
    lightness: float
    chroma: float
    hue: float
    alpha: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "hue", conv.normalize_hue(self.hue))

    @classmethod
    def from_srgba(cls, color: Srgba) -> "Oklrch":
        return cls.from_linear(color.to_linear())

    @classmethod
    def from_linear(cls, color: LinearRgba) -> "Oklrch":
        return color.to_oklab().to_oklch().to_oklrch()

    def to_oklch(self) -> Oklch:
        return Oklch(conv.toe_inv(self.lightness), self.chroma, self.hue, self.alpha)

    def to_oklab(self) -> Oklab:
        return self.to_oklch().to_oklab()

    def to_linear(self) -> LinearRgba:
        return self.to_oklab().to_linear()

    def to_srgba(self) -> Srgba:
        return self.to_linear().to_srgb()

    def to_okhsv(self) -> "Okhsv":
        lab = self.to_oklab()
        _, s, v = conv.oklab_to_okhsv(lab.lightness, lab.a, lab.b)
        # Keep the stored hue: it is exact, and defined even at zero chroma
        return Okhsv(self.hue, s, v, self.alpha)

    def replace(self, **changes) -> "Oklrch":
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class Okhsv:
    """Okhsv with hue in degrees, saturation and value in [0, 1]."""
    hue: float
    saturation: float
    value: float
    alpha: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "hue", conv.normalize_hue(self.hue))

    def to_oklab(self) -> Oklab:
        L, a, b = conv.okhsv_to_oklab(self.hue / c.HUE_MAX, self.saturation, self.value)
        return Oklab(L, a, b, self.alpha)

    def to_oklrch(self) -> Oklrch:
        lch = self.to_oklab().to_oklch()
        return Oklrch(conv.toe(lch.lightness), lch.chroma, self.hue, self.alpha)

    def replace(self, **changes) -> "Okhsv":
        return dataclasses.replace(self, **changes)


class EditMode(enum.Enum):
    """Editing projection chosen once per editing session."""
    OKLRCH = "oklrch"
    OKHSV = "okhsv"
