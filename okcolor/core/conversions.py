#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/core/conversions.py

import functools
import math
from typing import Tuple

from . import config as c


def _cbrt(v: float) -> float:
    """Real cube root that keeps the sign of negative inputs."""
    if v >= 0:
        return v ** c.OKLAB_CUBE_ROOT_EXP
    return -((-v) ** c.OKLAB_CUBE_ROOT_EXP)


def _mat3(m, x: float, y: float, z: float) -> Tuple[float, float, float]:
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


# ==========================================
# sRGB Transfer Function
# ==========================================


def srgb_encode(v: float) -> float:
    """Apply the sRGB gamma curve to a linear component (mirrored for negatives)."""
    if v < 0:
        return -srgb_encode(-v)
    if v <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * v
    return c.SRGB_DIVISOR * (v ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def srgb_decode(v: float) -> float:
    """Linearize a gamma-encoded sRGB component (mirrored for negatives)."""
    if v < 0:
        return -srgb_decode(-v)
    if v <= c.SRGB_TO_LINEAR_TH:
        return v / c.SRGB_SLOPE
    return ((v + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


# ==========================================
# OKLab / OKLCH
# ==========================================


def linear_srgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert linear sRGB to OKLab."""
    l_val, m_val, s_val = _mat3(c.M1_OKLAB, r, g, b)
    return _mat3(c.M2_OKLAB, _cbrt(l_val), _cbrt(m_val), _cbrt(s_val))


def oklab_to_linear_srgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to linear sRGB, without clamping."""
    l_, m_, s_ = _mat3(c.M2_OKLAB_INV, L, a, b)
    return _mat3(c.M1_OKLAB_INV, l_ ** 3, m_ ** 3, s_ ** 3)


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to OKLCH, hue in degrees [0, 360)."""
    chroma = math.hypot(a, b)
    turns = math.atan2(b, a) / (c.DIV_2 * math.pi)
    return L, chroma, normalize_hue(turns * c.HUE_MAX)


def oklch_to_oklab(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Convert OKLCH (hue in degrees) to OKLab."""
    angle = (hue / c.HUE_MAX) * c.DIV_2 * math.pi
    return L, chroma * math.cos(angle), chroma * math.sin(angle)


def normalize_hue(hue: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    h = hue % c.HUE_MAX
    # Tiny negative inputs round up to exactly 360.0
    return 0.0 if h >= c.HUE_MAX else h


# ==========================================
# Toe (perceptual lightness estimate Lr)
# ==========================================


def toe(L: float) -> float:
    """Map OKLab lightness L to the lightness estimate Lr."""
    x = c.TOE_K3 * L - c.TOE_K1
    return 0.5 * (x + math.sqrt(x * x + 4.0 * c.TOE_K2 * c.TOE_K3 * L))


def toe_inv(lr: float) -> float:
    """Map the lightness estimate Lr back to OKLab lightness L."""
    return (lr * (lr + c.TOE_K1)) / (c.TOE_K3 * (lr + c.TOE_K2))


# ==========================================
# Gamut Geometry (Source: Ottosson, "sRGB gamut clipping", 2021)
# ==========================================


def compute_max_saturation(a: float, b: float) -> float:
    """
    Maximum saturation S = C / L reachable in sRGB along the hue (a, b).

    `a` and `b` must be normalized so that a^2 + b^2 == 1. A polynomial
    estimate, chosen by which channel clips first, is refined by exactly
    one Halley step.
    """
    if c.MAX_SAT_RED_TEST[0] * a + c.MAX_SAT_RED_TEST[1] * b > c.UNIT:
        k0, k1, k2, k3, k4 = c.MAX_SAT_RED_K
        wl, wm, ws = c.M1_OKLAB_INV[0]
    elif c.MAX_SAT_GREEN_TEST[0] * a + c.MAX_SAT_GREEN_TEST[1] * b > c.UNIT:
        k0, k1, k2, k3, k4 = c.MAX_SAT_GREEN_K
        wl, wm, ws = c.M1_OKLAB_INV[1]
    else:
        k0, k1, k2, k3, k4 = c.MAX_SAT_BLUE_K
        wl, wm, ws = c.M1_OKLAB_INV[2]

    sat = k0 + k1 * a + k2 * b + k3 * a * a + k4 * a * b

    k_l = c.M2_OKLAB_INV[0][1] * a + c.M2_OKLAB_INV[0][2] * b
    k_m = c.M2_OKLAB_INV[1][1] * a + c.M2_OKLAB_INV[1][2] * b
    k_s = c.M2_OKLAB_INV[2][1] * a + c.M2_OKLAB_INV[2][2] * b

    l_ = 1.0 + sat * k_l
    m_ = 1.0 + sat * k_m
    s_ = 1.0 + sat * k_s

    l_val = l_ ** 3
    m_val = m_ ** 3
    s_val = s_ ** 3

    l_ds = 3.0 * k_l * l_ * l_
    m_ds = 3.0 * k_m * m_ * m_
    s_ds = 3.0 * k_s * s_ * s_

    l_ds2 = 6.0 * k_l * k_l * l_
    m_ds2 = 6.0 * k_m * k_m * m_
    s_ds2 = 6.0 * k_s * k_s * s_

    f = wl * l_val + wm * m_val + ws * s_val
    f1 = wl * l_ds + wm * m_ds + ws * s_ds
    f2 = wl * l_ds2 + wm * m_ds2 + ws * s_ds2

    return sat - f * f1 / (f1 * f1 - 0.5 * f * f2)


def find_cusp(a: float, b: float) -> Tuple[float, float]:
    """(L, C) of the most saturated in-gamut color for the normalized hue (a, b)."""
    s_cusp = compute_max_saturation(a, b)
    r, g, bl = oklab_to_linear_srgb(c.UNIT, s_cusp * a, s_cusp * b)
    l_cusp = _cbrt(c.UNIT / max(r, g, bl))
    return l_cusp, l_cusp * s_cusp


def find_gamut_intersection(a: float, b: float, l1: float, c1: float, l0: float) -> float:
    """
    Parameter t where the line from (l0, 0) to (l1, c1) leaves the gamut.

    The hue (a, b) must be normalized. The lower half of the gamut
    triangle is solved exactly; the upper half gets one Halley step.
    """
    l_cusp, c_cusp = find_cusp(a, b)

    if ((l1 - l0) * c_cusp - (l_cusp - l0) * c1) <= 0.0:
        return c_cusp * l0 / (c1 * l_cusp + c_cusp * (l0 - l1))

    t = c_cusp * (l0 - c.UNIT) / (c1 * (l_cusp - c.UNIT) + c_cusp * (l0 - l1))

    d_l = l1 - l0
    d_c = c1

    k_l = c.M2_OKLAB_INV[0][1] * a + c.M2_OKLAB_INV[0][2] * b
    k_m = c.M2_OKLAB_INV[1][1] * a + c.M2_OKLAB_INV[1][2] * b
    k_s = c.M2_OKLAB_INV[2][1] * a + c.M2_OKLAB_INV[2][2] * b

    l_dt = d_l + d_c * k_l
    m_dt = d_l + d_c * k_m
    s_dt = d_l + d_c * k_s

    L = l0 * (c.UNIT - t) + t * l1
    C = t * c1

    l_ = L + C * k_l
    m_ = L + C * k_m
    s_ = L + C * k_s

    lms = (l_ ** 3, m_ ** 3, s_ ** 3)
    lms_dt = (3.0 * l_dt * l_ * l_, 3.0 * m_dt * m_ * m_, 3.0 * s_dt * s_ * s_)
    lms_dt2 = (6.0 * l_dt * l_dt * l_, 6.0 * m_dt * m_dt * m_, 6.0 * s_dt * s_dt * s_)

    steps = []
    for row in c.M1_OKLAB_INV:
        f = row[0] * lms[0] + row[1] * lms[1] + row[2] * lms[2] - c.UNIT
        f1 = row[0] * lms_dt[0] + row[1] * lms_dt[1] + row[2] * lms_dt[2]
        f2 = row[0] * lms_dt2[0] + row[1] * lms_dt2[1] + row[2] * lms_dt2[2]
        u = f1 / (f1 * f1 - 0.5 * f * f2)
        steps.append(-f * u if u >= 0.0 else c.HALLEY_NO_ROOT)

    return t + min(steps)


def get_st_max(a: float, b: float) -> Tuple[float, float]:
    """Cusp slopes (S = C / L, T = C / (1 - L)) for the normalized hue (a, b)."""
    l_cusp, c_cusp = find_cusp(a, b)
    return c_cusp / l_cusp, c_cusp / (c.UNIT - l_cusp)


# ==========================================
# Okhsv (Source: Ottosson, "Okhsv and Okhsl", 2021)
# ==========================================


def okhsv_to_oklab(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert Okhsv (hue in turns, s and v in 0-1) to OKLab."""
    if v <= 0.0:
        return 0.0, 0.0, 0.0

    angle = c.DIV_2 * math.pi * h
    a_ = math.cos(angle)
    b_ = math.sin(angle)

    s_max, t_max = get_st_max(a_, b_)
    s0 = c.OKHSV_S0
    k = c.UNIT - s0 / s_max

    denom = s0 + t_max - t_max * k * s
    l_v = c.UNIT - s * s0 / denom
    c_v = s * t_max * s0 / denom

    L = v * l_v
    C = v * c_v

    l_vt = toe_inv(l_v)
    c_vt = c_v * l_vt / l_v

    l_new = toe_inv(L)
    C = C * l_new / L
    L = l_new

    r, g, bl = oklab_to_linear_srgb(l_vt, a_ * c_vt, b_ * c_vt)
    scale_l = _cbrt(c.UNIT / max(r, g, bl, 0.0))

    L = L * scale_l
    C = C * scale_l
    return L, C * a_, C * b_


def oklab_to_okhsv(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to Okhsv (hue in turns, s and v in 0-1)."""
    if L <= c.EPS:
        return 0.0, 0.0, 0.0

    C = math.hypot(a, b)
    if C > c.EPS:
        a_ = a / C
        b_ = b / C
    else:
        a_, b_ = c.UNIT, 0.0

    h = 0.5 + 0.5 * math.atan2(-b, -a) / math.pi

    s_max, t_max = get_st_max(a_, b_)
    s0 = c.OKHSV_S0
    k = c.UNIT - s0 / s_max

    t = t_max / (C + L * t_max)
    l_v = t * L
    c_v = t * C

    l_vt = toe_inv(l_v)
    c_vt = c_v * l_vt / l_v

    r, g, bl = oklab_to_linear_srgb(l_vt, a_ * c_vt, b_ * c_vt)
    scale_l = _cbrt(c.UNIT / max(r, g, bl, 0.0))

    L = L / scale_l
    C = C / scale_l

    lr = toe(L)
    C = C * lr / L
    L = lr

    v = L / l_v
    s = (s0 + t_max) * c_v / (t_max * s0 + t_max * k * c_v)
    return h % c.UNIT, s, v


# ==========================================
# HSL (gamma-encoded sRGB, normalized)
# ==========================================


def srgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert normalized sRGB to HSL (hue in degrees, s and l in 0-1)."""
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        return 0.0, 0.0, L
    denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
    s = 0.0 if abs(denom) < c.EPS else delta / denom
    if cmax == r:
        h = c.HUE_SECTOR * (((g - b) / delta) % c.HSL_HUE_MOD)
    elif cmax == g:
        h = c.HUE_SECTOR * ((b - r) / delta + 2.0)
    else:
        h = c.HUE_SECTOR * ((r - g) / delta + 4.0)
    return normalize_hue(h), s, L


def hsl_to_srgb(h: float, s: float, L: float) -> Tuple[float, float, float]:
    """Convert HSL (hue in degrees, s and l in 0-1) to normalized sRGB."""
    h = normalize_hue(h)
    if s == 0:
        return L, L, L
    chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    m = L - chroma / c.DIV_2
    if h < 60:
        r_p, g_p, b_p = chroma, x, 0.0
    elif h < 120:
        r_p, g_p, b_p = x, chroma, 0.0
    elif h < 180:
        r_p, g_p, b_p = 0.0, chroma, x
    elif h < 240:
        r_p, g_p, b_p = 0.0, x, chroma
    elif h < 300:
        r_p, g_p, b_p = x, 0.0, chroma
    else:
        r_p, g_p, b_p = chroma, 0.0, x
    return r_p + m, g_p + m, b_p + m


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
