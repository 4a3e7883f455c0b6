#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/core/config.py

import math

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
PERCENT = 100.0                    # Divisor to convert percentages to fractions

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space
SRGB_TO_LINEAR_TH = LINEAR_TO_SRGB_TH * SRGB_SLOPE  # Encoded image of the linear threshold

# Constants for OKLab color space conversions (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0     # Power exponent for perceptual LMS non-linearity

# Linear sRGB to LMS matrix (Source: Björn Ottosson, 2020)
M1_OKLAB = (
    (0.4122214708, 0.5363325363, 0.0514459929),   # Long-wavelength (L) response
    (0.2119034982, 0.6806995451, 0.1073969566),   # Medium-wavelength (M) response
    (0.0883024619, 0.2817188376, 0.6299787005),   # Short-wavelength (S) response
)

# LMS' to Lab matrix (Perceptual lightness and opponency)
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),  # Lightness (L)
    (1.9779984951, -2.4285922050, 0.4505937099),  # 'a' (green-red) axis
    (0.0259040371, 0.7827717662, -0.8086757660),  # 'b' (blue-yellow) axis
)

# OKLab to LMS' matrix (Inverse stage part 1, the L column is all ones)
M2_OKLAB_INV = (
    (1.0, 0.3963377774, 0.2158037573),            # L' channel
    (1.0, -0.1055613458, -0.0638541728),          # M' channel
    (1.0, -0.0894841775, -1.2914855480),          # S' channel
)

# LMS to linear sRGB matrix (Inverse stage part 2)
M1_OKLAB_INV = (
    (4.0767416621, -3.3077115913, 0.2309699292),  # Linear Red
    (-1.2684380046, 2.6097574011, -0.3413193965), # Linear Green
    (-0.0041960863, -0.7034186147, 1.7076147010), # Linear Blue
)

# Toe function for the perceptual lightness estimate Lr (Source: Ottosson, "Okhsv and Okhsl", 2021)
TOE_K1 = 0.206                              # Curvature of the toe near black
TOE_K2 = 0.03                               # Offset keeping the toe finite at L = 0
TOE_K3 = (UNIT + TOE_K1) / (UNIT + TOE_K2)  # Scale making toe(1) == 1

# Maximum saturation polynomial per clipping channel (k0..k4) and its LMS weights (wl, wm, ws)
MAX_SAT_RED_TEST = (-1.88170328, -0.80936493)   # a, b weights: red goes below zero first when > 1
MAX_SAT_GREEN_TEST = (1.81444104, -1.19445276)  # a, b weights: green goes below zero first when > 1
MAX_SAT_RED_K = (1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245)
MAX_SAT_GREEN_K = (0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204)
MAX_SAT_BLUE_K = (1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167)

# Okhsv construction constant (Source: Ottosson, "Okhsv and Okhsl", 2021)
OKHSV_S0 = 0.5                     # Saturation of the fixed triangle edge in Okhsv

# ==========================================
# Gamut Mapping
# ==========================================

GAMUT_MAP_BINARY_SEARCH_ITERATIONS = 48  # Bisection steps for fixed-lightness chroma reduction
GAMUT_SEARCH_MAX_CHROMA = 0.5             # Chroma outside sRGB for every hue; upper bound of the bisection
GAMUT_SEARCH_MIN_CHROMA = 1e-5           # Floor for the chroma used to normalize the hue direction
FALLBACK_EPS = 0.003                     # Per-channel linear difference considered visibly unchanged
HALLEY_NO_ROOT = 1e30                    # Step assigned to a channel whose Halley update diverges

# Random colors (Oklrch space)
RANDOM_LIGHTNESS = (0.4, 0.8)
RANDOM_CHROMA = (0.05, 0.2)

# ==========================================
# Text Formats
# ==========================================

HEX_DIGIT_COUNTS = (3, 4, 6, 8)          # Accepted digit counts after '#'
HEX_LITERAL_DIGIT_COUNTS = (6, 8)        # Accepted digit counts after '0x'
OKLCH_CHROMA_PERCENT_MAX = 0.4           # Chroma represented by 100% in oklch()

# Angle units accepted on hue arguments, as degrees per unit
ANGLE_UNITS = {
    "deg": 1.0,
    "grad": 0.9,
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}

# Decimal places used when rendering numbers
PRECISION_UNIT = 4                 # Lightness, chroma and 0-1 channels
PRECISION_HUE = 2                  # Hue angles
PRECISION_PERCENT = 2              # HSL saturation and lightness percentages
PRECISION_ALPHA_PERCENT = 1        # CSS alpha percentage

# Format aliases accepted on the command line
FORMAT_ALIASES = {
    'hex': 'hex',
    '#': 'hex',
    'hex_literal': 'hex_literal',
    'hexliteral': 'hex_literal',
    '0x': 'hex_literal',
    'rgb': 'rgb',
    'rgba': 'rgb',
    'hsl': 'hsl',
    'hsla': 'hsl',
    'oklch': 'oklch',
    'raw_rgb': 'raw_rgb',
    'raw': 'raw_rgb',
    'raw_rgb_float': 'raw_rgb_float',
    'float': 'raw_rgb_float',
    'raw_rgb_linear': 'raw_rgb_linear',
    'linear': 'raw_rgb_linear',
    'raw_oklch': 'raw_oklch',
}

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
