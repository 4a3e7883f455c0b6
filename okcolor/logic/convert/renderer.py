#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/logic/convert/renderer.py

from typing import Tuple

from okcolor.core import config as c
from okcolor.core.color import Oklrch
from okcolor.core.formats import ColorFormat, resolve_format
from okcolor.core.gamut import is_fallback, map_to_gamut
from okcolor.shared.formatting import format_color


def needs_mapping(
    color: Oklrch,
    fmt: ColorFormat,
    clip: bool = False,
    strategy: str = "chroma",
) -> bool:
    """
    True when formatting `color` as `fmt` visibly moves it onto the sRGB gamut.

    Round-trip noise on colors such as #ff0000 stays below FALLBACK_EPS and
    does not count.
    """
    if fmt.is_oklch and not clip:
        return False
    mapped = map_to_gamut(color, strategy).to_linear().clamped()
    return is_fallback(color.to_linear(), mapped)


def render_convert_info(
    color: Oklrch,
    fmt,
    use_alpha: bool = False,
    clip: bool = False,
    strategy: str = "chroma",
) -> Tuple[str, bool]:
    """Compose the output text and report whether gamut mapping was applied."""
    fmt = resolve_format(fmt)
    text = format_color(color, fmt, use_alpha=use_alpha, clip=clip, strategy=strategy)
    return text, needs_mapping(color, fmt, clip, strategy)


def render_format_list() -> str:
    """One line per format: the canonical name followed by its aliases."""
    lines = []
    for fmt in ColorFormat:
        aliases = sorted(k for k, v in c.FORMAT_ALIASES.items() if v == fmt.value and k != fmt.value)
        suffix = f"  ({', '.join(aliases)})" if aliases else ""
        lines.append(f"{fmt.value}{suffix}")
    return "\n".join(lines)
