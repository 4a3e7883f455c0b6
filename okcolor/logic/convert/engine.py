#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/logic/convert/engine.py

import argparse
import random
import sys

from okcolor.core.color import EditMode
from okcolor.core.errors import ColorParseError
from okcolor.core.formats import ColorFormat
from okcolor.logic.adjust.filters import adjust
from okcolor.shared.logger import arrow, log
from .resolver import parse_color, random_color
from .renderer import render_convert_info


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Parse, edit, map and print one color."""
    if args.color is None:
        color = random_color(random.Random(args.seed), args.gamut)
        in_fmt, use_alpha = ColorFormat.HEX, False
    else:
        try:
            color, in_fmt, use_alpha = parse_color(args.color, args.from_format)
        except ColorParseError as err:
            log("error", f"{err}: '{err.text}'")
            sys.exit(2)

    try:
        color = adjust(
            color,
            EditMode(args.mode),
            hue=args.hue,
            lightness=args.lightness,
            chroma=args.chroma,
            saturation=args.saturation,
            value=args.value,
            alpha=args.alpha,
        )
    except ValueError as err:
        if parser is not None:
            parser.error(str(err))
        log("error", str(err))
        sys.exit(2)

    out_fmt = args.to_format or in_fmt
    out, mapped = render_convert_info(
        color,
        out_fmt,
        use_alpha=use_alpha or args.alpha_out,
        clip=args.clip,
        strategy=args.gamut,
    )

    if args.verbose:
        if mapped:
            log("warning", f"color is outside the sRGB gamut, mapped with the '{args.gamut}' strategy")
        src = args.color if args.color is not None else "random"
        print(f"{src} {arrow()} {out}")
    else:
        print(out)
