#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/main.py

import argparse
import sys

from okcolor import __version__
from okcolor.core.color import EditMode
from okcolor.core.gamut import GAMUT_STRATEGIES
from okcolor.logic.convert import engine
from okcolor.logic.convert.renderer import render_format_list
from okcolor.shared.logger import OkcolorArgumentParser
from okcolor.shared.sanitizer import INPUT_HANDLERS


def get_convert_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the okcolor command."""
    parser = OkcolorArgumentParser(
        prog="okcolor",
        description="okcolor: parse, edit and convert colors through Oklch",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"okcolor {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "--list-formats",
        action="store_true",
        help="list format names with their aliases and exit",
    )
    parser.add_argument(
        "color",
        nargs="?",
        default=None,
        help=(
            "color to convert, e.g. '#ff0000', '0x80ff0000', 'rgb(255 0 0 / 50%%)',\n"
            "'hsl(120, 50%%, 50%%)', 'oklch(0.6 0.2 30)' or '120, 120, 120'\n"
            "(a random color when omitted)"
        ),
    )

    # Format Group
    format_group = parser.add_argument_group("formats")
    format_group.add_argument(
        "-f",
        "--from-format",
        dest="from_format",
        type=INPUT_HANDLERS["from_format"],
        default=None,
        help="input format (detected when omitted)",
    )
    format_group.add_argument(
        "-t",
        "--to-format",
        dest="to_format",
        type=INPUT_HANDLERS["to_format"],
        default=None,
        help="output format (defaults to the input format)",
    )
    format_group.add_argument(
        "-a",
        "--alpha-out",
        dest="alpha_out",
        action="store_true",
        help="always include alpha in hex and raw outputs",
    )

    # Gamut Group
    gamut_group = parser.add_argument_group("gamut mapping")
    gamut_group.add_argument(
        "--clip",
        action="store_true",
        help="also gamut map oklch outputs (rgb-based outputs are always mapped)",
    )
    gamut_group.add_argument(
        "-g",
        "--gamut",
        default="chroma",
        choices=sorted(GAMUT_STRATEGIES),
        help="gamut mapping strategy (default: chroma)",
    )

    # Color Modifications Group
    mod_group = parser.add_argument_group("color modifications")
    mod_group.add_argument(
        "-m",
        "--mode",
        default=EditMode.OKLRCH.value,
        choices=[m.value for m in EditMode],
        help="editing space (default: oklrch)",
    )
    mod_group.add_argument(
        "--hue",
        type=INPUT_HANDLERS["float_signed_360"],
        default=0.0,
        help="rotate hue by degrees (-360 to 360)",
    )
    mod_group.add_argument(
        "--lightness",
        type=INPUT_HANDLERS["float_signed_1"],
        default=0.0,
        help="shift Lr lightness (-1 to 1, oklrch mode)",
    )
    mod_group.add_argument(
        "--chroma",
        type=INPUT_HANDLERS["float_signed_1"],
        default=0.0,
        help="shift chroma (-1 to 1, oklrch mode)",
    )
    mod_group.add_argument(
        "--saturation",
        type=INPUT_HANDLERS["float_signed_1"],
        default=0.0,
        help="shift Okhsv saturation (-1 to 1, okhsv mode)",
    )
    mod_group.add_argument(
        "--value",
        type=INPUT_HANDLERS["float_signed_1"],
        default=0.0,
        help="shift Okhsv value (-1 to 1, okhsv mode)",
    )
    mod_group.add_argument(
        "--alpha",
        type=INPUT_HANDLERS["float_0_1"],
        default=None,
        help="set alpha (0 to 1)",
    )

    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="print 'input -> output' and warn when gamut mapping was applied",
    )
    return parser


def main(argv=None) -> None:
    """Main entry point for okcolor CLI"""
    parser = get_convert_parser()
    args = parser.parse_args(argv)

    if args.list_formats:
        print(render_format_list())
        sys.exit(0)

    engine.run(args, parser)


if __name__ == "__main__":
    main()
