#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/shared/logger.py

import argparse
import sys

from okcolor.core import config as c


def _styled(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def log(level: str, message: str) -> None:
    """Print `[level] message`; info and success go to stdout, the rest to stderr."""
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    if not _styled(stream):
        print(f"[{level}] {message}", file=stream)
        return
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


def arrow() -> str:
    """The `->` separator used by verbose output, colored on terminals."""
    if not _styled(sys.stdout):
        return "->"
    return f"{c.MSG_BOLD_COLORS['info']}->{c.RESET}"


class OkcolorArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Overrides the default error method to route usage errors through
        `log`, then exits with the CLI error code 2.
        """
        log("error", message)
        sys.exit(2)
