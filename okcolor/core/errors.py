#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: okcolor/core/errors.py

"""Color parsing errors."""


class ColorParseError(ValueError):
    """
    Base class for parse failures; carries the offset and the expectation.

    Grammars raise with character indexes; `parse_color` rebases them to
    UTF-8 byte offsets into the stripped input.
    """

    def __init__(self, expected: str, offset: int = 0, text: str = ""):
        super().__init__(expected, offset)
        self.expected = expected
        self.offset = offset
        self.text = text

    def __str__(self) -> str:
        return f"{self.expected} at offset {self.offset}"

    def to_byte_offset(self, text: str) -> None:
        """Convert the character offset into a byte offset within `text`."""
        self.offset = len(text[:self.offset].encode("utf-8"))
        self.text = text


class NoFormatMatched(ColorParseError):
    """Input does not have the structural shape of any grammar."""
    pass


class MalformedNumber(ColorParseError):
    """A numeric literal failed to lex as a float."""
    pass


class WrongArity(ColorParseError):
    """A functional format received the wrong number of arguments."""
    pass


class WrongDigitCount(ColorParseError):
    """A hex or hex literal form had an unsupported digit count."""
    pass


class UnknownFunction(ColorParseError):
    """Functional syntax with an unrecognized identifier."""
    pass


class UnknownFormatError(ValueError):
    """A format name or alias that does not resolve to a format tag."""
    pass
