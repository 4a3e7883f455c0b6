"""Tests for format detection and the color grammars."""

import pytest

from okcolor.core.color import LinearRgba, Oklch, Srgba
from okcolor.core.errors import (
    ColorParseError,
    MalformedNumber,
    NoFormatMatched,
    UnknownFunction,
    WrongArity,
    WrongDigitCount,
)
from okcolor.core.formats import ColorFormat
from okcolor.core.gamut import in_gamut
from okcolor.logic.convert.resolver import parse_color
from okcolor.shared import parser


def _u8(parsed):
    return parsed.color.to_srgba().to_u8()


class TestDetection:
    """Format detection order."""

    @pytest.mark.parametrize("text, fmt", [
        ("#ff0000", ColorFormat.HEX),
        ("0xff0000", ColorFormat.HEX_LITERAL),
        ("0Xff0000", ColorFormat.HEX_LITERAL),
        ("rgb(255, 0, 0)", ColorFormat.RGB),
        ("RGBA(255 0 0 / 1)", ColorFormat.RGB),
        ("hsl(0, 100%, 50%)", ColorFormat.HSL),
        ("hsla(0 100% 50% / 0.5)", ColorFormat.HSL),
        ("oklch(0.6 0.2 30)", ColorFormat.OKLCH),
        ("255, 0, 0", ColorFormat.RAW_RGB),
        ("1 0 0", ColorFormat.RAW_RGB_FLOAT),
    ])
    def test_detected_format(self, text, fmt):
        assert parse_color(text).format is fmt

    def test_surrounding_whitespace_ignored(self):
        assert _u8(parse_color("  #ff0000\n")) == (255, 0, 0, 255)

    def test_unrecognized(self):
        with pytest.raises(NoFormatMatched):
            parse_color("red")

    def test_error_records_text(self):
        with pytest.raises(ColorParseError) as exc:
            parse_color("  rgb(1, 2)  ")
        assert exc.value.text == "rgb(1, 2)"

    def test_error_message_has_offset(self):
        with pytest.raises(NoFormatMatched) as exc:
            parse_color("rgb(1, 2, 3")
        assert str(exc.value) == "expected ')' at offset 11"
        assert exc.value.offset == 11


class TestHex:
    """#RGB, #RGBA, #RRGGBB, #RRGGBBAA."""

    def test_red(self):
        """Red lands near Lr 0.568, C 0.258, H 29.2."""
        parsed = parse_color("#ff0000")
        assert parsed.color.lightness == pytest.approx(0.568, abs=1e-3)
        assert parsed.color.chroma == pytest.approx(0.258, abs=1e-3)
        assert parsed.color.hue == pytest.approx(29.2, abs=0.1)
        assert parsed.use_alpha is False
        assert parsed.color.alpha == 1.0

    def test_short_forms_duplicate_nibbles(self):
        assert _u8(parse_color("#f00")) == (255, 0, 0, 255)
        assert _u8(parse_color("#f008")) == (255, 0, 0, 0x88)

    def test_alpha_is_last_byte(self):
        parsed = parse_color("#FF000080")
        assert _u8(parsed) == (255, 0, 0, 128)
        assert parsed.use_alpha is True

    def test_case_insensitive(self):
        assert _u8(parse_color("#AbCdEf")) == _u8(parse_color("#abcdef"))

    @pytest.mark.parametrize("text", ["#", "#12", "#12345", "#1234567", "#123456789"])
    def test_wrong_digit_count(self, text):
        with pytest.raises(WrongDigitCount) as exc:
            parse_color(text)
        assert exc.value.offset == 1

    def test_non_hex_digit(self):
        with pytest.raises(NoFormatMatched) as exc:
            parse_color("#12345g")
        assert exc.value.offset == 6


class TestHexLiteral:
    """0xRRGGBB and 0xAARRGGBB."""

    def test_same_as_hex(self):
        assert _u8(parse_color("0xff0000")) == _u8(parse_color("#ff0000"))

    def test_leading_alpha_byte(self):
        parsed = parse_color("0x80ff0000")
        assert _u8(parsed) == (255, 0, 0, 0x80)
        assert parsed.use_alpha is True

    @pytest.mark.parametrize("text", ["0xfff", "0xffff", "0x1234567"])
    def test_wrong_digit_count(self, text):
        with pytest.raises(WrongDigitCount) as exc:
            parse_color(text)
        assert exc.value.offset == 2


class TestRgb:
    """rgb() / rgba()."""

    def test_black_defaults_alpha(self):
        parsed = parse_color("rgb(0, 0, 0)")
        assert parsed.color.alpha == 1.0
        assert parsed.use_alpha is False

    @pytest.mark.parametrize("text", [
        "rgb(255, 0, 0)",
        "rgb(255 0 0)",
        "rgb( 255 , 0 , 0 )",
        "rgb(100%, 0%, 0%)",
        "rgba(255, 0, 0, 1)",
        "rgb(255 0 0 / 100%)",
    ])
    def test_red_spellings(self, text):
        assert _u8(parse_color(text)) == (255, 0, 0, 255)

    def test_slash_alpha(self):
        parsed = parse_color("rgb(255 0 0 / 50%)")
        assert parsed.color.alpha == pytest.approx(0.5)
        assert parsed.use_alpha is True

    def test_comma_alpha(self):
        assert parse_color("rgba(255, 0, 0, 0.25)").color.alpha == pytest.approx(0.25)

    def test_out_of_range_accepted(self):
        value, _ = parser.parse_rgb_string("rgb(300, -20, 0)")
        assert value.red == pytest.approx(300 / 255)
        assert value.green == pytest.approx(-20 / 255)

    @pytest.mark.parametrize("text", ["rgb()", "rgb(1, 2)", "rgb(1, 2, 3, 4, 5)", "rgb(1 2 / 3)", "rgb(1 2 3 / 4 5)"])
    def test_wrong_arity(self, text):
        with pytest.raises(WrongArity) as exc:
            parse_color(text)
        assert exc.value.offset == 3

    def test_malformed_number(self):
        with pytest.raises(MalformedNumber) as exc:
            parse_color("rgb(1, 2, x)")
        assert exc.value.offset == 10

    def test_empty_argument(self):
        with pytest.raises(MalformedNumber) as exc:
            parse_color("rgb(1,,2)")
        assert exc.value.offset == 6

    def test_non_finite(self):
        with pytest.raises(MalformedNumber):
            parse_color("rgb(1e999, 0, 0)")

    @pytest.mark.parametrize("text", ["rgb(1, 2, 3", "rgb(1, 2, 3) x", "rgb(1 2 3 / 1 / 1)"])
    def test_structure(self, text):
        with pytest.raises(NoFormatMatched):
            parse_color(text)


class TestHsl:
    """hsl() / hsla()."""

    def test_green(self):
        assert _u8(parse_color("hsl(120, 100%, 50%)")) == (0, 255, 0, 255)

    def test_bare_fractions(self):
        assert _u8(parse_color("hsl(120 1 0.5)")) == (0, 255, 0, 255)

    @pytest.mark.parametrize("hue", ["180", "180deg", "0.5turn", "200grad", "3.141592653589793rad", "-180"])
    def test_angle_units(self, hue):
        assert _u8(parse_color(f"hsl({hue} 100% 50%)")) == (0, 255, 255, 255)

    def test_bad_unit(self):
        with pytest.raises(MalformedNumber):
            parse_color("hsl(120px, 100%, 50%)")


class TestOklch:
    """oklch() keeps full precision."""

    def test_returns_oklch(self):
        value, use_alpha = parser.parse_oklch_string("oklch(0.6 0.1 30 / 0.5)")
        assert value == Oklch(0.6, 0.1, 30.0, 0.5)
        assert use_alpha is True

    def test_out_of_range_lightness(self):
        parsed = parse_color("oklch(1.5 0.1 0)")
        assert parsed.color.to_oklch().lightness == pytest.approx(1.5, abs=1e-12)
        assert not in_gamut(parsed.color)

    def test_percentages(self):
        value, _ = parser.parse_oklch_string("oklch(60% 50% 30)")
        assert value.lightness == pytest.approx(0.6)
        assert value.chroma == pytest.approx(0.2)

    def test_hue_wraps(self):
        value, _ = parser.parse_oklch_string("oklch(0.5 0.1 -30)")
        assert value.hue == pytest.approx(330.0)

    def test_unknown_function(self):
        with pytest.raises(UnknownFunction) as exc:
            parse_color("lab(50 10 10)")
        assert exc.value.offset == 0


class TestBareList:
    """Bare numeric lists and the whole-tuple range rule."""

    def test_any_value_above_one_means_bytes(self):
        parsed = parse_color("120, 120, 120, 255")
        assert parsed.format is ColorFormat.RAW_RGB
        assert _u8(parsed) == (120, 120, 120, 255)
        assert parsed.use_alpha is True

    def test_all_unit_values_mean_floats(self):
        parsed = parse_color("0.5, 0.5, 0.5")
        srgb = parsed.color.to_srgba()
        assert parsed.format is ColorFormat.RAW_RGB_FLOAT
        assert srgb.red == pytest.approx(0.5, abs=1e-6)
        r = srgb.red * 255
        assert 127.0 <= r <= 128.0

    def test_mixed_tuple_is_all_bytes(self):
        """1, 1, 300 reads every channel as 0-255."""
        value, _, fmt = parser.parse_raw_auto("1, 1, 300")
        assert fmt is ColorFormat.RAW_RGB
        assert value.red == pytest.approx(1 / 255)
        assert value.blue == pytest.approx(300 / 255)

    def test_spaces_only(self):
        assert _u8(parse_color("255 128 0")) == (255, 128, 0, 255)

    @pytest.mark.parametrize("text", ["1 2", "1, 2, 3, 4, 5", "1,, 2, 3", "1, 2, x"])
    def test_rejected(self, text):
        with pytest.raises(NoFormatMatched):
            parse_color(text)


class TestExplicitFormat:
    """A given input format skips detection."""

    def test_linear(self):
        value, _ = parser.parse_raw_rgb_linear_string("1, 0, 0")
        assert value == LinearRgba(1.0, 0.0, 0.0, 1.0)
        assert _u8(parse_color("1, 0, 0", ColorFormat.RAW_RGB_LINEAR)) == (255, 0, 0, 255)

    def test_linear_mid_gray_is_lighter(self):
        assert _u8(parse_color("0.5 0.5 0.5", "linear"))[0] == 188

    def test_raw_oklch(self):
        parsed = parse_color("0.6, 0.1, 30", ColorFormat.RAW_OKLCH)
        assert parsed.color.to_oklch().lightness == pytest.approx(0.6)
        assert parsed.color.hue == pytest.approx(30.0)

    def test_raw_rgb_forced_for_small_values(self):
        assert _u8(parse_color("1, 1, 1", ColorFormat.RAW_RGB)) == (1, 1, 1, 255)

    def test_raw_float(self):
        value, _ = parser.parse_raw_rgb_float_string("1, 0.5, 0")
        assert value == Srgba(1.0, 0.5, 0.0)

    def test_mismatched_grammar(self):
        with pytest.raises(NoFormatMatched):
            parse_color("#ff0000", ColorFormat.RGB)

    def test_function_mismatch(self):
        with pytest.raises(NoFormatMatched):
            parse_color("hsl(0 100% 50%)", ColorFormat.RGB)

    def test_explicit_raw_keeps_malformed_number(self):
        with pytest.raises(MalformedNumber) as exc:
            parse_color("1, 2, x", ColorFormat.RAW_RGB)
        assert exc.value.offset == 6

    def test_explicit_raw_arity(self):
        with pytest.raises(WrongArity):
            parse_color("1, 2", ColorFormat.RAW_RGB)


class TestOffsets:
    """Number lexing is ASCII-only and offsets count UTF-8 bytes."""

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(MalformedNumber) as exc:
            parse_color("rgb(١, 2, 3)")
        assert exc.value.offset == 4

    def test_bare_list_non_ascii_digits(self):
        with pytest.raises(NoFormatMatched):
            parse_color("١, 2, 3")

    def test_offset_counts_bytes(self):
        with pytest.raises(MalformedNumber) as exc:
            parse_color("1,\u00a02, x", ColorFormat.RAW_RGB)
        assert exc.value.offset == 7
        assert str(exc.value).endswith("at offset 7")
