"""Tests for contrast_checker.core.colorspace — OKLCH conversion and hex helpers."""

import pytest
from contrast_checker.core.colorspace import (
    hex_to_rgb8,
    oklch_to_rgb8,
    parse_oklch,
    rgb8_to_hex,
    to_rgb8,
)
from contrast_checker.core.types import ColourFormatError, InvalidHexError, PerceptualColor, RGB8


class TestRgb8:
    def test_iterates_as_tuple(self):
        assert tuple(RGB8(1, 2, 3)) == (1, 2, 3)

    def test_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            RGB8(256, 0, 0)
        with pytest.raises(ValueError):
            RGB8(0, -1, 0)

    def test_rejects_non_int(self):
        with pytest.raises(ValueError):
            RGB8(1.5, 0, 0)
        with pytest.raises(ValueError):
            RGB8(True, 0, 0)

    def test_is_immutable(self):
        colour = RGB8(1, 2, 3)
        with pytest.raises(AttributeError):
            colour.r = 5


class TestHexToRgb8:
    def test_white(self):
        assert hex_to_rgb8('#ffffff') == RGB8(255, 255, 255)

    def test_black(self):
        assert hex_to_rgb8('#000000') == RGB8(0, 0, 0)

    def test_blue600(self):
        assert hex_to_rgb8('#2563eb') == RGB8(37, 99, 235)

    def test_uppercase(self):
        assert hex_to_rgb8('#BE6E5F') == RGB8(190, 110, 95)

    def test_no_hash(self):
        assert hex_to_rgb8('ff0000') == RGB8(255, 0, 0)

    @pytest.mark.parametrize('value', ['invalid', '#fff', '#ff', '#ffffffff', '#gggggg', '', '##ffffff'])
    def test_invalid_hex_raises(self, value):
        with pytest.raises(InvalidHexError):
            hex_to_rgb8(value)

    def test_non_string_raises(self):
        with pytest.raises(InvalidHexError):
            hex_to_rgb8(0xFFFFFF)

    def test_invalid_hex_is_a_value_error(self):
        with pytest.raises(ValueError):
            hex_to_rgb8('nope')


class TestRgb8ToHex:
    def test_lowercase_with_hash(self):
        assert rgb8_to_hex(RGB8(190, 110, 95)) == '#be6e5f'

    def test_zero_padded(self):
        assert rgb8_to_hex(RGB8(255, 0, 16)) == '#ff0010'

    def test_round_trip_sampled(self):
        for r in range(0, 256, 15):
            for g in range(0, 256, 17):
                for b in range(0, 256, 51):
                    colour = RGB8(r, g, b)
                    assert hex_to_rgb8(rgb8_to_hex(colour)) == colour

    def test_round_trip_every_channel_value(self):
        for v in range(256):
            for colour in (RGB8(v, 0, 0), RGB8(0, v, 0), RGB8(0, 0, v)):
                assert hex_to_rgb8(rgb8_to_hex(colour)) == colour

    def test_canonicalises_case(self):
        assert rgb8_to_hex(hex_to_rgb8('#ABCDEF')) == '#abcdef'


class TestOklchToRgb8:
    def test_white(self):
        assert oklch_to_rgb8(PerceptualColor(1.0, 0.0, 0.0)) == RGB8(255, 255, 255)

    def test_black(self):
        assert oklch_to_rgb8(PerceptualColor(0.0, 0.0, 0.0)) == RGB8(0, 0, 0)

    def test_mid_grey(self):
        # oklch(50% 0 0) is #636363
        assert oklch_to_rgb8(PerceptualColor(0.5, 0.0, 0.0)) == RGB8(99, 99, 99)

    def test_achromatic_ignores_hue(self):
        assert oklch_to_rgb8(PerceptualColor(0.5, 0.0, 0.0)) == oklch_to_rgb8(PerceptualColor(0.5, 0.0, 271.0))

    def test_out_of_gamut_saturates(self):
        # very high chroma red sits far outside sRGB
        assert oklch_to_rgb8(PerceptualColor(0.7, 0.4, 30.0)) == RGB8(255, 0, 0)

    def test_lightness_above_one_clamps_to_white(self):
        assert oklch_to_rgb8(PerceptualColor(1.5, 0.0, 0.0)) == RGB8(255, 255, 255)

    def test_negative_lightness_clamps_to_black(self):
        assert oklch_to_rgb8(PerceptualColor(-0.2, 0.0, 0.0)) == RGB8(0, 0, 0)

    def test_channels_always_in_range(self):
        for lightness in (0.0, 0.25, 0.5, 0.75, 1.0):
            for chroma in (0.0, 0.1, 0.2, 0.37):
                for hue in range(0, 360, 45):
                    colour = oklch_to_rgb8(PerceptualColor(lightness, chroma, float(hue)))
                    assert all(0 <= c <= 255 for c in colour)
                    assert all(isinstance(c, int) for c in colour)

    def test_deterministic(self):
        colour = PerceptualColor(0.75, 0.15, 20.0)
        assert oklch_to_rgb8(colour) == oklch_to_rgb8(colour)

    def test_coral_is_reddish(self):
        coral = oklch_to_rgb8(PerceptualColor(0.75, 0.15, 20.0))
        assert coral.r > coral.g
        assert coral.r > coral.b

    def test_non_finite_raises(self):
        with pytest.raises(ColourFormatError):
            oklch_to_rgb8(PerceptualColor(float('nan'), 0.0, 0.0))


class TestParseOklch:
    def test_percent_lightness(self):
        assert parse_oklch('oklch(58% 0.08 200)') == PerceptualColor(0.58, 0.08, 200.0)

    def test_fraction_lightness_and_deg(self):
        assert parse_oklch('oklch(0.58 0.08 200deg)') == PerceptualColor(0.58, 0.08, 200.0)

    def test_alpha_ignored(self):
        assert parse_oklch('oklch(50% 0 0 / 0.5)') == PerceptualColor(0.5, 0.0, 0.0)

    def test_percent_chroma(self):
        assert parse_oklch('oklch(50% 50% 0)').chroma == pytest.approx(0.2)

    def test_hue_wraps(self):
        assert parse_oklch('oklch(50% 0.1 360)').hue == 0.0

    def test_case_and_whitespace(self):
        assert parse_oklch('  OKLCH( 75%  0.15  20 ) ') == PerceptualColor(0.75, 0.15, 20.0)

    @pytest.mark.parametrize('value', ['oklch(50%)', 'oklch(a b c)', 'rgb(1, 2, 3)', 'var(--color-primary)'])
    def test_invalid_raises(self, value):
        with pytest.raises(ColourFormatError):
            parse_oklch(value)


class TestToRgb8:
    def test_rgb8_passthrough(self):
        colour = RGB8(1, 2, 3)
        assert to_rgb8(colour) is colour

    def test_perceptual(self):
        assert to_rgb8(PerceptualColor(1.0, 0.0, 0.0)) == RGB8(255, 255, 255)

    def test_oklch_string(self):
        assert to_rgb8('oklch(100% 0 0)') == RGB8(255, 255, 255)

    def test_hex_string(self):
        assert to_rgb8('#1e1c1a') == RGB8(30, 28, 26)

    def test_css_variable_is_a_format_error(self):
        # unresolved CSS custom properties are neither hex nor oklch
        with pytest.raises(ColourFormatError):
            to_rgb8('var(--color-accent-coral)')

    def test_unsupported_type(self):
        with pytest.raises(ColourFormatError):
            to_rgb8((1, 2, 3))
