"""OKLCH -> sRGB conversion and hex helpers.

OKLCH is converted through OKLab and the LMS cone space to linear sRGB, then
gamma-encoded and quantised to 8 bits. Colours outside the sRGB gamut are
clamped channel by channel, never rejected: design tokens are allowed to sit
slightly outside the gamut and still produce the nearest displayable colour.

Hex parsing is strict. Anything that is not exactly six hex digits (with an
optional leading '#') raises InvalidHexError.
"""

import math
import re

import numpy as np

from contrast_checker.core.types import ColourFormatError, InvalidHexError, PerceptualColor, RGB8

# OKLab (L, a, b) -> non-linear LMS'
_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ],
    dtype=np.float64,
)

# linear LMS -> linear-light sRGB
_LMS_TO_LINEAR_SRGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ],
    dtype=np.float64,
)

# Encoding-side threshold (IEC 61966-2-1). Decoding uses WCAG's 0.03928, see luminance.py.
_ENCODE_THRESHOLD = 0.0031308

_HEX_RE = re.compile(r'#?([0-9a-fA-F]{6})')

_NUMBER = r'[-+]?(?:\d+(?:\.\d*)?|\.\d+)'
_OKLCH_RE = re.compile(
    rf'oklch\(\s*({_NUMBER})(%?)\s+({_NUMBER})(%?)\s+({_NUMBER})(deg)?\s*(?:/\s*{_NUMBER}%?\s*)?\)',
    re.IGNORECASE,
)


def oklch_to_linear_srgb(colour: PerceptualColor) -> np.ndarray:
    """Unclamped linear-light sRGB for an OKLCH colour (may fall outside [0, 1])."""
    hue = math.radians(colour.hue)
    lab = np.array(
        [colour.lightness, colour.chroma * math.cos(hue), colour.chroma * math.sin(hue)],
        dtype=np.float64,
    )
    lms = (_OKLAB_TO_LMS @ lab) ** 3
    return _LMS_TO_LINEAR_SRGB @ lms


def gamma_encode(linear: np.ndarray) -> np.ndarray:
    """Apply the sRGB transfer function per channel."""
    # np.where evaluates both branches, keep the power away from negatives
    curved = 1.055 * np.power(np.maximum(linear, _ENCODE_THRESHOLD), 1 / 2.4) - 0.055
    return np.where(linear <= _ENCODE_THRESHOLD, 12.92 * linear, curved)


def oklch_to_rgb8(colour: PerceptualColor) -> RGB8:
    """Convert OKLCH to 8-bit sRGB, saturating out-of-gamut channels."""
    encoded = gamma_encode(oklch_to_linear_srgb(colour))
    channels = np.clip(np.rint(encoded * 255.0), 0, 255)
    if np.isnan(channels).any():
        raise ColourFormatError(f'OKLCH coordinates are not finite: {colour}')
    r, g, b = (int(c) for c in channels)
    return RGB8(r, g, b)


def hex_to_rgb8(value: str) -> RGB8:
    """Parse '#rrggbb' or 'rrggbb' (any case) into RGB8."""
    if not isinstance(value, str):
        raise InvalidHexError(f'Hex colour must be a string, got {value!r}')
    m = _HEX_RE.fullmatch(value.strip())
    if not m:
        raise InvalidHexError(f'Invalid hex colour: {value!r} (expected #rrggbb)')
    digits = m.group(1)
    return RGB8(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb8_to_hex(colour: RGB8) -> str:
    """Canonical lowercase '#rrggbb'."""
    return f'#{colour.r:02x}{colour.g:02x}{colour.b:02x}'


def parse_oklch(text: str) -> PerceptualColor:
    """Parse CSS `oklch(L C H)`.

    L may be a percentage ('58%') or a fraction ('0.58'); C may be a
    percentage of 0.4 as in CSS Color 4. Hue may carry 'deg'. An alpha
    component ('/ 0.5') is accepted and ignored.
    """
    m = _OKLCH_RE.fullmatch(text.strip()) if isinstance(text, str) else None
    if not m:
        raise ColourFormatError(f'Invalid OKLCH colour: {text!r}')
    lightness = float(m.group(1))
    if m.group(2):
        lightness /= 100.0
    chroma = float(m.group(3))
    if m.group(4):
        chroma = chroma / 100.0 * 0.4
    hue = float(m.group(5)) % 360.0
    return PerceptualColor(lightness=lightness, chroma=chroma, hue=hue)


def to_rgb8(value: object) -> RGB8:
    """Coerce anything a token resolver may return into RGB8."""
    if isinstance(value, RGB8):
        return value
    if isinstance(value, PerceptualColor):
        return oklch_to_rgb8(value)
    if isinstance(value, str):
        text = value.strip()
        if text.lower().startswith('oklch('):
            return oklch_to_rgb8(parse_oklch(text))
        return hex_to_rgb8(text)
    raise ColourFormatError(f'Unsupported colour value: {value!r}')
