"""WCAG 2.1 relative luminance and contrast ratio.

Source: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
Formula: (L1 + 0.05) / (L2 + 0.05), L1 the lighter of the two luminances.
"""

from contrast_checker.core.types import RGB8

# WCAG 2.1 decoding threshold. Not the same as the 0.0031308 encode threshold.
_DECODE_THRESHOLD = 0.03928


def linearize(channel: int) -> float:
    """8-bit sRGB channel -> linear-light value in [0, 1]."""
    c = channel / 255.0
    if c <= _DECODE_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(colour: RGB8) -> float:
    r = linearize(colour.r)
    g = linearize(colour.g)
    b = linearize(colour.b)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def ratio_from_luminance(l1: float, l2: float) -> float:
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(fg: RGB8, bg: RGB8) -> float:
    """Contrast ratio in [1, 21]. Argument order does not matter."""
    return ratio_from_luminance(relative_luminance(fg), relative_luminance(bg))
