"""WCAG AA/AAA classification of a contrast ratio.

Thresholds:
- AA Large / UI components: >= 3.0
- AA Normal / AAA Large:    >= 4.5
- AAA Normal:               >= 7.0

The ratio is compared as-is. No rounding happens before the comparison, so
4.5 passes AA for normal text and 4.4999 does not.
"""

from contrast_checker.core.types import TextSize

_THRESHOLDS: dict[tuple[str, TextSize], float] = {
    ('AA', TextSize.NORMAL): 4.5,
    ('AA', TextSize.LARGE): 3.0,
    ('AAA', TextSize.NORMAL): 7.0,
    ('AAA', TextSize.LARGE): 4.5,
}


def threshold(level: str, size: TextSize = TextSize.NORMAL) -> float:
    """Minimum ratio for a conformance level ('AA' or 'AAA') and text size."""
    key = (level.upper(), size)
    if key not in _THRESHOLDS:
        raise ValueError(f'Unknown conformance level: {level!r}. Expected AA or AAA')
    return _THRESHOLDS[key]


def meets_aa(ratio: float, size: TextSize = TextSize.NORMAL) -> bool:
    return ratio >= threshold('AA', size)


def meets_aaa(ratio: float, size: TextSize = TextSize.NORMAL) -> bool:
    return ratio >= threshold('AAA', size)


def conformance_levels(ratio: float) -> dict[str, bool]:
    """All four verdicts, keyed 'AA', 'AA-large', 'AAA', 'AAA-large'."""
    return {
        'AA': meets_aa(ratio, TextSize.NORMAL),
        'AA-large': meets_aa(ratio, TextSize.LARGE),
        'AAA': meets_aaa(ratio, TextSize.NORMAL),
        'AAA-large': meets_aaa(ratio, TextSize.LARGE),
    }
