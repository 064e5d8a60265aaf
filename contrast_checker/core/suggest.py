"""Foreground adjustment search for failing colour pairs.

The background is treated as fixed. The foreground is pushed towards the end
of the luminance range furthest from the background: lightened on dark
backgrounds (luminance < 0.5), darkened on light ones. Each iteration moves
all three channels by `step`, clamped to [0, 255], for at most
`max_iterations` iterations.

An adjusted colour is only returned once its ratio has been verified against
the target. When the budget runs out (or the channels saturate) the result is
RECONSIDER_PAIRING with no colour, meaning no simple foreground tweak works and
the pairing itself needs an overlay or a different role.
"""

from contrast_checker.core.luminance import contrast_ratio, relative_luminance
from contrast_checker.core.types import Adjustment, AdjustmentAction, RGB8

DEFAULT_STEP = 10
DEFAULT_MAX_ITERATIONS = 20


def _shift(colour: RGB8, delta: int) -> RGB8:
    return RGB8(*(min(255, max(0, c + delta)) for c in colour))


def suggest_adjustment(
    fg: RGB8,
    bg: RGB8,
    target_ratio: float = 4.5,
    *,
    step: int = DEFAULT_STEP,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> Adjustment:
    """Search for the smallest stepped foreground change reaching `target_ratio`."""
    if not 1.0 <= target_ratio <= 21.0:
        raise ValueError(f'target_ratio must be within [1, 21], got {target_ratio}')
    if not 1 <= step <= 255:
        raise ValueError(f'step must be within [1, 255], got {step}')
    if max_iterations < 0:
        raise ValueError(f'max_iterations must be >= 0, got {max_iterations}')

    ratio = contrast_ratio(fg, bg)
    if ratio >= target_ratio:
        return Adjustment(action=AdjustmentAction.ALREADY_COMPLIANT, adjusted=None, ratio=ratio)

    lighten = relative_luminance(bg) < 0.5
    delta = step if lighten else -step
    candidate = fg
    iterations = 0
    while ratio < target_ratio and iterations < max_iterations:
        shifted = _shift(candidate, delta)
        if shifted == candidate:
            # saturated at 0 or 255, further steps change nothing
            break
        candidate = shifted
        ratio = contrast_ratio(candidate, bg)
        iterations += 1

    if ratio >= target_ratio:
        action = AdjustmentAction.LIGHTEN if lighten else AdjustmentAction.DARKEN
        return Adjustment(action=action, adjusted=candidate, ratio=ratio, iterations=iterations)
    return Adjustment(
        action=AdjustmentAction.RECONSIDER_PAIRING,
        adjusted=None,
        ratio=ratio,
        iterations=iterations,
    )
