"""Suggest a foreground adjustment that reaches a target contrast ratio.

Keeps the background fixed and steps all foreground channels towards white
(dark backgrounds) or black (light backgrounds) until the target is met or
the iteration budget runs out. Only a colour that has been verified against
the target is ever printed; otherwise the pairing needs an overlay or a
different role.

Target: --target R, or --level AA|AAA with --large for large text.
Step size and iteration cap default to $CONTRAST_SUGGEST_STEP (10) and
$CONTRAST_SUGGEST_MAX_ITERATIONS (20).

Example:
    contrast-tool suggest '#777777' '#ffffff'
    contrast-tool suggest '#be6e5f' '#1e1c1a' --level AAA
    contrast-tool suggest '#808080' '#808080' --step 5 --max-iterations 60 --json
"""

import argparse
import json

from contrast_checker.core.colorspace import rgb8_to_hex, to_rgb8
from contrast_checker.core.conformance import threshold
from contrast_checker.core.env import int_setting
from contrast_checker.core.report import describe_adjustment
from contrast_checker.core.suggest import DEFAULT_MAX_ITERATIONS, DEFAULT_STEP, suggest_adjustment
from contrast_checker.core.types import Command, TextSize

command = Command(
    name='suggest',
    help='Search for a lighter/darker foreground that meets a target ratio.',
)


@command.arguments
def arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('fg', help='Foreground colour (hex or oklch(...))')
    parser.add_argument('bg', help='Background colour (hex or oklch(...))')
    target = parser.add_mutually_exclusive_group()
    target.add_argument('-t', '--target', type=float, default=None, metavar='R', help='Target ratio')
    target.add_argument('-l', '--level', choices=['AA', 'AAA'], default=None, help='Target a WCAG level')
    parser.add_argument('--large', action='store_true', help='Large text thresholds (with --level)')
    parser.add_argument('--step', type=int, default=None, metavar='N', help='Channel step per iteration')
    parser.add_argument('--max-iterations', type=int, default=None, metavar='N', help='Iteration cap')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


def _target(args: argparse.Namespace) -> float:
    if args.target is not None:
        return args.target
    size = TextSize.LARGE if args.large else TextSize.NORMAL
    return threshold(args.level or 'AA', size)


@command.run
def run(args: argparse.Namespace) -> int:
    fg = to_rgb8(args.fg)
    bg = to_rgb8(args.bg)
    step = args.step if args.step is not None else int_setting('SUGGEST_STEP', DEFAULT_STEP)
    cap = args.max_iterations
    if cap is None:
        cap = int_setting('SUGGEST_MAX_ITERATIONS', DEFAULT_MAX_ITERATIONS)
    target = _target(args)

    adjustment = suggest_adjustment(fg, bg, target, step=step, max_iterations=cap)

    if args.json:
        obj = {
            'fg': rgb8_to_hex(fg),
            'bg': rgb8_to_hex(bg),
            'target': target,
            'action': adjustment.action.value,
            'adjusted': rgb8_to_hex(adjustment.adjusted) if adjustment.adjusted else None,
            'ratio': adjustment.ratio,
            'iterations': adjustment.iterations,
        }
        print(json.dumps(obj, indent=2))
        return 0

    print(f'{rgb8_to_hex(fg)} on {rgb8_to_hex(bg)} (target {target}:1): {describe_adjustment(adjustment)}')
    return 0
