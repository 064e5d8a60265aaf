"""Contrast ratio between two colours, with AA/AAA verdicts.

Colours may be hex ('#1e1c1a', case-insensitive, '#' optional) or CSS
OKLCH ('oklch(75% 0.15 20)'). Order does not matter: the ratio is symmetric.

Example:
    contrast-tool contrast '#be6e5f' '#1e1c1a'
    contrast-tool contrast 'oklch(75% 0.15 20)' 'oklch(15% 0.01 200)' --json
"""

import argparse
import json

from contrast_checker.core.colorspace import rgb8_to_hex, to_rgb8
from contrast_checker.core.conformance import conformance_levels
from contrast_checker.core.luminance import contrast_ratio
from contrast_checker.core.types import Command

command = Command(
    name='contrast',
    help='WCAG contrast ratio of two colours with AA/AAA verdicts.',
)


@command.arguments
def arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('fg', help='Foreground colour (hex or oklch(...))')
    parser.add_argument('bg', help='Background colour (hex or oklch(...))')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args: argparse.Namespace) -> int:
    fg = to_rgb8(args.fg)
    bg = to_rgb8(args.bg)
    ratio = contrast_ratio(fg, bg)
    levels = conformance_levels(ratio)

    if args.json:
        print(
            json.dumps(
                {'fg': rgb8_to_hex(fg), 'bg': rgb8_to_hex(bg), 'ratio': ratio, 'levels': levels},
                indent=2,
            )
        )
        return 0

    print(f'{rgb8_to_hex(fg)} on {rgb8_to_hex(bg)}: {ratio:.2f}:1')
    for level, passed in levels.items():
        print(f'  {level:<10} {"PASS" if passed else "FAIL"}')
    return 0
