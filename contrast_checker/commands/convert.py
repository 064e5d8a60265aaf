"""Convert a colour to 8-bit sRGB and show its relative luminance.

Accepts hex or CSS OKLCH. OKLCH colours outside the sRGB gamut are clamped
to the nearest 8-bit value rather than rejected.

Example:
    contrast-tool convert 'oklch(58% 0.08 200)'
    contrast-tool convert '#F8F9FA' --json
"""

import argparse
import json

from contrast_checker.core.colorspace import rgb8_to_hex, to_rgb8
from contrast_checker.core.luminance import relative_luminance
from contrast_checker.core.types import Command

command = Command(
    name='convert',
    help='Convert hex or oklch(...) to sRGB hex/RGB and relative luminance.',
)


@command.arguments
def arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('colour', help='Colour (hex or oklch(...))')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(args: argparse.Namespace) -> int:
    rgb = to_rgb8(args.colour)
    lum = relative_luminance(rgb)
    if args.json:
        print(json.dumps({'hex': rgb8_to_hex(rgb), 'rgb': list(rgb), 'luminance': lum}, indent=2))
    else:
        print(f'{args.colour} -> {rgb8_to_hex(rgb)}  rgb({rgb.r}, {rgb.g}, {rgb.b})  L={lum:.4f}')
    return 0
