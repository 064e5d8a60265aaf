"""Render every audited pair as a PNG contact sheet.

Runs the audit (same options as `audit`), then draws one row per result:
the foreground as a sample block and text on its background, followed by the
ratio and a pass/fail mark. Pairs whose tokens could not be resolved are drawn
as a grey placeholder.

Saves to <tmp_dir>/<audit name>_swatches.png.

Example:
    contrast-tool swatches ./tmp
    contrast-tool swatches ./tmp theme.json --critical coral
"""

import argparse
import os
import re
import sys

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from contrast_checker.commands.audit import add_audit_arguments, execute_audit
from contrast_checker.core.colorspace import to_rgb8
from contrast_checker.core.tokens import prefetch
from contrast_checker.core.types import ColourFormatError, ColorTokenResolver, ContrastResult, Command, ResolutionError

command = Command(
    name='swatches',
    help='Render audited colour pairs as a PNG contact sheet.',
)

ROW_HEIGHT = 40
SWATCH_WIDTH = 320
LABEL_WIDTH = 420
PLACEHOLDER = (128, 128, 128)
LABEL_BG = (255, 255, 255)
LABEL_FG = (17, 24, 39)


@command.arguments
def arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('tmp_dir', help='Working directory for artefacts')
    add_audit_arguments(parser)


def _pair_colours(result: ContrastResult, resolve: ColorTokenResolver) -> tuple[tuple, tuple] | None:
    is_dark = result.case.context.is_dark
    try:
        fg = to_rgb8(resolve(result.case.foreground, is_dark))
        bg = to_rgb8(resolve(result.case.background, is_dark))
    except (ResolutionError, ColourFormatError):
        return None
    return tuple(fg), tuple(bg)


def render_sheet(results: list[ContrastResult], resolve: ColorTokenResolver) -> Image.Image:
    """One row per result: swatch on the left, label on the right."""
    height = max(len(results), 1) * ROW_HEIGHT
    arr = np.zeros((height, SWATCH_WIDTH + LABEL_WIDTH, 3), dtype=np.uint8)
    arr[:, SWATCH_WIDTH:] = LABEL_BG
    pairs = [_pair_colours(r, resolve) for r in results]

    for i, pair in enumerate(pairs):
        top, bottom = i * ROW_HEIGHT, (i + 1) * ROW_HEIGHT
        if pair is None:
            arr[top:bottom, :SWATCH_WIDTH] = PLACEHOLDER
            continue
        fg, bg = pair
        arr[top:bottom, :SWATCH_WIDTH] = bg
        # solid foreground block for large-area comparison
        arr[top + 8 : bottom - 8, 8:48] = fg

    image = Image.fromarray(arr)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()
    for i, (result, pair) in enumerate(zip(results, pairs)):
        y = i * ROW_HEIGHT + ROW_HEIGHT // 2 - 6
        if pair is not None:
            draw.text((60, y), 'Aa Sample text', fill=pair[0], font=font)
        ratio = f'{result.ratio:.2f}:1' if result.ratio is not None else 'unresolved'
        mark = 'PASS' if result.passes else 'FAIL'
        label = f'{mark}  {ratio} / {result.case.min_ratio}:1  {result.case.description} ({result.case.context.value})'
        draw.text((SWATCH_WIDTH + 8, y), label, fill=LABEL_FG, font=font)
    return image


def _slug(name: str) -> str:
    return re.sub(r'[^a-z0-9]+', '_', name.lower()).strip('_') or 'audit'


@command.run
def run(args: argparse.Namespace) -> int:
    spec, report = execute_audit(args)
    resolver = prefetch(spec.cases, spec.tokens)

    os.makedirs(args.tmp_dir, exist_ok=True)
    path = os.path.join(args.tmp_dir, f'{_slug(spec.name)}_swatches.png')
    render_sheet(list(report.results), resolver).save(path)

    print(f'contrast-tool: {len(report.results)} pair(s) rendered to {path}', file=sys.stderr)
    print(path)
    return 0
