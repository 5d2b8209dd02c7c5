"""Render the range as a PNG swatch grid without touching the workbook.

Each cell is drawn with the style its value would get: background fill,
text colour, and bold (doubled), italic (sheared) and underlined text.
--style picks the derivation (default: formatted):

  discrete   palette colours only
  formatted  palette colours plus emphasis
  random     complementary HSL colours (honours --bold)

Saves to <out_dir>/<sheet>_preview.png.

Example:
    colour-by-value preview ./out people.xlsx --range A1:C20 --style random
"""

import os
import re

from PIL import Image, ImageDraw, ImageFont

from colour_by_value.core.hashing import canonical_form
from colour_by_value.core.palette import hex_to_rgb
from colour_by_value.core.style import EMPTY_STYLE, FORMATTED, StyleBundle, derive_style
from colour_by_value.core.types import InvalidInputKind, Mode, Report
from colour_by_value.modes._styling import hasher_from

mode = Mode(
    name='preview',
    help='Render the range as a PNG swatch grid (--style discrete|formatted|random). Read-only.',
)

CELL_WIDTH = 140
CELL_HEIGHT = 28
PADDING = 6
MAX_CHARS = 18
ITALIC_SHEAR = 0.25
GRID_COLOUR = (209, 213, 219)
DEFAULT_TEXT = (0, 0, 0)


def _label(value) -> str:
    try:
        text = canonical_form(value) or ''
    except InvalidInputKind:
        return '?'
    return text if len(text) <= MAX_CHARS else text[: MAX_CHARS - 3] + '...'


def _text_mask(text: str, style: StyleBundle, font: ImageFont.ImageFont) -> Image.Image:
    """Greyscale mask of the cell text with bold, underline and italic applied."""
    mask = Image.new('L', (CELL_WIDTH, CELL_HEIGHT), 0)
    draw = ImageDraw.Draw(mask)
    if not isinstance(font, ImageFont.FreeTypeFont):
        # bitmap fallback font only covers latin-1
        text = text.encode('latin-1', 'replace').decode('latin-1')
    origin = (PADDING, PADDING)
    draw.text(origin, text, fill=255, font=font)
    if style.bold:
        draw.text((PADDING + 1, PADDING), text, fill=255, font=font)
    if style.underline and text:
        left, _top, right, bottom = draw.textbbox(origin, text, font=font)
        draw.line([(left, bottom + 1), (right, bottom + 1)], fill=255, width=1)
    if style.italic:
        mask = mask.transform(
            mask.size,
            Image.Transform.AFFINE,
            (1, ITALIC_SHEAR, -ITALIC_SHEAR * CELL_HEIGHT / 2, 0, 1, 0),
            resample=Image.Resampling.BILINEAR,
        )
    return mask


def render(cells, styles: dict[str, StyleBundle]) -> Image.Image:
    """Draw cells laid out by their sheet row/column."""
    min_row = min(c.row for c in cells)
    min_col = min(c.column for c in cells)
    rows = max(c.row for c in cells) - min_row + 1
    cols = max(c.column for c in cells) - min_col + 1

    image = Image.new('RGB', (cols * CELL_WIDTH + 1, rows * CELL_HEIGHT + 1), 'white')
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    for cell in cells:
        style = styles.get(cell.address, EMPTY_STYLE)
        x = (cell.column - min_col) * CELL_WIDTH
        y = (cell.row - min_row) * CELL_HEIGHT
        draw.rectangle(
            [x, y, x + CELL_WIDTH, y + CELL_HEIGHT],
            fill=hex_to_rgb(style.background_hex),
            outline=GRID_COLOUR,
        )
        fg = style.foreground_hex
        colour_layer = Image.new('RGB', (CELL_WIDTH, CELL_HEIGHT), hex_to_rgb(fg) if fg else DEFAULT_TEXT)
        image.paste(colour_layer, (x, y), _text_mask(_label(cell.read()), style, font))
    return image


def _safe_name(name: str) -> str:
    return re.sub(r'[^A-Za-z0-9_.-]+', '_', name) or 'sheet'


@mode.run
def run(cells, report: Report, args) -> None:
    if not cells:
        report.add_summary(mode.name, {'error': 'empty range'})
        return

    style_name = getattr(args, 'style', None) or FORMATTED
    hasher = hasher_from(args)
    bold = bool(getattr(args, 'bold', False))

    styles: dict[str, StyleBundle] = {}
    for cell in cells:
        value = cell.read()
        report.set_value(cell.address, value)
        try:
            styles[cell.address] = derive_style(value, style_name, hasher, bold=bold)
        except InvalidInputKind as e:
            report.record_error(cell.address, str(e))

    image = render(cells, styles)
    os.makedirs(args.out_dir, exist_ok=True)
    path = os.path.join(args.out_dir, f'{_safe_name(cells[0].sheet_name)}_preview.png')
    image.save(path)
    report.add_summary(
        mode.name,
        {'file': path, 'style': style_name, 'width': image.width, 'height': image.height},
    )
