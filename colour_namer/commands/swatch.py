"""Render each colour's variations as a PNG strip of chips.

One square chip per variation, in variation order (darkest on the left).
Each chip is filled with its colour and labelled with its name and hex in
its contrast text colour. The selected colour's chip gets an outline.

Files are written to <out_dir>/<rrggbb>.png (normalised lowercase hex).
Colours that normalise to the same hex, such as #FF0000 and ff0000 or any
two malformed values (both black), are rendered once and share the file.
Chip size comes from --chip-size, else COLOUR_NAMER_SWATCH_SIZE, else 120.

Example:
    colour-namer swatch '#ff0000' --out-dir ./swatches --chip-size 160
"""

import os

from PIL import Image, ImageDraw, ImageFont

from colour_namer.core.convert import hex_to_rgb, rgb_to_hex
from colour_namer.core.dictionary import ColourDictionary
from colour_namer.core.env import swatch_size
from colour_namer.core.types import ColorInfo, Command, Report
from colour_namer.core.variations import find_contrast_variations

command = Command(name='swatch', help='Render variations as a PNG strip of labelled chips.')

SPACING = 4
OUTLINE = 3


def render_strip(variations: list[ColorInfo], chip_size: int) -> Image.Image:
    """Draw the variations side by side on a white strip."""
    n = len(variations)
    width = n * chip_size + (n - 1) * SPACING
    strip = Image.new('RGB', (width, chip_size), (255, 255, 255))
    draw = ImageDraw.Draw(strip)
    font = ImageFont.load_default()

    for i, info in enumerate(variations):
        x = i * (chip_size + SPACING)
        draw.rectangle((x, 0, x + chip_size - 1, chip_size - 1), fill=hex_to_rgb(info.color))
        text = hex_to_rgb(info.contrast_text)
        if info.is_selected:
            draw.rectangle((x, 0, x + chip_size - 1, chip_size - 1), outline=text, width=OUTLINE)
        draw.text((x + 8, chip_size - 34), info.name, fill=text, font=font)
        draw.text((x + 8, chip_size - 20), rgb_to_hex(*hex_to_rgb(info.color)), fill=text, font=font)

    return strip


@command.run
def run(colours: list[str], dictionary: ColourDictionary, report: Report, args) -> None:
    out_dir = getattr(args, 'out_dir', None) or '.'
    chip_size = swatch_size(getattr(args, 'chip_size', None))
    os.makedirs(out_dir, exist_ok=True)

    rendered: dict[str, dict] = {}
    for colour in colours:
        key = rgb_to_hex(*hex_to_rgb(colour))[1:]
        if key not in rendered:
            variations = find_contrast_variations(colour, dictionary.lookup, dictionary.entries)
            strip = render_strip(variations, chip_size)
            path = os.path.join(out_dir, f'{key}.png')
            strip.save(path)
            rendered[key] = {
                'file': path,
                'width': strip.width,
                'height': strip.height,
                'chips': len(variations),
            }
        report.add(colour, 'swatch', dict(rendered[key]))
