"""Describe each colour: name, RGB, HSL, relative luminance and contrast text.

Contrast text is black on backgrounds with WCAG relative luminance above
0.5 and white otherwise. Malformed hex is described as black.

Example:
    colour-namer info '#ff0000' --json
"""

from colour_namer.core.dictionary import ColourDictionary
from colour_namer.core.types import Command, Report
from colour_namer.core.variations import process_color

command = Command(name='info', help='Name, RGB, HSL, luminance and contrast text for each colour.')


@command.run
def run(colours: list[str], dictionary: ColourDictionary, report: Report, args) -> None:
    for colour in colours:
        info = process_color(colour, dictionary.lookup, dictionary.entries)
        report.add(colour, 'info', info.to_dict())
