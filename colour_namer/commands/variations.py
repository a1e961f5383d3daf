"""Build the darker → selected → lighter palette for each colour.

Up to two darker and two lighter dictionary colours are chosen from the
similar candidates, those nearest the selected colour in HSL lightness.
Each bucket lists its farther colour first, so the darkest colour opens
the list and the selected colour sits between the two buckets.

Example:
    colour-namer variations '#ff0000'
    colour-namer variations --selection selection.json --json
"""

from colour_namer.core.dictionary import ColourDictionary
from colour_namer.core.types import Command, Report
from colour_namer.core.variations import find_contrast_variations

command = Command(name='variations', help='Darker, selected and lighter variations for each colour.')


@command.run
def run(colours: list[str], dictionary: ColourDictionary, report: Report, args) -> None:
    for colour in colours:
        results = find_contrast_variations(colour, dictionary.lookup, dictionary.entries)
        report.add(colour, 'variations', [info.to_dict() for info in results])
