"""List dictionary colours with a similar hue and saturation.

Score is |Δhue| + 0.5·|Δsaturation| on HSL values; candidates scoring
under 30 are kept in dictionary order. Lightness is ignored by the score
and reported separately as Δl (target minus candidate, HSL percent).

Example:
    colour-namer similar '#ff0000'
"""

from colour_namer.core.dictionary import ColourDictionary
from colour_namer.core.similarity import find_similar_colors
from colour_namer.core.types import Command, Report

command = Command(name='similar', help='Dictionary colours with similar hue/saturation (score < 30).')


@command.run
def run(colours: list[str], dictionary: ColourDictionary, report: Report, args) -> None:
    for colour in colours:
        candidates = find_similar_colors(colour, dictionary.entries)
        report.add(colour, 'similar', [c.to_dict() for c in candidates])
