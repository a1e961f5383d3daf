"""Resolve each colour to its closest dictionary name.

An exact hex match wins outright. Otherwise every dictionary entry is
compared by RGB Euclidean distance and the nearest one is used; on a tie
the entry listed first in the dictionary wins.

Example:
    colour-namer name '#ff1010' 3366cc
"""

from colour_namer.core.dictionary import ColourDictionary
from colour_namer.core.names import find_closest_color
from colour_namer.core.types import Command, Report

command = Command(name='name', help='Closest dictionary name for each colour.')


@command.run
def run(colours: list[str], dictionary: ColourDictionary, report: Report, args) -> None:
    for colour in colours:
        report.add(colour, 'name', find_closest_color(colour, dictionary.lookup, dictionary.entries))
