"""Run every command except swatch, combine into a single report.

Runs: info, name, similar, variations.
Skips: swatch (writes files, run explicitly).

Example:
    colour-namer all '#ff0000' '#3366cc'
    colour-namer all --selection selection.json --json
"""

from colour_namer.core.dictionary import ColourDictionary
from colour_namer.core.types import Command, Report

command = Command(
    name='all',
    help='Run every command (except swatch). Combine into a single report.',
)

# Commands never run automatically
SKIP = {'all', 'swatch'}


@command.run
def run(colours: list[str], dictionary: ColourDictionary, report: Report, args) -> None:
    from colour_namer.registry import all_commands

    for name, cmd in sorted(all_commands().items()):
        if name in SKIP:
            continue
        cmd.execute(colours, dictionary, report, args)
