"""Report builder: text and JSON output for colour-namer results."""

import json
from typing import Any

from colour_namer.core.types import Report

_TYPE_MARKS = {'darker': '▼', 'selected': '▶', 'lighter': '▲'}


def _format_info(info: dict[str, Any]) -> str:
    name = info['name'] or '(unnamed)'
    lum = f'{info["luminance"]:.3f}'
    return f'{info["color"]:<9} {name:<22} {info["rgb"]:<20} {info["hsl"]:<20} L={lum}  text {info["contrastText"]}'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    source = f'{report.dictionary_source} ({report.dictionary_size} names)'
    lines = [f'colour-namer: {len(report.colours)} colour(s), dictionary {source}', '']

    for colour, commands in report.colours.items():
        lines.append(f'── {colour}')
        for command_name, data in commands.items():
            if command_name == 'name':
                lines.append(f'  name: {data or "(none)"}')
            elif command_name == 'info':
                lines.append(f'  info: {_format_info(data)}')
            elif command_name == 'similar':
                lines.append(f'  similar: {len(data)} candidate(s)')
                for c in data:
                    lines.append(f'    {c["hex"]:<9} score={c["score"]:<5} l={c["luminance"]:<3} Δl={c["lumDiff"]}')
            elif command_name == 'variations':
                lines.append('  variations:')
                for info in data:
                    mark = _TYPE_MARKS.get(info.get('type', ''), ' ')
                    lines.append(f'    {mark} {info.get("type", ""):<8} {_format_info(info)}')
            elif command_name == 'swatch':
                lines.append(f'  swatch: {data["file"]} ({data["width"]}×{data["height"]})')
            else:
                lines.append(f'  {command_name}: {data}')
        lines.append('')

    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'dictionary': {'source': report.dictionary_source, 'size': report.dictionary_size},
        'colours': [{'colour': colour, 'results': commands} for colour, commands in report.colours.items()],
    }
    return json.dumps(obj, indent=2)
