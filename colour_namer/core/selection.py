"""Decode host selection messages into a list of colours.

A design-tool host reports the colours of the current selection as:

    {"type": "selectionchange", "content": "<JSON list of colour shapes>"}

where each colour shape looks like:

    {"color": "#ff0000", "opacity": 1, "shapeInfo": [{"property": "fill", "index": 0, "shapeId": "..."}]}

The bare list of colour shapes is accepted too. Shapes without a solid
`color` (gradients, image fills) are skipped. Opacity is ignored.
"""

import json
import sys
from typing import Any

SELECTION_EVENT = 'selectionchange'


def _decode(text: str, what: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f'Invalid {what} JSON: {e}') from e


def parse_selection(text: str) -> list[str]:
    """Distinct colours in first-seen order. Dedupe ignores case, keeps the first spelling."""
    data = _decode(text, 'selection')

    if isinstance(data, dict):
        if data.get('type') != SELECTION_EVENT:
            return []
        content = data.get('content', '[]')
        data = _decode(content, 'selection content') if isinstance(content, str) else content

    if not isinstance(data, list):
        raise ValueError(f'Selection must be a list of colour shapes, got {type(data).__name__}')

    colours: list[str] = []
    seen: set[str] = set()
    for shape in data:
        if not isinstance(shape, dict):
            raise ValueError(f'Colour shape must be an object, got {shape!r}')
        colour = shape.get('color')
        if not isinstance(colour, str) or not colour:
            continue
        key = colour.lower()
        if key in seen:
            continue
        seen.add(key)
        colours.append(colour)
    return colours


def load_selection(path: str) -> list[str]:
    """Read a selection message from a file, or from stdin when path is '-'."""
    if path == '-':
        return parse_selection(sys.stdin.read())
    with open(path, encoding='utf-8') as f:
        return parse_selection(f.read())
