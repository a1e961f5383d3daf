"""Colour-name dictionaries: the bundled default and JSON/CSV loaders.

A dictionary is owned by the caller. It is loaded and indexed once here,
then passed read-only into every core call.

JSON accepts either form:

    [{"name": "Red", "hex": "#ff0000"}, ...]
    {"Red": "#ff0000", ...}

CSV needs a header row with `name` and `hex` columns.
"""

import csv
import json
from dataclasses import dataclass, field
from pathlib import Path

from colour_namer.core.names import build_lookup
from colour_namer.core.palette import CSS_COLOURS
from colour_namer.core.types import ColourEntry


@dataclass
class ColourDictionary:
    """Ordered entries plus their lowercase-hex name lookup."""

    entries: list[ColourEntry]
    lookup: dict[str, str] = field(default_factory=dict)
    source: str = ''

    @classmethod
    def from_entries(cls, entries: list[ColourEntry], source: str = '') -> 'ColourDictionary':
        return cls(entries=entries, lookup=build_lookup(entries), source=source)

    def __len__(self) -> int:
        return len(self.entries)


def default_dictionary() -> ColourDictionary:
    entries = [ColourEntry(name=name, hex=hex_val) for name, hex_val in CSS_COLOURS]
    return ColourDictionary.from_entries(entries, source='css')


def _entry(name: object, hex_val: object, where: str) -> ColourEntry:
    if not isinstance(name, str) or not isinstance(hex_val, str) or not hex_val:
        raise ValueError(f'{where}: expected string name and hex, got {name!r}, {hex_val!r}')
    return ColourEntry(name=name, hex=hex_val)


def parse_json_dictionary(text: str) -> list[ColourEntry]:
    """Parse a JSON dictionary, list-of-objects or name-to-hex object."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f'Invalid JSON dictionary: {e}') from e

    if isinstance(data, dict):
        return [_entry(name, hex_val, f'entry {name!r}') for name, hex_val in data.items()]
    if not isinstance(data, list):
        raise ValueError(f'JSON dictionary must be a list or object, got {type(data).__name__}')

    entries = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f'entry {i}: expected an object with name and hex')
        entries.append(_entry(item.get('name'), item.get('hex'), f'entry {i}'))
    return entries


def parse_csv_dictionary(text: str) -> list[ColourEntry]:
    """Parse a CSV dictionary with a `name,hex` header."""
    reader = csv.DictReader(text.splitlines())
    fields = reader.fieldnames or []
    if 'name' not in fields or 'hex' not in fields:
        raise ValueError(f'CSV dictionary needs name and hex columns, got {fields}')
    # Header is line 1
    return [_entry(row['name'], row['hex'], f'line {i}') for i, row in enumerate(reader, start=2)]


def load_dictionary(path: str) -> ColourDictionary:
    """Load a dictionary file. Format chosen by extension (.json or .csv)."""
    p = Path(path)
    text = p.read_text(encoding='utf-8-sig')  # spreadsheet exports start with a BOM
    suffix = p.suffix.lower()
    if suffix == '.json':
        entries = parse_json_dictionary(text)
    elif suffix == '.csv':
        entries = parse_csv_dictionary(text)
    else:
        raise ValueError(f'Unsupported dictionary format: {path} (expected .json or .csv)')
    return ColourDictionary.from_entries(entries, source=str(p))
