"""Resolve a colour to the closest name in a reference dictionary."""

from collections.abc import Iterable, Mapping, Sequence

import numpy as np

from colour_namer.core.convert import hex_to_rgb
from colour_namer.core.types import ColourEntry


def build_lookup(dictionary: Iterable[ColourEntry]) -> dict[str, str]:
    """Index a dictionary by lowercase hex. Later duplicates overwrite earlier ones."""
    return {entry.hex.lower(): entry.name for entry in dictionary}


def rgb_distances(target: tuple[int, int, int], dictionary: Sequence[ColourEntry]) -> np.ndarray:
    """Euclidean RGB distance from target to every entry, in dictionary order."""
    # int64, not uint8: (0 - 200) must not wrap
    rgbs = np.array([hex_to_rgb(entry.hex) for entry in dictionary], dtype=np.int64).reshape(-1, 3)
    diff = rgbs - np.array(target, dtype=np.int64)
    return np.sqrt((diff * diff).sum(axis=1))


def find_closest_color(target_hex: str, name_lookup: Mapping[str, str], dictionary: Sequence[ColourEntry]) -> str:
    """Name of the exact match, else of the nearest entry by RGB distance.

    Ties keep the first entry in dictionary order. Returns '' for an empty dictionary.
    """
    exact = name_lookup.get(target_hex.lower())
    if exact:
        return exact

    if not dictionary:
        return ''

    distances = rgb_distances(hex_to_rgb(target_hex), dictionary)
    # argmin returns the first occurrence of the minimum
    return dictionary[int(np.argmin(distances))].name
