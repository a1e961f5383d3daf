"""Select darker/lighter variations and assemble the final ordered result.

Each bucket holds at most two colours, those nearest the target in HSL
lightness, and lists the farther of the two first:

    [darker_far, darker_near, selected, lighter_far, lighter_near]

So the darkest colour always opens the list and the selected colour sits
at index len(darker). With no similar colours the result is just the
selected colour.
"""

from collections.abc import Iterable, Mapping, Sequence

from colour_namer.core.convert import (
    calculate_luminance,
    format_hsl,
    format_rgb,
    get_contrast_text,
    hex_to_rgb,
    rgb_to_hsl,
)
from colour_namer.core.names import find_closest_color
from colour_namer.core.similarity import find_similar_colors
from colour_namer.core.types import ColorInfo, ColourEntry, SimilarityCandidate

VARIATION_COUNT = 2

DARKER = 'darker'
LIGHTER = 'lighter'
SELECTED = 'selected'


def get_variations_by_luminance(candidates: Iterable[SimilarityCandidate], mode: str) -> list[SimilarityCandidate]:
    """Up to two candidates nearest the target in lightness, farthest first."""
    if mode == DARKER:
        bucket = sorted((c for c in candidates if c.lum_diff > 0), key=lambda c: c.lum_diff)
    elif mode == LIGHTER:
        bucket = sorted((c for c in candidates if c.lum_diff < 0), key=lambda c: -c.lum_diff)
    else:
        raise ValueError(f'Unknown variation mode: {mode!r}. Expected {DARKER!r} or {LIGHTER!r}')
    return bucket[:VARIATION_COUNT][::-1]


def process_color(
    color: str,
    name_lookup: Mapping[str, str],
    dictionary: Sequence[ColourEntry],
    is_selected: bool = False,
) -> ColorInfo:
    rgb = hex_to_rgb(color)
    hsl = rgb_to_hsl(*rgb)
    luminance = calculate_luminance(*rgb)
    return ColorInfo(
        name=find_closest_color(color, name_lookup, dictionary),
        color=color,
        rgb=format_rgb(rgb),
        hsl=format_hsl(hsl),
        luminance=luminance,
        contrast_text=get_contrast_text(luminance),
        is_selected=is_selected,
    )


def process_variations(
    candidates: Iterable[SimilarityCandidate],
    type: str,
    name_lookup: Mapping[str, str],
    dictionary: Sequence[ColourEntry],
) -> list[ColorInfo]:
    results = []
    for candidate in candidates:
        info = process_color(candidate.hex, name_lookup, dictionary)
        info.type = type
        results.append(info)
    return results


def find_contrast_variations(
    target_hex: str,
    name_lookup: Mapping[str, str],
    dictionary: Sequence[ColourEntry],
) -> list[ColorInfo]:
    """Darker variations, the selected colour, then lighter variations."""
    similar = find_similar_colors(target_hex, dictionary)

    darker = get_variations_by_luminance(similar, DARKER)
    lighter = get_variations_by_luminance(similar, LIGHTER)

    selected = process_color(target_hex, name_lookup, dictionary, is_selected=True)
    selected.type = SELECTED

    return [
        *process_variations(darker, DARKER, name_lookup, dictionary),
        selected,
        *process_variations(lighter, LIGHTER, name_lookup, dictionary),
    ]
