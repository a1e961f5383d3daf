"""colour_namer.core: Foundation layer.

Contains colour conversion, name resolution, similarity scoring, variation
assembly, the bundled dictionary, type definitions and the report builder.
This module has NO dependencies on colour_namer.commands or colour_namer.registry.
Only stdlib, numpy, and PIL are allowed here.
"""

from colour_namer.core.convert import calculate_luminance, get_contrast_text, hex_to_rgb, rgb_to_hsl
from colour_namer.core.names import build_lookup, find_closest_color
from colour_namer.core.similarity import calculate_similarity_score, find_similar_colors
from colour_namer.core.types import ColorInfo, ColourEntry, SimilarityCandidate
from colour_namer.core.variations import (
    find_contrast_variations,
    get_variations_by_luminance,
    process_color,
    process_variations,
)

__all__ = [
    'ColorInfo',
    'ColourEntry',
    'SimilarityCandidate',
    'build_lookup',
    'calculate_luminance',
    'calculate_similarity_score',
    'find_closest_color',
    'find_contrast_variations',
    'find_similar_colors',
    'get_contrast_text',
    'get_variations_by_luminance',
    'hex_to_rgb',
    'process_color',
    'process_variations',
    'rgb_to_hsl',
]
