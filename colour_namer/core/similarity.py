"""Find dictionary colours that share the target's hue and saturation.

Lightness is left out of the score on purpose: a darker or lighter version
of a colour still counts as similar, which is what the variation selector
needs to build its darker and lighter buckets.
"""

from collections.abc import Iterable

from colour_namer.core.convert import hex_to_rgb, rgb_to_hsl
from colour_namer.core.types import ColourEntry, SimilarityCandidate

SIMILARITY_THRESHOLD = 30

HUE_WEIGHT = 1
SATURATION_WEIGHT = 0.5


def calculate_similarity_score(target_hsl: tuple[int, int, int], current_hsl: tuple[int, int, int]) -> float:
    """Weighted hue/saturation distance. Lower is more similar."""
    hue_diff = abs(target_hsl[0] - current_hsl[0])
    sat_diff = abs(target_hsl[1] - current_hsl[1])
    return hue_diff * HUE_WEIGHT + sat_diff * SATURATION_WEIGHT


def find_similar_colors(target_hex: str, dictionary: Iterable[ColourEntry]) -> list[SimilarityCandidate]:
    """Every entry scoring strictly under the threshold, in dictionary order."""
    target_hsl = rgb_to_hsl(*hex_to_rgb(target_hex))

    candidates = []
    for entry in dictionary:
        current_hsl = rgb_to_hsl(*hex_to_rgb(entry.hex))
        score = calculate_similarity_score(target_hsl, current_hsl)
        if score < SIMILARITY_THRESHOLD:
            candidates.append(
                SimilarityCandidate(
                    hex=entry.hex,
                    score=score,
                    luminance=current_hsl[2],
                    lum_diff=target_hsl[2] - current_hsl[2],
                )
            )
    return candidates
