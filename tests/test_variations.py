"""Tests for colour_namer.core.variations — bucket selection and final assembly."""

import pytest
from colour_namer.core.names import build_lookup
from colour_namer.core.types import ColourEntry, SimilarityCandidate
from colour_namer.core.variations import (
    find_contrast_variations,
    get_variations_by_luminance,
    process_color,
    process_variations,
)

CANDIDATES = [
    SimilarityCandidate(hex='#000000', score=10, luminance=0, lum_diff=50),
    SimilarityCandidate(hex='#333333', score=10, luminance=20, lum_diff=30),
    SimilarityCandidate(hex='#CCCCCC', score=10, luminance=80, lum_diff=-30),
    SimilarityCandidate(hex='#FFFFFF', score=10, luminance=100, lum_diff=-50),
]

FOUR_REDS = [
    ColourEntry('Red', '#FF0000'),
    ColourEntry('DarkRed', '#8B0000'),
    ColourEntry('LightRed', '#FF6666'),
    ColourEntry('Blue', '#0000FF'),
]

# Lightness: 10, 27, 40, 50 (target), 60, 70, 80
RED_RAMP = [
    ColourEntry('Oxblood', '#330000'),
    ColourEntry('DarkRed', '#8b0000'),
    ColourEntry('Crimson', '#cc0000'),
    ColourEntry('Red', '#ff0000'),
    ColourEntry('Coral', '#ff3333'),
    ColourEntry('LightRed', '#ff6666'),
    ColourEntry('Blush', '#ff9999'),
    ColourEntry('Blue', '#0000ff'),
]


def _candidate(lum_diff: int) -> SimilarityCandidate:
    return SimilarityCandidate(hex='#808080', score=0, luminance=50 - lum_diff, lum_diff=lum_diff)


class TestGetVariationsByLuminance:
    def test_darker(self):
        darker = get_variations_by_luminance(CANDIDATES, 'darker')
        assert len(darker) == 2
        assert darker[0].lum_diff > darker[1].lum_diff
        assert all(c.lum_diff > 0 for c in darker)

    def test_lighter(self):
        lighter = get_variations_by_luminance(CANDIDATES, 'lighter')
        assert len(lighter) == 2
        assert lighter[0].lum_diff < lighter[1].lum_diff
        assert all(c.lum_diff < 0 for c in lighter)

    def test_darker_keeps_two_nearest(self):
        darker = get_variations_by_luminance([_candidate(40), _candidate(10), _candidate(20)], 'darker')
        assert [c.lum_diff for c in darker] == [20, 10]

    def test_lighter_keeps_two_nearest(self):
        lighter = get_variations_by_luminance([_candidate(-40), _candidate(-5), _candidate(-20)], 'lighter')
        assert [c.lum_diff for c in lighter] == [-20, -5]

    def test_zero_diff_in_neither_bucket(self):
        same = [_candidate(0)]
        assert get_variations_by_luminance(same, 'darker') == []
        assert get_variations_by_luminance(same, 'lighter') == []

    def test_fewer_than_two_not_padded(self):
        assert len(get_variations_by_luminance([_candidate(5), _candidate(-5)], 'darker')) == 1
        assert get_variations_by_luminance([], 'lighter') == []

    def test_ties_keep_input_order_before_reverse(self):
        a = SimilarityCandidate(hex='#aaaaaa', score=0, luminance=40, lum_diff=10)
        b = SimilarityCandidate(hex='#bbbbbb', score=0, luminance=40, lum_diff=10)
        assert [c.hex for c in get_variations_by_luminance([a, b], 'darker')] == ['#bbbbbb', '#aaaaaa']

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match='Unknown variation mode'):
            get_variations_by_luminance(CANDIDATES, 'brighter')


class TestProcessColor:
    def test_fields(self):
        info = process_color('#FF0000', build_lookup(FOUR_REDS), FOUR_REDS)
        assert info.name == 'Red'
        assert info.color == '#FF0000'
        assert info.rgb == 'rgb(255, 0, 0)'
        assert info.hsl == 'hsl(0, 100%, 50%)'
        assert abs(info.luminance - 0.2126) < 1e-9
        assert info.contrast_text == '#FFFFFF'
        assert info.is_selected is False
        assert info.type is None

    def test_light_colour_gets_black_text(self):
        info = process_color('#ffffff', {}, [ColourEntry('White', '#ffffff')])
        assert info.contrast_text == '#000000'

    def test_selected_flag(self):
        assert process_color('#ff0000', {}, FOUR_REDS, is_selected=True).is_selected is True

    def test_invalid_hex_degrades_to_black(self):
        info = process_color('zzz', {}, [ColourEntry('White', '#ffffff'), ColourEntry('Black', '#000000')])
        assert info.color == 'zzz'
        assert info.name == 'Black'
        assert info.rgb == 'rgb(0, 0, 0)'
        assert info.hsl == 'hsl(0, 0%, 0%)'
        assert info.luminance == 0.0
        assert info.contrast_text == '#FFFFFF'


class TestProcessVariations:
    DICTIONARY = [ColourEntry('Red', '#FF0000'), ColourEntry('DarkRed', '#8B0000')]
    VARIATIONS = [SimilarityCandidate(hex='#FF0000', score=10, luminance=50, lum_diff=0)]

    def test_darker(self):
        processed = process_variations(self.VARIATIONS, 'darker', build_lookup(self.DICTIONARY), self.DICTIONARY)
        assert processed[0].color == '#FF0000'
        assert processed[0].type == 'darker'
        assert processed[0].name == 'Red'

    def test_lighter(self):
        processed = process_variations(self.VARIATIONS, 'lighter', build_lookup(self.DICTIONARY), self.DICTIONARY)
        assert processed[0].type == 'lighter'
        assert processed[0].name == 'Red'
        assert processed[0].is_selected is False

    def test_empty(self):
        assert process_variations([], 'darker', {}, []) == []


class TestFindContrastVariations:
    def test_darker_selected_lighter(self):
        variations = find_contrast_variations('#FF0000', build_lookup(FOUR_REDS), FOUR_REDS)
        assert [v.type for v in variations] == ['darker', 'selected', 'lighter']
        assert [v.name for v in variations] == ['DarkRed', 'Red', 'LightRed']

    def test_exactly_one_selected_in_the_middle(self):
        variations = find_contrast_variations('#FF0000', build_lookup(FOUR_REDS), FOUR_REDS)
        selected = [i for i, v in enumerate(variations) if v.type == 'selected']
        assert len(selected) == 1
        assert variations[selected[0]].is_selected is True
        assert 0 < selected[0] < len(variations) - 1

    def test_full_five(self):
        variations = find_contrast_variations('#ff0000', build_lookup(RED_RAMP), RED_RAMP)
        assert [(v.type, v.color) for v in variations] == [
            ('darker', '#8b0000'),
            ('darker', '#cc0000'),
            ('selected', '#ff0000'),
            ('lighter', '#ff6666'),
            ('lighter', '#ff3333'),
        ]

    def test_selected_index_is_darker_count(self):
        dictionary = [ColourEntry('Red', '#ff0000'), ColourEntry('LightRed', '#ff6666')]
        variations = find_contrast_variations('#ff0000', build_lookup(dictionary), dictionary)
        assert [v.type for v in variations] == ['selected', 'lighter']

    def test_no_similar_colours(self):
        dictionary = [ColourEntry('Blue', '#0000ff')]
        variations = find_contrast_variations('#ff0000', build_lookup(dictionary), dictionary)
        assert len(variations) == 1
        assert variations[0].type == 'selected'
        assert variations[0].name == 'Blue'

    def test_empty_dictionary(self):
        variations = find_contrast_variations('#ff0000', {}, [])
        assert len(variations) == 1
        assert variations[0].name == ''
        assert variations[0].is_selected is True

    def test_invalid_hex_still_returns_selected(self):
        variations = find_contrast_variations('bogus', build_lookup(RED_RAMP), RED_RAMP)
        assert [v.type for v in variations] == ['selected']
        assert variations[0].rgb == 'rgb(0, 0, 0)'

    def test_idempotent(self):
        lookup = build_lookup(RED_RAMP)
        first = find_contrast_variations('#ff0000', lookup, RED_RAMP)
        second = find_contrast_variations('#ff0000', lookup, RED_RAMP)
        assert first == second

    def test_does_not_mutate_inputs(self):
        lookup = build_lookup(RED_RAMP)
        before = (dict(lookup), list(RED_RAMP))
        find_contrast_variations('#ff0000', lookup, RED_RAMP)
        assert (lookup, RED_RAMP) == before
