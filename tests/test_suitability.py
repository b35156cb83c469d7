"""Tests for color suitability verdicts and body-shape silhouette rules."""

import pytest

from stylit.core.color_logic import PaletteClassifier
from stylit.core.color_naming import NamedColorResolver
from stylit.core.suitability import (SuitabilitySynthesizer, body_shape_suitability,
                                     build_summary)


@pytest.fixture(scope='module')
def synthesizer():
    return SuitabilitySynthesizer(PaletteClassifier(), resolver=NamedColorResolver())


# ---------------------------------------------------------------------------
# Color
# ---------------------------------------------------------------------------

def test_palette_color_for_matching_season_is_great(synthesizer):
    result = synthesizer.color_suitability({'season': 'spring', 'clarity': 'clear'},
                                           {'hex': '#FF6F61'})
    assert result['status'] == 'OK'
    assert result['verdict'] == 'great'
    assert result['delta_e'] == 0.0
    assert result['nearest_palette_color']['name'] == 'Coral'
    assert result['classification']['season_tag'] == 'spring'
    assert result['caps_applied'] == []
    assert len(result['bullets']) == 3


def test_true_undertone_conflict_is_risky(synthesizer):
    result = synthesizer.color_suitability({'season': 'autumn'}, {'hex': '#0F52BA'})
    assert result['verdict'] == 'risky'
    assert 'undertone_conflict' in result['caps_applied']
    assert result['compatibility']['true_conflict']
    assert result['summary'] == "This color conflicts strongly with your warm undertone."


def test_explicit_undertone_overrides_season(synthesizer):
    result = synthesizer.color_suitability({'season': 'autumn', 'undertone': 'neutral'},
                                           {'hex': '#0F52BA'})
    assert result['user']['undertone'] == 'neutral'
    assert not result['compatibility']['true_conflict']
    assert 'undertone_conflict' not in result['caps_applied']


def test_vivid_color_near_face_is_capped_for_muted_user(synthesizer):
    result = synthesizer.color_suitability({'season': 'spring', 'clarity': 'muted'},
                                           {'hex': '#FF6F61', 'category': 'upper_body'})
    assert result['base_verdict'] == 'great'
    assert result['verdict'] == 'good'
    assert result['near_face'] is True
    assert result['caps_applied'] == ['vivid_near_face_cap_good']
    assert result['summary'] == "This color works for you, but it's bold."


def test_bottoms_are_not_near_face_by_default(synthesizer):
    result = synthesizer.color_suitability({'season': 'spring', 'clarity': 'muted'},
                                           {'hex': '#FF6F61', 'category': 'lower_body'})
    assert result['near_face'] is False
    assert result['caps_applied'] == ['clarity_mismatch_cap_good']

    explicit = synthesizer.color_suitability({'season': 'spring', 'clarity': 'muted'},
                                             {'hex': '#FF6F61', 'category': 'lower_body',
                                              'near_face': True})
    assert explicit['near_face'] is True
    assert explicit['caps_applied'] == ['vivid_near_face_cap_good']


def test_fall_alias_and_vivid_clarity(synthesizer):
    result = synthesizer.color_suitability({'season': 'Fall', 'clarity': 'vivid'},
                                           {'hex': '#B4441C'})
    assert result['user']['season'] == 'autumn'
    assert result['user']['clarity'] == 'clear'
    assert result['delta_e'] == 0.0
    assert result['nearest_palette_color']['name'] == 'Rust'


def test_color_name_resolves_to_hex(synthesizer):
    result = synthesizer.color_suitability({'season': 'winter', 'clarity': 'clear'},
                                           {'color_name': 'Red'})
    assert result['status'] == 'OK'
    assert result['classification']['dominant_hex'] == '#FF0000'
    assert result['nearest_palette_color']['name'] == 'True red'


def test_other_season_color_is_never_great(synthesizer):
    # Coral classifies as spring; a summer user can at best get 'good'.
    result = synthesizer.color_suitability({'season': 'summer', 'undertone': 'neutral',
                                            'clarity': 'clear'}, {'hex': '#FF6F61'})
    assert result['verdict'] != 'great'


@pytest.mark.parametrize('user, garment', [
    ({}, {'hex': '#FF6F61'}),
    ({'season': 'monsoon'}, {'hex': '#FF6F61'}),
    ({'season': 'spring'}, {}),
])
def test_missing_inputs_are_insufficient(synthesizer, user, garment):
    result = synthesizer.color_suitability(user, garment)
    assert result['status'] == 'INSUFFICIENT_DATA'
    assert result['verdict'] == 'insufficient_data'
    assert result['summary'] == "Need color information to analyze."


def test_invalid_hex_is_insufficient(synthesizer):
    result = synthesizer.color_suitability({'season': 'spring'}, {'hex': '#ZZZ'})
    assert result['status'] == 'INSUFFICIENT_DATA'
    assert result['summary'] == "Could not analyze color."
    assert result['bullets'] == ["Invalid color hex code: #ZZZ"]


def test_verdicts_are_deterministic(synthesizer):
    user = {'season': 'winter', 'clarity': 'clear', 'depth': 'deep'}
    for hex_code in ('#0F52BA', '#C96541', '#808080', '#39FF14'):
        first = synthesizer.color_suitability(user, {'hex': hex_code})
        second = synthesizer.color_suitability(user, {'hex': hex_code})
        assert first == second
        assert first['verdict'] in ('great', 'good', 'ok', 'risky')


# ---------------------------------------------------------------------------
# Body shape
# ---------------------------------------------------------------------------

@pytest.mark.parametrize('shape, category, fit_type, verdict, rule', [
    ('Pear', 'upper_body', 'Oversized Fit', 'flattering', 'pear_roomy_top'),
    ('pear', 'lower_body', 'skinny', 'neutral', 'pear_slim_bottom'),
    ('apple', 'dresses', None, 'flattering', 'apple_dress'),
    ('oval', 'upper_body', 'slim', 'risky', 'apple_slim_top'),
    ('rectangle', 'dresses', 'regular', 'ok', 'rectangle_dress'),
    ('hourglass', 'dresses', None, 'flattering', 'hourglass_defined_dress'),
    ('hourglass', 'lower_body', 'oversized', 'neutral', 'hourglass_oversized'),
    ('inverted triangle', 'upper_body', 'oversized', 'risky', 'inverted_oversized_top'),
    ('inverted triangle', 'lower_body', 'relaxed', 'flattering', 'inverted_roomy_bottom'),
    ('rectangle', 'upper_body', 'slim', 'ok', 'versatile'),
])
def test_body_shape_rules(shape, category, fit_type, verdict, rule):
    result = body_shape_suitability({'body_shape': shape},
                                    {'category': category, 'fit_type': fit_type})
    assert result['status'] == 'OK'
    assert result['verdict'] == verdict
    assert result['rule'] == rule
    assert result['reasons']


def test_body_shape_accepts_camel_case():
    result = body_shape_suitability({'bodyShape': 'pear'},
                                    {'category': 'upper_body', 'fitType': 'relaxed'})
    assert result['rule'] == 'pear_roomy_top'


def test_missing_body_shape_is_insufficient():
    result = body_shape_suitability({}, {'category': 'upper_body'})
    assert result['status'] == 'INSUFFICIENT_DATA'
    assert result['verdict'] is None


def test_summary_line(synthesizer):
    verdict = synthesizer.evaluate_suitability({'season': 'spring', 'clarity': 'clear',
                                                'body_shape': 'pear'},
                                               {'hex': '#FF6F61', 'category': 'upper_body',
                                                'fit_type': 'relaxed'})
    assert verdict['summary'] == "Color: great • Silhouette: flattering"

    assert build_summary({'status': 'INSUFFICIENT_DATA'}, None) == "Color: needs setup"
    assert build_summary(None, {'status': 'INSUFFICIENT_DATA'}) == "Silhouette: needs setup"


def test_evaluate_suitability_can_skip_parts(synthesizer):
    verdict = synthesizer.evaluate_suitability({'body_shape': 'apple'}, {'category': 'dresses'},
                                               include=('body',))
    assert verdict['color'] is None
    assert verdict['summary'] == "Silhouette: flattering"
