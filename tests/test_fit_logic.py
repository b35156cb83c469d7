"""Tests for ease profiles, size scoring, risk and confidence."""

import pytest

from stylit.core.fit_logic import (INSUFFICIENT_DATA, EaseProfileEngine, RiskEstimator, SizeScorer,
                                   describe_dress_length, describe_inseam, describe_top_length,
                                   recommend_size)
from stylit.core.measurements import normalize_body_profile, normalize_size_chart
from stylit.core.models import SizeScore


@pytest.fixture
def ease_engine():
    return EaseProfileEngine()


@pytest.fixture
def scorer():
    return SizeScorer()


@pytest.fixture
def risk():
    return RiskEstimator()


def run(profile, chart, ease_engine, scorer, risk, category='upper_body',
        fit_intent='regular', stretch=False):
    return recommend_size(normalize_body_profile(profile), normalize_size_chart(chart),
                          category, fit_intent, stretch, ease_engine, scorer, risk)


# ---------------------------------------------------------------------------
# Ease profiles
# ---------------------------------------------------------------------------

def test_ease_profile_lookup(ease_engine):
    profile = ease_engine.get_ease_profile('upper_body', 'regular')
    assert profile.deltas['chest'] == 4.0
    assert profile.deltas['shoulder'] == 0.5
    assert profile.target_for('chest', 38) == 42.0
    assert profile.target_for('chest', None) is None


def test_stretch_reduces_close_fitting_zones(ease_engine):
    assert ease_engine.get_ease_profile('upper_body', 'regular', True).deltas['chest'] == 3.0
    assert ease_engine.get_ease_profile('lower_body', 'snug', True).deltas['waist'] == 0.0
    assert ease_engine.get_ease_profile('dresses', 'regular', True).deltas['bust'] == 3.0
    assert ease_engine.get_ease_profile('lower_body', 'regular', True).deltas['hips'] == 2.0


def test_oversized_ignores_stretch(ease_engine):
    for category in ('upper_body', 'lower_body', 'dresses'):
        plain = ease_engine.get_ease_profile(category, 'oversized', False).deltas
        stretch = ease_engine.get_ease_profile(category, 'oversized', True).deltas
        assert plain == stretch


def test_ease_grows_with_intent_and_never_negative(ease_engine):
    for category in ('upper_body', 'lower_body', 'dresses'):
        for stretch in (False, True):
            profiles = [ease_engine.get_ease_profile(category, intent, stretch).deltas
                        for intent in ('snug', 'regular', 'relaxed', 'oversized')]
            for zone in profiles[0]:
                values = [p[zone] for p in profiles]
                assert values == sorted(values)
                assert min(values) >= 0


def test_unknown_category_is_treated_as_top(ease_engine):
    assert ease_engine.get_ease_profile('accessories', 'regular').category == 'upper_body'
    assert ease_engine.resolve_category(' Lower_Body ') == 'lower_body'


@pytest.mark.parametrize('fit_type, requested, expected', [
    ('Relaxed Fit', 'snug', 'relaxed'),
    ('Oversized', None, 'oversized'),
    ('Slim fit', None, 'snug'),
    (None, 'oversized', 'oversized'),
    ('', 'relaxed', 'relaxed'),
    ('Boxy', None, 'regular'),
    (None, None, 'regular'),
])
def test_resolve_fit_intent(ease_engine, fit_type, requested, expected):
    assert ease_engine.resolve_fit_intent(fit_type, requested) == expected


def test_default_fit_intent_is_configurable():
    engine = EaseProfileEngine(default_fit_intent='relaxed')
    assert engine.resolve_fit_intent(None, None) == 'relaxed'
    with pytest.raises(ValueError):
        EaseProfileEngine(default_fit_intent='baggy')


def test_resolve_fabric_stretch(ease_engine):
    assert ease_engine.resolve_fabric_stretch({'material': '95% Cotton, 5% Elastane'})
    assert not ease_engine.resolve_fabric_stretch({'material': '100% cotton'})
    assert not ease_engine.resolve_fabric_stretch({'fabric_stretch': False, 'material': 'elastane'})
    assert ease_engine.resolve_fabric_stretch({'fabricStretch': True})
    assert not ease_engine.resolve_fabric_stretch(None)


def test_injected_stretch_detector():
    engine = EaseProfileEngine(stretch_detector=lambda material: 'magic' in material)
    assert engine.resolve_fabric_stretch({'material': 'magic weave'})
    assert not engine.resolve_fabric_stretch({'material': 'elastane'})


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

@pytest.mark.parametrize('garment, expected', [
    (44, 6.0),
    (44.75, 6.0),
    (45, 4.0),
    (46, 4.0),
    (47.5, 2.0),
    (48, 1.0),
    (54, 1.0),
])
def test_score_bands(scorer, garment, expected):
    assert scorer.score_metric(garment, 44, 40, 10, 'chest').score == expected


def test_too_small_penalty_is_unbounded(scorer):
    zone = scorer.score_metric(38, 44, 40, 10, 'chest')
    assert zone.too_tight
    assert zone.score == pytest.approx(-13.0)
    assert scorer.score_metric(20, 44, 40, 10, 'chest').score == pytest.approx(-40.0)


def test_missing_values_score_zero(scorer):
    zone = scorer.score_metric(None, 44, 40, 10, 'chest')
    assert not zone.valid
    assert zone.score == 0.0


def test_max_possible_score(scorer):
    assert scorer.max_possible_score('upper_body') == 18.0
    assert scorer.max_possible_score('lower_body') == 21.0
    assert scorer.max_possible_score('dresses') == 27.0


def test_rank_keeps_chart_order_on_ties():
    scores = [SizeScore('S', 0, 10.0, {}), SizeScore('M', 1, 14.0, {}), SizeScore('L', 2, 10.0, {})]
    assert [s.size_label for s in SizeScorer.rank(scores)] == ['M', 'S', 'L']


def test_confidence_rounds_half_up_and_caps(risk):
    best = SizeScore('M', 0, 1.0, {})
    assert risk.confidence(best, 8.0, 'low') == 13
    assert risk.confidence(SizeScore('M', 0, 18.0, {}), 18.0, 'medium') == 70
    assert risk.confidence(SizeScore('M', 0, 18.0, {}), 18.0, 'high') == 45
    assert risk.confidence(SizeScore('M', 0, -26.0, {}), 18.0, 'low') == 0
    assert risk.confidence(best, 0.0, 'low') == 0


# ---------------------------------------------------------------------------
# Full pipeline
# ---------------------------------------------------------------------------

def test_exact_fit_recommends_m(tee_profile, tee_chart, ease_engine, scorer, risk):
    result = run(tee_profile, tee_chart, ease_engine, scorer, risk)

    assert result.status == 'OK'
    assert result.recommended_size == 'M'
    assert result.risk == 'low'
    assert result.confidence == 100
    assert result.backup_size == 'S'
    assert [s.size_label for s in result.scores] == ['M', 'S', 'L']
    assert result.scores[0].aggregate_score == 18.0
    assert result.insights[0] == "Fit intent: regular."
    assert "Chest ease about 4 in (how roomy it will feel)." in result.insights


def test_tight_best_is_high_risk(ease_engine, scorer, risk):
    profile = {'chest': 40, 'shoulder': 17, 'height': 68}
    result = run(profile, [{'size': 'M', 'chest': 38}], ease_engine, scorer, risk)

    assert result.recommended_size == 'M'
    assert result.scores[0].aggregate_score == pytest.approx(-26.0)
    assert result.scores[0].too_tight_flags == ['chest']
    assert result.risk == 'high'
    assert result.confidence == 0
    assert result.backup_size is None
    assert result.insights[1] == "Chest will feel tight (about 2 in smaller than your chest)."


def test_high_risk_backup_is_next_larger_size(ease_engine, scorer, risk):
    profile = {'chest': 40, 'shoulder': 17, 'height': 68}
    chart = [
        {'size': 'M', 'chest': 38, 'shoulder': 17.5},
        {'size': 'L', 'chest': 39, 'shoulder': 16},
    ]
    result = run(profile, chart, ease_engine, scorer, risk)

    assert result.recommended_size == 'M'
    assert result.risk == 'high'
    assert result.backup_size == 'L'


def test_low_aggregate_is_medium_risk(ease_engine, scorer, risk):
    profile = {'chest': 38, 'shoulder': 17, 'height': 68}
    result = run(profile, [{'size': 'XL', 'chest': 52, 'shoulder': 22}], ease_engine, scorer, risk)

    assert result.scores[0].aggregate_score == 3.0
    assert result.risk == 'medium'
    assert result.confidence == 17
    assert result.backup_size is None


def test_single_row_low_risk_has_no_backup(ease_engine, scorer, risk):
    profile = {'chest': 38, 'shoulder': 17, 'height': 68}
    result = run(profile, [{'size': 'M', 'chest': 42, 'shoulder': 17.5}], ease_engine, scorer, risk)
    assert result.risk == 'low'
    assert result.backup_size is None


def test_graded_chart_picks_the_on_target_row(ease_engine, scorer, risk):
    profile = {'chest': 38, 'shoulder': 17, 'height': 68}
    chart = [
        {'size': 'S', 'chest': 40, 'shoulder': 17},
        {'size': 'M', 'chest': 42, 'shoulder': 17.5},
        {'size': 'L', 'chest': 44, 'shoulder': 18},
    ]
    result = run(profile, chart, ease_engine, scorer, risk)

    assert result.recommended_size == 'M'
    assert [(s.size_label, s.aggregate_score) for s in result.scores] == [
        ('M', 18.0), ('S', 14.0), ('L', 14.0)]
    assert result.confidence == 100


def test_graded_chart_in_centimeters(ease_engine, scorer, risk):
    profile = {'chest': 38, 'shoulder': 17, 'height': 68}
    chart = [
        {'size': 'S', 'chest': 101.6, 'shoulder': 43.18},
        {'size': 'M', 'chest': 106.68, 'shoulder': 44.45},
        {'size': 'L', 'chest': 111.76, 'shoulder': 45.72},
    ]
    result = recommend_size(normalize_body_profile(profile), normalize_size_chart(chart, unit='cm'),
                            'upper_body', 'regular', False, ease_engine, scorer, risk)
    assert result.recommended_size == 'M'


def test_row_without_chest_ranks_after_complete_rows(ease_engine, scorer, risk):
    profile = {'chest': 38, 'shoulder': 17, 'height': 68}
    chart = [
        {'size': 'X', 'shoulder': 17.5},
        {'size': 'Y', 'chest': 37, 'shoulder': 17.5},
    ]
    result = run(profile, chart, ease_engine, scorer, risk)

    assert result.recommended_size == 'Y'
    assert result.risk == 'high'
    assert [s.size_label for s in result.scores] == ['Y', 'X']
    assert result.scores[1].missing_fields == ['chest']
    assert not result.scores[1].complete


def test_incomplete_runner_up_falls_back_to_chart_order(ease_engine, scorer, risk):
    profile = {'chest': 38, 'shoulder': 17, 'height': 68}
    chart = [
        {'size': 'M', 'chest': 42, 'shoulder': 17.5},
        {'size': 'L', 'shoulder': 20},
        {'size': 'XL', 'shoulder': 17.5},
    ]
    result = run(profile, chart, ease_engine, scorer, risk)

    assert [s.size_label for s in result.scores] == ['M', 'XL', 'L']
    assert result.recommended_size == 'M'
    assert result.backup_size == 'L'
    assert result.to_dict()['scores'][1]['missing_fields'] == ['chest']


def test_chart_without_one_complete_row_is_insufficient(ease_engine, scorer, risk):
    profile = {'waist': 32, 'hips': 40, 'inseam': 30, 'height': 68}
    chart = [{'size': '32', 'waist': 32.75}, {'size': '34', 'hips': 44}]
    result = run(profile, chart, ease_engine, scorer, risk, category='lower_body')

    assert result.status == INSUFFICIENT_DATA
    assert result.missing == ['sizeChart.waist', 'sizeChart.hips']
    assert result.recommended_size is None


def test_missing_chart_is_insufficient(tee_profile, ease_engine, scorer, risk):
    result = run(tee_profile, [], ease_engine, scorer, risk)

    assert result.status == INSUFFICIENT_DATA
    assert result.missing == ['sizeChart']
    assert result.recommended_size is None
    assert result.confidence == 0
    assert result.insights[0].startswith("No size chart found for this product.")


def test_missing_user_fields_are_listed(tee_chart, ease_engine, scorer, risk):
    result = run({'chest': 38}, tee_chart, ease_engine, scorer, risk)
    assert result.status == INSUFFICIENT_DATA
    assert result.missing == ['shoulder', 'height']
    assert result.insights[0] == "Not enough measurement data to give a safe recommendation."


def test_missing_chart_fields_are_listed(ease_engine, scorer, risk):
    profile = {'waist': 32, 'hips': 40, 'inseam': 30, 'height': 68}
    result = run(profile, [{'size': 'M', 'waist': 33}], ease_engine, scorer, risk,
                 category='lower_body')
    assert result.missing == ['sizeChart.hips']


def test_lower_body_fit_with_inseam_insight(ease_engine, scorer, risk):
    profile = {'waist': 32, 'hips': 40, 'inseam': 30, 'height': 68}
    chart = [
        {'size': '32', 'waist': 32.75, 'hips': 42, 'inseam': 30},
        {'size': '34', 'waist': 34.75, 'hips': 44, 'inseam': 31},
    ]
    result = run(profile, chart, ease_engine, scorer, risk, category='lower_body')

    assert result.recommended_size == '32'
    assert result.confidence == 100
    assert result.backup_size == '34'
    assert "Inseam length should hit close to your usual length." in result.insights


def test_dress_bust_reads_chest_column(ease_engine, scorer, risk):
    profile = {'bust': 36, 'waist': 30, 'hips': 40, 'height': 66}
    chart = [{'size': 'S', 'chest': 40, 'waist': 31.5, 'hips': 42.25, 'dress_length': 36}]
    result = run(profile, chart, ease_engine, scorer, risk, category='dresses')

    assert result.status == 'OK'
    assert result.scores[0].aggregate_score == 27.0
    assert result.scores[0].zones['bust'].garment == 40
    assert "Dress length reads as around-knee to midi." in result.insights


def test_stretch_changes_first_insight(tee_profile, tee_chart, ease_engine, scorer, risk):
    result = run(tee_profile, tee_chart, ease_engine, scorer, risk, stretch=True)
    assert result.insights[0] == "Fit intent: regular (stretch fabric)."


def test_length_descriptions():
    assert describe_top_length(18, 68).startswith("Top length looks cropped")
    assert describe_top_length(21, 68).startswith("Top length looks standard")
    assert describe_inseam(32, 30).startswith("Inseam is about 2 in longer")
    assert describe_inseam(29, 30).startswith("Inseam is about 1 in shorter")
    assert describe_dress_length(28, 68).startswith("Dress length reads as mini")
    assert describe_dress_length(46, 68).startswith("Dress length reads as maxi")


def test_to_dict_shape(tee_profile, tee_chart, ease_engine, scorer, risk):
    data = run(tee_profile, tee_chart, ease_engine, scorer, risk).to_dict()
    assert data['recommended_size'] == 'M'
    assert data['scores'][0]['zones']['chest']['ease'] == 4.0
    assert data['scores'][0]['size_label'] == 'M'
