"""Tests for calibration presets, validation and environment settings."""

import json

import pytest

from config.recommendation_config import RecommendationConfig, create_custom_config, get_config
from config.settings import StylitConfig
from stylit.core.exceptions import ConfigurationError, StylitError


def test_defaults():
    config = RecommendationConfig()
    assert config.unclassified_delta_e == 12.0
    assert config.ambiguity_margin == 2.0
    assert config.name_cache_size == 100
    assert config.color_thresholds == {'great': 6.0, 'good': 12.0, 'ok': 22.0}
    assert config.deep_color_thresholds == {'great': 8.0, 'good': 16.0, 'ok': 30.0}
    assert config.score_bands == [[0.75, 6.0], [2.0, 4.0], [3.5, 2.0]]
    assert config.brand_chart_fallback is False


@pytest.mark.parametrize('overrides', [
    {'unclassified_delta_e': 0},
    {'ambiguity_margin': -1},
    {'name_cache_size': 0},
    {'naming_metric': 'euclid'},
    {'color_thresholds': {'great': 10.0, 'good': 5.0, 'ok': 22.0}},
    {'deep_color_thresholds': {'great': 8.0, 'good': 16.0}},
    {'default_fit_intent': 'baggy'},
    {'score_bands': [[5.0, 4.0], [2.0, 6.0]]},
    {'score_bands': []},
    {'high_risk_confidence_cap': 120},
    {'deep_color_lightness': 140},
])
def test_invalid_values_raise(overrides):
    with pytest.raises(ConfigurationError):
        RecommendationConfig(**overrides)


def test_configuration_error_is_a_stylit_error():
    assert issubclass(ConfigurationError, StylitError)


def test_dict_round_trip_ignores_unknown_keys():
    data = get_config('strict').to_dict()
    data['items_per_category'] = 2
    assert RecommendationConfig.from_dict(data) == get_config('strict')


def test_json_file_round_trip(tmp_path):
    path = tmp_path / 'calibration.json'
    original = create_custom_config(ambiguity_margin=3.5, brand_chart_fallback=True)
    original.save_to_json(str(path))
    assert RecommendationConfig.from_json_file(str(path)) == original


def test_bad_json_file_falls_back_to_defaults(tmp_path):
    missing = tmp_path / 'missing.json'
    assert RecommendationConfig.from_json_file(str(missing)) == RecommendationConfig()

    broken = tmp_path / 'broken.json'
    broken.write_text('{not json')
    assert RecommendationConfig.from_json_file(str(broken)) == RecommendationConfig()

    invalid = tmp_path / 'invalid.json'
    invalid.write_text(json.dumps({'name_cache_size': 0}))
    assert RecommendationConfig.from_json_file(str(invalid)) == RecommendationConfig()


def test_presets():
    strict = get_config('strict')
    lenient = get_config('lenient')
    assert strict.color_thresholds['great'] < RecommendationConfig().color_thresholds['great']
    assert lenient.unclassified_delta_e > RecommendationConfig().unclassified_delta_e
    assert lenient.brand_chart_fallback is True
    assert get_config('no-such-preset') == RecommendationConfig()


def test_presets_are_fresh_instances():
    first = get_config('default')
    first.color_thresholds['great'] = 1.0
    assert get_config('default').color_thresholds['great'] == 6.0


def test_create_custom_config_from_preset():
    config = create_custom_config('lenient', medium_risk_floor=7.0)
    assert config.medium_risk_floor == 7.0
    assert config.brand_chart_fallback is True


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv('STYLIT_CALIBRATION', 'strict')
    monkeypatch.setenv('STYLIT_UNCLASSIFIED_DELTA_E', '9')
    monkeypatch.setenv('STYLIT_NAME_CACHE_SIZE', '10')
    monkeypatch.setenv('STYLIT_DEFAULT_FIT_INTENT', 'Relaxed')

    settings = StylitConfig()
    assert settings.validate() == []

    calibration = settings.recommendation_config()
    assert calibration.unclassified_delta_e == 9.0
    assert calibration.name_cache_size == 10
    assert calibration.default_fit_intent == 'relaxed'
    assert calibration.color_thresholds == get_config('strict').color_thresholds


def test_settings_calibration_file(monkeypatch, tmp_path):
    path = tmp_path / 'calibration.json'
    path.write_text(json.dumps({'ambiguity_margin': 4.0}))
    monkeypatch.setenv('STYLIT_CALIBRATION_FILE', str(path))
    monkeypatch.setenv('STYLIT_AMBIGUITY_MARGIN', '1.0')

    calibration = StylitConfig().recommendation_config()
    assert calibration.ambiguity_margin == 1.0


def test_settings_validation_errors(monkeypatch, tmp_path):
    monkeypatch.setenv('STYLIT_CALIBRATION', 'extreme')
    monkeypatch.setenv('STYLIT_CALIBRATION_FILE', str(tmp_path / 'nope.json'))
    monkeypatch.setenv('STYLIT_AMBIGUITY_MARGIN', '-2')
    monkeypatch.setenv('STYLIT_NAME_CACHE_SIZE', '0')
    monkeypatch.setenv('STYLIT_DEFAULT_FIT_INTENT', 'baggy')
    monkeypatch.setenv('LOG_LEVEL', 'LOUD')

    errors = StylitConfig().validate()
    assert len(errors) == 6


def test_debug_mode_lowers_log_level(monkeypatch):
    monkeypatch.setenv('DEBUG_MODE', 'true')
    monkeypatch.setenv('LOG_LEVEL', 'WARNING')
    assert StylitConfig().LOG_LEVEL == 'DEBUG'


def test_print_summary(capsys, monkeypatch):
    monkeypatch.setenv('STYLIT_UNCLASSIFIED_DELTA_E', '10')
    StylitConfig().print_summary()
    out = capsys.readouterr().out
    assert "Stylit Configuration Summary" in out
    assert "unclassified_delta_e: 10.0" in out
