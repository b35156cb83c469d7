"""Tests for the stylit command line."""

import json

import pytest

from stylit.cli import build_parser, main


def run_cli(capsys, *argv):
    code = main(list(argv))
    return code, capsys.readouterr().out


def write_json(path, data):
    path.write_text(json.dumps(data))
    return str(path)


def test_classify(capsys):
    code, out = run_cli(capsys, 'classify', '#FF6F61')
    assert code == 0
    result = json.loads(out)
    assert result['status'] == 'ok'
    assert result['season_tag'] == 'spring'


def test_name_compact_output(capsys):
    code, out = run_cli(capsys, '--indent', '0', 'name', '#ff0000')
    assert code == 0
    assert out.strip() == '{"hex": "#FF0000", "name": "Red"}'


def test_color(capsys):
    code, out = run_cli(capsys, 'color', '--hex', '#FF6F61', '--season', 'spring',
                        '--clarity', 'clear')
    assert code == 0
    assert json.loads(out)['verdict'] == 'great'


def test_fit(capsys, tmp_path, tee_profile, tee_product):
    profile = write_json(tmp_path / 'profile.json', tee_profile)
    product = write_json(tmp_path / 'product.json', tee_product)

    code, out = run_cli(capsys, 'fit', '--profile', profile, '--product', product)

    assert code == 0
    result = json.loads(out)
    assert result['recommended_size'] == 'M'
    assert result['confidence'] == 100


def test_evaluate_with_preset(capsys, tmp_path, tee_profile, tee_product):
    profile = write_json(tmp_path / 'profile.json', dict(tee_profile, season='winter'))
    product = write_json(tmp_path / 'product.json', dict(tee_product, hex='#FF0000'))

    code, out = run_cli(capsys, '--calibration', 'strict', 'evaluate',
                        '--profile', profile, '--product', product, '--fit-intent', 'regular')

    assert code == 0
    result = json.loads(out)
    assert result['status'] == 'OK'
    assert result['summary'].startswith('Size: M (100%)')


def test_calibration_file(capsys, tmp_path):
    calibration = write_json(tmp_path / 'calibration.json', {'unclassified_delta_e': 0.01})
    code, out = run_cli(capsys, '--calibration-file', calibration, 'classify', '#FF6F62')
    assert code == 0
    assert json.loads(out)['status'] == 'unclassified'


def test_missing_profile_file_fails(capsys, tmp_path, tee_product):
    product = write_json(tmp_path / 'product.json', tee_product)
    code, out = run_cli(capsys, 'fit', '--profile', str(tmp_path / 'nope.json'),
                        '--product', product)
    assert code == 1
    assert out == ''


def test_malformed_profile_file_fails(capsys, tmp_path, tee_product):
    profile = tmp_path / 'profile.json'
    profile.write_text('{not json')
    product = write_json(tmp_path / 'product.json', tee_product)
    code, _ = run_cli(capsys, 'fit', '--profile', str(profile), '--product', product)
    assert code == 1


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
