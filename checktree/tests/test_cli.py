# Path: checktree/tests/test_cli.py
"""Smoke tests for the checktree CLI."""

import json

from checktree.cli import build_parser, main, match_key
from checktree.engine import convert_data_to_entities
from checktree.tests.fixtures import create_forest, create_sample_tree


def write_tree(tmp_path, data):
    path = tmp_path / 'tree.json'
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


def test_parser_defaults(tmp_path):
    args = build_parser().parse_args([str(tmp_path / 'tree.json')])
    assert args.check == []
    assert args.uncheck is None
    assert args.strategy is None
    assert not args.strict


def test_check_show_parent(tmp_path, capsys):
    path = write_tree(tmp_path, create_sample_tree())
    assert main([str(path), '--check', 'd', 'e', '--strategy', 'show-parent']) == 0

    out = capsys.readouterr().out
    assert 'Node B' in out
    assert 'half checked' in out


def test_uncheck_and_search(tmp_path, capsys):
    path = write_tree(tmp_path, create_forest())
    code = main([
        str(path), '--check', 'fruit', '--uncheck', 'apple', '--search', 'pear',
    ])
    assert code == 0
    assert 'GREEN_PEAR' in capsys.readouterr().out.upper()


def test_strict_mode_reports_unknown_keys(tmp_path, capsys):
    path = write_tree(tmp_path, create_sample_tree())
    assert main([str(path), '--check', 'b', 'ghost', '--strict']) == 0
    assert 'ghost' in capsys.readouterr().out


def test_missing_file(tmp_path):
    assert main([str(tmp_path / 'nope.json')]) == 1


def test_invalid_json(tmp_path):
    path = tmp_path / 'tree.json'
    path.write_text('{not json', encoding='utf-8')
    assert main([str(path)]) == 1


def test_strict_mode_applies_uncheck(tmp_path, capsys):
    path = write_tree(tmp_path, create_sample_tree())
    assert main([str(path), '--check', 'b', 'd', '--strict', '--uncheck', 'd']) == 0

    out = capsys.readouterr().out
    assert 'Node B' in out
    assert 'Node D' not in out


def test_integer_keys_matched():
    index = convert_data_to_entities([{'key': 1, 'children': [{'key': 2}]}, {'key': 'x'}])
    assert match_key(index, '2') == 2
    assert match_key(index, 'x') == 'x'
    assert match_key(index, '7') == '7'
    assert match_key(index, 'ghost') == 'ghost'


def test_check_integer_keyed_tree(tmp_path, capsys):
    data = [{'key': 1, 'value': 'one', 'title': 'One', 'children': [
        {'key': 2, 'value': 'two', 'title': 'Two'},
    ]}]
    path = write_tree(tmp_path, data)
    assert main([str(path), '--check', '2', '--strategy', 'show-parent']) == 0

    out = capsys.readouterr().out
    assert 'Unknown keys' not in out
    assert 'One' in out
