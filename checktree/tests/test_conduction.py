# Path: checktree/tests/test_conduction.py
"""
Unit tests for check and uncheck conduction.

Sample tree: a(b(d, e), c)
"""

from checktree.constants import KEY_OF_VALUE_EMPTY
from checktree.engine.conduction import calc_check_state_conduct, calc_uncheck_conduct
from checktree.engine.entities import convert_data_to_entities
from checktree.tests.fixtures import create_chain


def conduct(index, keys):
    return calc_check_state_conduct(index.key_entities, index.pos_entities, keys)


def test_sibling_leaves_check_parent(sample_index):
    result = conduct(sample_index, ['d', 'e'])
    assert result.checked_keys == ['d', 'e', 'b']
    assert result.half_checked_keys == ['a']
    assert result.missing_keys == []


def test_single_leaf_half_checks_ancestors(sample_index):
    result = conduct(sample_index, ['d'])
    assert result.checked_keys == ['d']
    assert result.half_checked_keys == ['b', 'a']


def test_checking_folder_checks_contents(sample_index):
    result = conduct(sample_index, ['b'])
    assert set(result.checked_keys) == {'b', 'd', 'e'}
    assert result.half_checked_keys == ['a']


def test_checking_root_checks_everything(sample_index):
    result = conduct(sample_index, ['a'])
    assert set(result.checked_keys) == {'a', 'b', 'c', 'd', 'e'}
    assert result.half_checked_keys == []


def test_multiple_seeds_complete_root(sample_index):
    """c's upward walk sees b's subtree checked by the earlier seed."""
    result = conduct(sample_index, ['b', 'c'])
    assert result.checked_keys == ['b', 'd', 'e', 'c', 'a']
    assert result.half_checked_keys == []


def test_later_seed_promotes_half_checked(sample_index):
    result = conduct(sample_index, ['d', 'b'])
    assert result.checked_keys == ['d', 'b', 'e']
    assert result.half_checked_keys == ['a']


def test_half_state_carries_to_root(forest_index):
    """One unchecked grandchild keeps every ancestor at most half checked."""
    result = conduct(forest_index, ['apple', 'green_pear'])
    assert set(result.checked_keys) == {'apple', 'green_pear'}
    assert result.half_checked_keys == ['fruit', 'pear']
    assert 'veg' not in result.half_checked_keys


def test_unknown_key_reported_and_skipped(sample_index, caplog):
    result = conduct(sample_index, ['missing', 'c'])
    assert result.missing_keys == ['missing']
    assert result.checked_keys == ['c']
    assert result.half_checked_keys == ['a']
    assert any('missing does not exist' in r.getMessage() for r in caplog.records)


def test_empty_seed_set(sample_index):
    result = conduct(sample_index, [])
    assert result.checked_keys == []
    assert result.half_checked_keys == []


def test_idempotent(sample_index, forest_index):
    for index, seeds in (
        (sample_index, ['d', 'e']),
        (sample_index, ['d']),
        (forest_index, ['pear', 'carrot']),
    ):
        first = conduct(index, seeds)
        again = conduct(index, seeds)
        assert first == again

        closure = conduct(index, first.checked_keys)
        assert set(closure.checked_keys) == set(first.checked_keys)
        assert set(closure.half_checked_keys) == set(first.half_checked_keys)


def test_downward_closure_law(forest_index):
    keys = forest_index.key_entities
    for seeds in (['fruit'], ['pear'], ['apple', 'pear'], ['veg', 'red_pear']):
        checked = set(conduct(forest_index, seeds).checked_keys)
        for key in checked:
            for sub in keys[key].iter_descendants():
                assert sub.key in checked


def test_half_check_law(forest_index):
    keys = forest_index.key_entities
    result = conduct(forest_index, ['red_pear'])
    checked = set(result.checked_keys)
    half = set(result.half_checked_keys)

    assert 'pear' in half and 'pear' not in checked
    assert not checked & half
    for key in half:
        assert keys[key].children


def test_leaf_never_half_checked(forest_index):
    result = conduct(forest_index, ['fruit', 'carrot'])
    leaves = {k for k, e in forest_index.key_entities.items() if e.is_leaf}
    assert not leaves & set(result.half_checked_keys)


def test_uncheck_leaf_removes_checked_ancestors(sample_index):
    full = conduct(sample_index, ['a']).checked_keys
    remaining = calc_uncheck_conduct(full, 'd', sample_index.key_entities)
    assert remaining == [k for k in full if k not in ('a', 'b', 'd')]


def test_uncheck_folder_removes_contents(sample_index):
    full = conduct(sample_index, ['a']).checked_keys
    remaining = calc_uncheck_conduct(full, 'b', sample_index.key_entities)
    assert remaining == ['c']


def test_uncheck_stops_at_unchecked_ancestor(forest_index):
    keys = forest_index.key_entities
    checked = conduct(forest_index, ['pear']).checked_keys
    remaining = calc_uncheck_conduct(checked, 'green_pear', keys)
    assert remaining == ['red_pear']


def test_uncheck_unknown_key(sample_index, caplog):
    remaining = calc_uncheck_conduct(['c', 'ghost'], 'ghost', sample_index.key_entities)
    assert remaining == ['c']
    assert any('ghost does not exist' in r.getMessage() for r in caplog.records)


def test_uncheck_then_recheck_inverse(sample_index, forest_index):
    for index, key in (
        (sample_index, 'd'),
        (sample_index, 'b'),
        (forest_index, 'pear'),
        (forest_index, 'carrot'),
    ):
        entity = index.key_entities[key]
        original = conduct(index, [key]).checked_keys
        remaining = calc_uncheck_conduct(original, key, index.key_entities)
        result = conduct(index, remaining)

        related = {key}
        related.update(e.key for e in entity.iter_ancestors())
        related.update(e.key for e in entity.iter_descendants())
        assert not related & set(result.checked_keys) & set(original)


def test_deep_chain_conduction():
    index = convert_data_to_entities(create_chain(4000))
    result = conduct(index, ['n3999'])
    assert len(result.checked_keys) == 4000
    assert result.half_checked_keys == []

    remaining = calc_uncheck_conduct(result.checked_keys, 'n0', index.key_entities)
    assert remaining == []


def test_unhashable_seed_reported_missing(sample_index):
    result = conduct(sample_index, [['d'], 'e'])
    assert result.checked_keys == ['e']
    assert result.missing_keys == [['d']]


def test_unhashable_node_takes_part_in_conduction():
    index = convert_data_to_entities([
        {'value': {'id': 1}, 'children': [{'key': 'x'}, {'key': 'y'}]},
    ])
    result = conduct(index, ['x', 'y'])
    assert result.checked_keys == ['x', 'y', KEY_OF_VALUE_EMPTY]
    assert calc_uncheck_conduct(result.checked_keys, {'id': 1}, index.key_entities) == [
        'x', 'y', KEY_OF_VALUE_EMPTY,
    ]
