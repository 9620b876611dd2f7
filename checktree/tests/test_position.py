# Path: checktree/tests/test_position.py
"""Unit tests for the position codec."""

from checktree.engine.position import (
    child_position,
    is_pos_related,
    is_root_level,
    parent_position,
    position_depth,
    split_position,
)


def test_is_pos_related_ancestor_and_descendant():
    assert is_pos_related('1-2', '1-2-3')
    assert is_pos_related('1-3-2', '1')
    assert is_pos_related('0-1', '0-1')


def test_is_pos_related_rejects_prefix_lookalikes():
    """'1-21' shares text with '1-2' but is a sibling subtree."""
    assert not is_pos_related('1-2', '1-21')
    assert not is_pos_related('0-0-1', '0-0-0')


def test_parent_position():
    assert parent_position('0-2-1') == '0-2'
    assert parent_position('0-0') == '0'
    assert parent_position('0') is None


def test_child_position_and_depth():
    pos = child_position('0-3', 4)
    assert pos == '0-3-4'
    assert split_position(pos) == ['0', '3', '4']
    assert position_depth(pos) == 3
    assert is_root_level('0-7')
    assert not is_root_level('0-7-0')
