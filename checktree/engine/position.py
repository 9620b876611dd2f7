# Path: checktree/engine/position.py
"""
Position Codec

A position is a dash-delimited ordinal path such as "0-2-1". The
synthetic root is "0", so top-level nodes are "0-0", "0-1", ...

Positions are only meaningful within a single index build. They are
trusted internal data and are not validated.
"""

from typing import Optional

from ..constants import POSITION_SEPARATOR, ROOT_POSITION


def split_position(pos: str) -> list[str]:
    """Split a position into its ordinal components."""
    return pos.split(POSITION_SEPARATOR)


def join_position(fields: list[str]) -> str:
    """Join ordinal components back into a position."""
    return POSITION_SEPARATOR.join(str(f) for f in fields)


def child_position(parent_pos: str, index: int) -> str:
    """Position of the index-th child under parent_pos."""
    return f'{parent_pos}{POSITION_SEPARATOR}{index}'


def parent_position(pos: str) -> Optional[str]:
    """
    Position of the parent of pos.

    Returns None for the synthetic root, which has no parent.
    Top-level nodes return ROOT_POSITION.
    """
    fields = split_position(pos)
    if len(fields) <= 1:
        return None
    return join_position(fields[:-1])


def position_depth(pos: str) -> int:
    """Number of ordinal components in pos."""
    return len(split_position(pos))


def is_root_level(pos: str) -> bool:
    """Whether pos belongs to a top-level node."""
    return parent_position(pos) == ROOT_POSITION


def is_pos_related(pos1: str, pos2: str) -> bool:
    """
    Detect if two positions are on the same ancestor line.

    e.g. 1-2 related with 1-2-3
    e.g. 1-3-2 related with 1
    e.g. 1-2 not related with 1-21
    """
    fields1 = split_position(pos1)
    fields2 = split_position(pos2)

    for field1, field2 in zip(fields1, fields2):
        if field1 != field2:
            return False
    return True


__all__ = [
    'split_position',
    'join_position',
    'child_position',
    'parent_position',
    'position_depth',
    'is_root_level',
    'is_pos_related',
]
