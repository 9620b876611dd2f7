# Path: checktree/engine/__init__.py
"""
Checktree Engine (PROCESS layer)

Modules:
- position: dash-delimited position codec
- entities: entity indexer (value / key / position lookups)
- hierarchy: forest reconstruction from flat entity lists
- conduction: checked / half-checked propagation and uncheck
- search: search-driven pruning

Usage:
    from checktree.engine import (
        convert_data_to_entities,
        calc_check_state_conduct,
    )

    index = convert_data_to_entities(tree_data)
    result = calc_check_state_conduct(
        index.key_entities, index.pos_entities, checked_keys
    )
"""

from .position import (
    split_position,
    join_position,
    child_position,
    parent_position,
    position_depth,
    is_root_level,
    is_pos_related,
)
from .entities import (
    Entity,
    EntityIndex,
    is_hashable,
    resolve_key,
    convert_data_to_entities,
)
from .hierarchy import HierarchyNode, flat_to_hierarchy
from .conduction import ConductionResult, calc_check_state_conduct, calc_uncheck_conduct
from .search import get_filter_table, filter_entities


__all__ = [
    'split_position',
    'join_position',
    'child_position',
    'parent_position',
    'position_depth',
    'is_root_level',
    'is_pos_related',
    'Entity',
    'EntityIndex',
    'is_hashable',
    'resolve_key',
    'convert_data_to_entities',
    'HierarchyNode',
    'flat_to_hierarchy',
    'ConductionResult',
    'calc_check_state_conduct',
    'calc_uncheck_conduct',
    'get_filter_table',
    'filter_entities',
]
